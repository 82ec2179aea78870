"""Environment-driven report settings."""

from __future__ import annotations

import logging

import pytest

from nuclei_report.services.report_config import (
    DEFAULT_HTML_TITLE,
    HTML_TITLE_ENV,
    LOG_LEVEL_ENV,
    ReportConfig,
)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(HTML_TITLE_ENV, raising=False)

    config = ReportConfig.from_env()

    assert config.log_level == logging.INFO
    assert config.html_title == DEFAULT_HTML_TITLE


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("error", logging.ERROR),
        ("loud", logging.INFO),
        ("   ", logging.INFO),
    ],
)
def test_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)

    assert ReportConfig.from_env().log_level == expected


def test_html_title_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HTML_TITLE_ENV, "  Weekly external scan ")

    assert ReportConfig.from_env().html_title == "Weekly external scan"

"""Environment-driven settings for report generation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "NUCLEI_REPORT_LOG_LEVEL"
HTML_TITLE_ENV = "NUCLEI_REPORT_HTML_TITLE"

DEFAULT_LOG_LEVEL = logging.INFO
"""Progress messages (load and filter counts) are visible by default."""

DEFAULT_HTML_TITLE = "Nuclei Scan Result"
"""Document title used for the HTML report."""


def _env_log_level(name: str, default: int) -> int:
    """Return a logging level named by the environment, or ``default``."""

    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        return default
    return level


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class ReportConfig:
    """Container describing every configurable report setting."""

    log_level: int
    html_title: str

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Return settings using the configured environment variables."""

        return cls(
            log_level=_env_log_level(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
            html_title=_env_str(HTML_TITLE_ENV, DEFAULT_HTML_TITLE),
        )

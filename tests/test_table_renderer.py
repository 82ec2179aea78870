"""Terminal table layout."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from nuclei_report.domain.models import Finding
from nuclei_report.services.jsonl_loader import load_findings
from nuclei_report.services.table_renderer import (
    BORDER,
    COLUMNS,
    format_table,
    render_table,
)


def _finding(**overrides: str) -> Finding:
    values = {
        "template_id": "CVE-2021-44228",
        "name": "Apache Log4j RCE",
        "severity": "critical",
        "host": "app.example.test",
        "matched_at": "https://app.example.test/login",
    }
    values.update(overrides)
    return Finding(**values)


def test_border_matches_column_widths() -> None:
    segments = BORDER.strip("+").split("+")

    assert [len(segment) for segment in segments] == [
        width + 2 for _, width in COLUMNS
    ]
    assert [width for _, width in COLUMNS] == [24, 48, 8, 18, 62]


def test_header_only_for_empty_input() -> None:
    lines = format_table([]).splitlines()

    assert lines == [
        BORDER,
        "| Template ID              | Name"
        + " " * 45
        + "| Severity | Host               | Matched At"
        + " " * 53
        + "|",
        BORDER,
    ]


def test_every_row_is_followed_by_a_border() -> None:
    findings = [_finding(template_id="A"), _finding(template_id="B")]

    lines = format_table(findings).splitlines()

    assert len(lines) == 3 + 2 * len(findings)
    assert lines[4] == BORDER
    assert lines[6] == BORDER
    assert lines[3].startswith("| A" + " " * 24 + "| Apache Log4j RCE")
    assert all(len(line) == len(BORDER) for line in lines)


def test_long_values_overflow_instead_of_truncating() -> None:
    long_name = "N" * 60
    lines = format_table([_finding(name=long_name)]).splitlines()

    row = lines[3]
    assert long_name in row
    assert len(row) == len(BORDER) + (60 - 48)


def test_render_table_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    render_table([_finding()])

    captured = capsys.readouterr()
    assert "CVE-2021-44228" in captured.out
    assert captured.err == ""


def test_render_table_writes_to_given_stream() -> None:
    buffer = io.StringIO()

    render_table([_finding()], stream=buffer)

    assert buffer.getvalue() == format_table([_finding()])


def test_surrogate_escapes_render_to_utf8_stream(tmp_path: Path) -> None:
    data = tmp_path / "scan.jsonl"
    data.write_text(
        '{"template-id":"T1","info":{"name":"bad \\ud800 name","severity":"low"},'
        '"host":"h","matched-at":"u"}\n',
        encoding="utf-8",
    )
    buffer = io.BytesIO()
    stream = io.TextIOWrapper(buffer, encoding="utf-8")

    render_table(load_findings(data), stream=stream)

    assert "bad \ufffd name" in buffer.getvalue().decode("utf-8")

"""Fixed-width bordered table output for terminals."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from ..domain.models import Finding

COLUMNS: tuple[tuple[str, int], ...] = (
    ("Template ID", 24),
    ("Name", 48),
    ("Severity", 8),
    ("Host", 18),
    ("Matched At", 62),
)
"""Column titles and their minimum widths, in display order."""

BORDER = "+" + "+".join("-" * (width + 2) for _, width in COLUMNS) + "+"


def _format_row(values: Iterable[str]) -> str:
    # Values longer than the column overflow it; nothing is truncated.
    cells = (
        f" {value:<{width}} " for value, (_, width) in zip(values, COLUMNS)
    )
    return "|" + "|".join(cells) + "|"


def format_table(findings: Iterable[Finding]) -> str:
    """Return the bordered table for ``findings`` as a single string."""

    lines = [BORDER, _format_row(title for title, _ in COLUMNS), BORDER]
    for finding in findings:
        lines.append(_format_row(finding.to_mapping().values()))
        lines.append(BORDER)
    return "\n".join(lines) + "\n"


def render_table(findings: Iterable[Finding], stream: TextIO | None = None) -> None:
    """Write the table to ``stream`` (standard output by default)."""

    stream = stream or sys.stdout
    stream.write(format_table(findings))
    stream.flush()

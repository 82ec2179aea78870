"""Load, filter and order findings ahead of rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..domain.models import Finding
from .finding_sort import sort_findings
from .jsonl_loader import load_findings
from .severity_filter import filter_by_severity


def build_report(path: Path | str, severities: Iterable[str] = ()) -> list[Finding]:
    """Return the findings from ``path`` ready for either renderer."""

    findings = load_findings(path)
    findings = filter_by_severity(findings, severities)
    return sort_findings(findings)

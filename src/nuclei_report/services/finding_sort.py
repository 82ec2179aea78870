"""Deterministic ordering for rendered findings."""

from __future__ import annotations

from ..domain.models import Finding
from ..domain.severity import severity_rank


def finding_sort_key(finding: Finding) -> tuple[int, str]:
    """Severity rank first, template identifier to break ties."""

    return severity_rank(finding.severity), finding.template_id


def sort_findings(findings: list[Finding]) -> list[Finding]:
    """Stable in-place sort; returns the same list for chaining."""

    findings.sort(key=finding_sort_key)
    return findings

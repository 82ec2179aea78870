"""Case-insensitive severity allow-list filtering."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..domain.models import Finding

_LOG = logging.getLogger(__name__)


def parse_severity_list(raw: str | None) -> tuple[str, ...]:
    """Split a comma separated severity list, trimming and dropping blanks."""

    if not raw:
        return ()
    entries = (entry.strip() for entry in raw.split(","))
    return tuple(entry for entry in entries if entry)


def filter_by_severity(
    findings: Sequence[Finding], severities: Iterable[str]
) -> list[Finding]:
    """
    Return the findings whose severity matches any entry in ``severities``.

    Matching is exact string equality after case folding. An empty
    ``severities`` keeps every finding.
    """

    criteria = tuple(severities)
    if not criteria:
        return list(findings)

    wanted = {severity.casefold() for severity in criteria}
    kept = [finding for finding in findings if finding.severity.casefold() in wanted]
    _LOG.info(
        "Filtered findings: %d with severities %s", len(kept), ", ".join(criteria)
    )
    return kept

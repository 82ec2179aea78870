"""Severity ranking shared by sorting and unknown-label handling."""

from __future__ import annotations

from types import MappingProxyType

UNKNOWN_SEVERITY = "unknown"

SEVERITY_RANKS = MappingProxyType(
    {
        "critical": 1,
        "high": 2,
        "medium": 3,
        "low": 4,
        "info": 5,
        UNKNOWN_SEVERITY: 6,
    }
)
"""Read-only rank table; lower ranks sort first."""

UNKNOWN_RANK = SEVERITY_RANKS[UNKNOWN_SEVERITY]


def severity_rank(label: str | None) -> int:
    """Return the rank for ``label``, falling back to the unknown rank."""

    if not label:
        return UNKNOWN_RANK
    return SEVERITY_RANKS.get(label.casefold(), UNKNOWN_RANK)

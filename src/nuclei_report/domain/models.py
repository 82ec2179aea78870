"""Core entities without I/O for nuclei-report."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

_SURROGATE_PATTERN = re.compile("[\ud800-\udfff]")
"""Lone surrogates survive ``json.loads`` but cannot be encoded as UTF-8."""


def _string_field(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return _SURROGATE_PATTERN.sub("\ufffd", value)


@dataclass(frozen=True)
class Finding:
    """One scanner finding as decoded from a JSONL line."""

    template_id: str
    name: str
    severity: str
    host: str
    matched_at: str

    @classmethod
    def from_mapping(cls, obj: Any) -> "Finding":
        """
        Build a finding from one decoded JSON object.

        Missing keys and ``null`` values become empty strings; values of the
        wrong JSON type raise :class:`ValueError`.
        """

        if not isinstance(obj, Mapping):
            raise ValueError("record must be a JSON object")
        info = obj.get("info")
        if info is None:
            info = {}
        if not isinstance(info, Mapping):
            raise ValueError("field 'info' must be an object")
        return cls(
            template_id=_string_field(obj, "template-id"),
            name=_string_field(info, "name"),
            severity=_string_field(info, "severity"),
            host=_string_field(obj, "host"),
            matched_at=_string_field(obj, "matched-at"),
        )

    def to_mapping(self) -> dict[str, str]:
        return {
            "Template ID": self.template_id,
            "Name": self.name,
            "Severity": self.severity,
            "Host": self.host,
            "Matched At": self.matched_at,
        }

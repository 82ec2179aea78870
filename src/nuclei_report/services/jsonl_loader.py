"""Newline-delimited JSON loader for scanner findings."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..domain.models import Finding

_LOG = logging.getLogger(__name__)


class DataFileError(OSError):
    """Raised when the findings file cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read data file {path}: {reason}")
        self.path = path


def decode_finding(line: str) -> Finding:
    """Decode a single JSONL line into a :class:`Finding`."""

    return Finding.from_mapping(json.loads(line))


def load_findings(path: Path | str) -> list[Finding]:
    """
    Read every finding from ``path`` in file order.

    Lines that fail to decode are logged and skipped. Failure to read the file
    itself raises :class:`DataFileError`.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DataFileError(path, exc.strerror or str(exc)) from exc

    findings: list[Finding] = []
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line:
            continue
        try:
            findings.append(decode_finding(line))
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError subclass
            _LOG.warning("Failed to parse line: %s (%s)", line, exc)

    _LOG.info("Loaded %d findings from %s", len(findings), path)
    return findings

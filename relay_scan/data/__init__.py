"""Candidate source interfaces and configuration helpers.

Sources produce the raw relay list the selection engine filters and probes.
They report any failure to produce a list with `SourceUnavailableError`;
individual malformed records are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from relay_scan.models.candidate import Candidate


@dataclass(slots=True)
class SourceConfig:
    """Configuration block for selecting and tuning the candidate source."""

    primary: str = "mullvad"
    fallback_file: str | None = None
    timeout_seconds: float = 10.0
    active_only: bool = False


@runtime_checkable
class CandidateSource(Protocol):
    """Minimal interface implemented by all candidate sources."""

    name: str

    def fetch_candidates(self) -> list[Candidate]:
        """Return relays in source order."""


__all__ = ["CandidateSource", "SourceConfig"]

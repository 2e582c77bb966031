"""Shared parsing of relay record listings."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from relay_scan.exceptions import SchemaError, SourceUnavailableError
from relay_scan.models.candidate import Candidate

log = logging.getLogger(__name__)


def parse_relay_records(payload: Any, *, source: str, active_only: bool = False) -> list[Candidate]:
    """Convert a decoded relay listing into candidates.

    The listing must be a JSON array. Records that fail schema checks are
    logged and skipped so one bad entry does not sink the whole scan.
    """

    if not isinstance(payload, list):
        raise SourceUnavailableError(f"{source} relay listing must be a list, got {type(payload).__name__}")

    candidates: list[Candidate] = []
    skipped = 0
    for record in payload:
        try:
            candidate = Candidate.from_record(record)
        except SchemaError as exc:
            skipped += 1
            log.warning("Skipping malformed relay record", extra={"source": source, "error": str(exc)})
            continue
        if active_only and not candidate.active:
            continue
        candidates.append(candidate)

    if skipped:
        log.info("Relay records skipped", extra={"source": source, "skipped": skipped})
    return candidates


def dedupe_by_hostname(candidates: Iterable[Candidate]) -> list[Candidate]:
    seen: set[str] = set()
    unique: list[Candidate] = []
    for candidate in candidates:
        if candidate.hostname in seen:
            continue
        seen.add(candidate.hostname)
        unique.append(candidate)
    return unique


__all__ = ["dedupe_by_hostname", "parse_relay_records"]

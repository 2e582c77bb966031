"""Relay listings read from local JSON snapshots."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from relay_scan.data.records import dedupe_by_hostname, parse_relay_records
from relay_scan.exceptions import SourceUnavailableError
from relay_scan.models.candidate import Candidate

log = logging.getLogger(__name__)


class FileRelaySource:
    """Read a relay listing saved in the Mullvad API format."""

    name = "file"

    def __init__(self, path: Path | str, *, active_only: bool = False) -> None:
        self.path = Path(path)
        self.active_only = active_only

    def fetch_candidates(self) -> list[Candidate]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceUnavailableError(f"Cannot read relay file {self.path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SourceUnavailableError(f"Relay file {self.path} is not valid JSON: {exc}") from exc

        candidates = dedupe_by_hostname(parse_relay_records(payload, source=self.name, active_only=self.active_only))
        log.info("Loaded relay list from file", extra={"relays": len(candidates), "path": str(self.path)})
        return candidates


__all__ = ["FileRelaySource"]

"""Factory for candidate sources with optional fallback chaining."""

from __future__ import annotations

import logging

from relay_scan.data import SourceConfig
from relay_scan.data.file_source import FileRelaySource
from relay_scan.data.mullvad import MullvadRelaySource
from relay_scan.exceptions import ConfigValidationError, DependencyError, SourceUnavailableError
from relay_scan.models.candidate import Candidate

log = logging.getLogger(__name__)


class FallbackCandidateSource:
    """Wrap a primary source and fall back when SourceUnavailableError is raised."""

    def __init__(self, primary, fallback, *, logger: logging.Logger | None = None) -> None:
        self.primary = primary
        self.fallback = fallback
        self.logger = logger or log
        self.name = f"{getattr(primary, 'name', 'primary')}+{getattr(fallback, 'name', 'fallback')}"

    def fetch_candidates(self) -> list[Candidate]:
        try:
            return self.primary.fetch_candidates()
        except SourceUnavailableError as exc:
            self.logger.warning("Primary relay source failed; falling back", extra={"error": str(exc)})
            return self.fallback.fetch_candidates()


def get_candidate_source(name: str, **kwargs):
    name = name.lower()
    if name == "mullvad":
        allowed = {"server_type", "base_url", "timeout", "active_only", "http_get"}
        return MullvadRelaySource(**{k: v for k, v in kwargs.items() if k in allowed})
    if name == "file":
        path = kwargs.get("path")
        if not path:
            raise ConfigValidationError("file source requires a path (--source-file)")
        return FileRelaySource(path, active_only=bool(kwargs.get("active_only", False)))
    raise DependencyError(f"Unknown relay source: {name}")


def build_candidate_source(config: SourceConfig, *, server_type: str = "all", source_file: str | None = None, **kwargs):
    """Build the configured source, wrapping it with a file fallback when one is set."""

    primary = get_candidate_source(
        config.primary,
        server_type=server_type,
        timeout=config.timeout_seconds,
        active_only=config.active_only,
        path=source_file,
        **kwargs,
    )
    if config.fallback_file:
        secondary = FileRelaySource(config.fallback_file, active_only=config.active_only)
        return FallbackCandidateSource(primary, secondary)
    return primary


__all__ = ["FallbackCandidateSource", "build_candidate_source", "get_candidate_source"]

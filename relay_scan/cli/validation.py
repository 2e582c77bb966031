"""CLI validation helpers."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

from relay_scan.exceptions import ConfigValidationError
from relay_scan.models.candidate import Candidate

PROBE_METHODS = {"ping", "tcp"}
SOURCES = {"mullvad", "file"}
OUTPUT_SUFFIXES = {".csv", ".json"}


def require_positive(name: str, value: int | float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ConfigValidationError(f"{name} must be a finite number > 0")


def require_non_negative(name: str, value: int | float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ConfigValidationError(f"{name} must be a finite number >= 0")


def require_choice(name: str, value: str, allowed: Iterable[str]) -> None:
    allowed = sorted(allowed)
    if value not in allowed:
        raise ConfigValidationError(f"{name} must be one of {allowed}, got {value!r}")


def validate_scan_inputs(
    *,
    method: str,
    source: str,
    source_file: str | None,
    max_workers: int,
    tcp_port: int,
    timeout: float,
    interval: float,
    output: Path | None = None,
) -> None:
    require_choice("method", method, PROBE_METHODS)
    require_choice("source", source, SOURCES)
    if source == "file" and not source_file:
        raise ConfigValidationError("--source-file is required with --source file")
    require_non_negative("max_workers", max_workers)
    require_positive("timeout", timeout)
    require_non_negative("interval", interval)
    if not 0 < tcp_port < 65536:
        raise ConfigValidationError("tcp_port must be between 1 and 65535")
    if output is not None and output.suffix.lower() not in OUTPUT_SUFFIXES:
        raise ConfigValidationError(f"output must end in one of {sorted(OUTPUT_SUFFIXES)}")


def ensure_known_country(country: str | None, candidates: Iterable[Candidate]) -> None:
    """Reject a country code that no relay in the listing carries."""

    if country is None:
        return
    codes = {c.country_code.lower() for c in candidates}
    if codes and country.strip().lower() not in codes:
        raise ConfigValidationError(
            f"Unknown country code '{country}'. Run `relay-scan countries` to list available codes."
        )


__all__ = [
    "ensure_known_country",
    "require_choice",
    "require_non_negative",
    "require_positive",
    "validate_scan_inputs",
]

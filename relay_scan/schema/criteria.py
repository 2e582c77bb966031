"""Selection criteria schema and validation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Literal, Optional

from relay_scan.exceptions import ConfigValidationError
from relay_scan.models.candidate import HOSTING_MODES, PROTOCOL_TYPES

ServerType = Literal["openvpn", "bridge", "wireguard", "all"]
RunMode = Literal["ram", "disk", "all"]

SERVER_TYPES: frozenset[str] = PROTOCOL_TYPES | {"all"}
RUN_MODES: frozenset[str] = HOSTING_MODES | {"all"}


@dataclass(frozen=True, slots=True)
class SelectionCriteria:
    country: Optional[str] = None
    server_type: ServerType = "all"
    min_port_speed: int = 1
    run_mode: RunMode = "all"
    attempts: int = 3
    interval: float = 0.2
    limit: int = 5
    attempt_timeout: float = 1.0

    def __post_init__(self) -> None:
        if self.country is not None and not str(self.country).strip():
            raise ConfigValidationError("country must be a non-empty code when set")
        if self.server_type not in SERVER_TYPES:
            raise ConfigValidationError(f"type must be one of {sorted(SERVER_TYPES)}, got {self.server_type!r}")
        if self.run_mode not in RUN_MODES:
            raise ConfigValidationError(f"run_mode must be one of {sorted(RUN_MODES)}, got {self.run_mode!r}")
        if self.min_port_speed < 0:
            raise ConfigValidationError("min_port_speed must be >= 0")
        if isinstance(self.attempts, bool) or int(self.attempts) != self.attempts or self.attempts <= 0:
            raise ConfigValidationError("attempts must be a positive integer")
        if not math.isfinite(self.interval) or self.interval < 0:
            raise ConfigValidationError("interval must be a finite number >= 0")
        if self.limit < 0:
            raise ConfigValidationError("limit must be >= 0 (0 = unbounded)")
        if not math.isfinite(self.attempt_timeout) or self.attempt_timeout <= 0:
            raise ConfigValidationError("attempt_timeout must be a finite number > 0")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectionCriteria":
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigValidationError(f"unknown criteria options: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "country": self.country,
            "server_type": self.server_type,
            "min_port_speed": self.min_port_speed,
            "run_mode": self.run_mode,
            "attempts": self.attempts,
            "interval": self.interval,
            "limit": self.limit,
            "attempt_timeout": self.attempt_timeout,
        }


__all__ = ["RUN_MODES", "SERVER_TYPES", "RunMode", "SelectionCriteria", "ServerType"]

"""Probe sample and aggregated scan result models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Literal, Optional

from relay_scan.models.candidate import Candidate

FailureKind = Literal["timeout", "unreachable", "launch_error", "malformed", "error"]

# Score for relays without a single successful probe; sorts after every finite latency.
UNRANKED: float = math.inf


@dataclass(frozen=True, slots=True)
class ProbeSample:
    """Outcome of a single probe attempt: a latency or a failure marker."""

    rtt_ms: Optional[float] = None
    failure: Optional[FailureKind] = None
    detail: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.rtt_ms is None) == (self.failure is None):
            raise ValueError("ProbeSample needs exactly one of rtt_ms or failure")

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, rtt_ms: float) -> "ProbeSample":
        return cls(rtt_ms=float(rtt_ms))

    @classmethod
    def failed(cls, failure: FailureKind, detail: str | None = None) -> "ProbeSample":
        return cls(failure=failure, detail=detail)


@dataclass(frozen=True, slots=True)
class AggregatedResult:
    """Per-relay summary of one scan.

    ``score`` is the mean of successful round-trip times in milliseconds, or
    ``UNRANKED`` when every attempt failed.
    """

    candidate: Candidate
    success_count: int
    fail_count: int
    score: float = UNRANKED
    best_ms: float | None = None
    median_ms: float | None = None
    worst_ms: float | None = None
    jitter_ms: float | None = None

    @property
    def attempts(self) -> int:
        return self.success_count + self.fail_count

    @property
    def loss_pct(self) -> float:
        if self.attempts == 0:
            return 100.0
        return 100.0 * self.fail_count / self.attempts

    @property
    def ranked(self) -> bool:
        return math.isfinite(self.score)

    def to_dict(self) -> dict[str, Any]:
        c = self.candidate
        return {
            "hostname": c.hostname,
            "address": c.address,
            "country_code": c.country_code,
            "country": c.country_name,
            "city": c.city_name,
            "type": c.protocol_type,
            "port_speed_gbps": c.port_speed,
            "run_mode": c.hosting_mode,
            "avg_ms": round(self.score, 3) if self.ranked else None,
            "best_ms": self.best_ms,
            "median_ms": self.median_ms,
            "worst_ms": self.worst_ms,
            "jitter_ms": self.jitter_ms,
            "received": self.success_count,
            "lost": self.fail_count,
            "loss_pct": round(self.loss_pct, 1),
        }


__all__ = ["AggregatedResult", "FailureKind", "ProbeSample", "UNRANKED"]

"""Latency prober interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from relay_scan.models.results import ProbeSample


@runtime_checkable
class Prober(Protocol):
    """Single-attempt latency oracle.

    Implementations must be safe to call concurrently from several worker
    threads and keep no mutable state between calls. Expected failures
    (timeouts, unreachable hosts, launch errors) are returned as failed
    samples rather than raised.
    """

    name: str

    def probe(self, address: str, *, timeout: float) -> ProbeSample:
        """Send one probe to ``address`` and return its outcome."""


__all__ = ["Prober"]

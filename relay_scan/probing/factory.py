"""Factory for latency probers."""

from __future__ import annotations

from relay_scan.exceptions import DependencyError
from relay_scan.probing.ping import PingProber
from relay_scan.probing.tcp import TcpConnectProber


def get_prober(name: str, **kwargs):
    name = name.lower()
    if name == "ping":
        return PingProber(**{k: v for k, v in kwargs.items() if k in {"executable", "system", "runner"}})
    if name == "tcp":
        return TcpConnectProber(**{k: v for k, v in kwargs.items() if k in {"port", "connector"}})
    raise DependencyError(f"Unknown prober: {name}")


__all__ = ["get_prober"]

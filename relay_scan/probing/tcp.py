"""TCP handshake prober for networks that drop ICMP."""

from __future__ import annotations

import socket
import time
from typing import Callable

from relay_scan.models.results import ProbeSample

_Connector = Callable[..., socket.socket]


class TcpConnectProber:
    """Measure the time to complete a TCP handshake with ``address:port``."""

    name = "tcp"

    def __init__(self, *, port: int = 443, connector: _Connector | None = None) -> None:
        if not 0 < port < 65536:
            raise ValueError(f"port out of range: {port}")
        self.port = port
        self._connect = connector or socket.create_connection

    def probe(self, address: str, *, timeout: float) -> ProbeSample:
        start = time.perf_counter()
        try:
            sock = self._connect((address, self.port), timeout=timeout)
        except socket.timeout:
            return ProbeSample.failed("timeout", f"no handshake within {timeout:.1f}s")
        except OSError as exc:
            return ProbeSample.failed("unreachable", str(exc))
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        sock.close()
        return ProbeSample.success(round(elapsed_ms, 3))


__all__ = ["TcpConnectProber"]

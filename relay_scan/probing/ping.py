"""ICMP echo prober backed by the system ``ping`` binary."""

from __future__ import annotations

import math
import platform
import re
import subprocess
from typing import Callable, Sequence

from relay_scan.models.results import ProbeSample

_Runner = Callable[..., subprocess.CompletedProcess]

_REPLY_RE = re.compile(r"time[=<]\s*([0-9]+(?:\.[0-9]+)?)\s*ms")
_SUMMARY_RE = re.compile(r"(?:rtt|round-trip) min/avg/max/(?:mdev|stddev) = [0-9.]+/([0-9.]+)/")


def parse_ping_output(stdout: str) -> float | None:
    """Return the round-trip time in ms reported by ``ping``, if any."""

    match = _REPLY_RE.search(stdout)
    if match:
        return float(match.group(1))
    match = _SUMMARY_RE.search(stdout)
    if match:
        return float(match.group(1))
    return None


class PingProber:
    """Send a single echo request per attempt through ``ping -c 1``."""

    name = "ping"

    def __init__(self, *, executable: str = "ping", system: str | None = None, runner: _Runner | None = None) -> None:
        self.executable = executable
        self.system = (system or platform.system()).lower()
        self._runner = runner or subprocess.run

    def build_command(self, address: str, timeout: float) -> list[str]:
        if self.system == "darwin":
            # macOS takes the reply wait in milliseconds
            wait = ["-W", str(max(1, int(timeout * 1000)))]
        else:
            wait = ["-W", str(max(1, math.ceil(timeout)))]
        return [self.executable, "-n", "-c", "1", *wait, address]

    def probe(self, address: str, *, timeout: float) -> ProbeSample:
        command: Sequence[str] = self.build_command(address, timeout)
        try:
            result = self._runner(command, capture_output=True, text=True, timeout=timeout + 1.0, check=False)
        except subprocess.TimeoutExpired:
            return ProbeSample.failed("timeout", f"ping did not exit within {timeout + 1.0:.1f}s")
        except OSError as exc:
            return ProbeSample.failed("launch_error", str(exc))

        if result.returncode == 1:
            return ProbeSample.failed("timeout", "no echo reply")
        if result.returncode != 0:
            detail = (result.stderr or "").strip() or f"ping exited with {result.returncode}"
            return ProbeSample.failed("unreachable", detail)

        rtt = parse_ping_output(result.stdout or "")
        if rtt is None:
            return ProbeSample.failed("malformed", "no round-trip time in ping output")
        return ProbeSample.success(rtt)


__all__ = ["PingProber", "parse_ping_output"]

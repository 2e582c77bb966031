"""Run repeated probe attempts against a single relay."""

from __future__ import annotations

import time
from typing import Callable

from relay_scan.interfaces.prober import Prober
from relay_scan.models.results import ProbeSample
from relay_scan.utils.logging import get_logger

log = get_logger(__name__, component="probing")


def _attempt(prober: Prober, address: str, timeout: float) -> ProbeSample:
    try:
        sample = prober.probe(address, timeout=timeout)
    except OSError as exc:
        return ProbeSample.failed("launch_error", str(exc))
    except Exception as exc:
        log.debug("Prober raised", extra={"address": address, "error": repr(exc)})
        return ProbeSample.failed("error", repr(exc))
    if not isinstance(sample, ProbeSample):
        return ProbeSample.failed("malformed", f"prober returned {type(sample).__name__}")
    return sample


def probe_candidate(
    prober: Prober,
    address: str,
    *,
    attempts: int,
    interval: float,
    timeout: float,
    sleep: Callable[[float], None] = time.sleep,
) -> list[ProbeSample]:
    """Probe ``address`` ``attempts`` times, pausing ``interval`` seconds between attempts.

    Returns exactly ``attempts`` samples in attempt order. A failed attempt
    never stops the remaining ones.
    """

    samples: list[ProbeSample] = []
    for index in range(attempts):
        if index and interval > 0:
            sleep(interval)
        samples.append(_attempt(prober, address, timeout))
    return samples


__all__ = ["probe_candidate"]

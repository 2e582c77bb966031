"""Concurrent probing of filtered relay candidates."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Sequence

from relay_scan.interfaces.prober import Prober
from relay_scan.models.candidate import Candidate
from relay_scan.models.results import AggregatedResult, ProbeSample
from relay_scan.probing.adapter import probe_candidate
from relay_scan.schema.criteria import SelectionCriteria
from relay_scan.selection.aggregate import aggregate_samples
from relay_scan.utils.logging import get_logger

log = get_logger(__name__, component="scan")


def _clamp_workers(max_workers: int | None, candidate_count: int) -> int:
    if max_workers is None:
        return max(1, candidate_count)
    return max(1, min(int(max_workers), candidate_count))


def _scan_candidate(
    candidate: Candidate,
    criteria: SelectionCriteria,
    prober: Prober,
    sleep: Callable[[float], None],
) -> AggregatedResult:
    samples = probe_candidate(
        prober,
        candidate.address,
        attempts=criteria.attempts,
        interval=criteria.interval,
        timeout=criteria.attempt_timeout,
        sleep=sleep,
    )
    result = aggregate_samples(candidate, samples)
    log.debug(
        "Relay probed",
        extra={"hostname": candidate.hostname, "address": candidate.address, "received": result.success_count},
    )
    return result


def scan_candidates(
    candidates: Sequence[Candidate],
    criteria: SelectionCriteria,
    prober: Prober,
    *,
    max_workers: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[AggregatedResult]:
    """Probe every candidate concurrently and return one result per candidate.

    Results come back in completion order. The call returns only after every
    relay has finished all of its attempts.
    """

    if not candidates:
        return []

    worker_count = _clamp_workers(max_workers, len(candidates))
    results: list[AggregatedResult] = []

    with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="relay-probe") as executor:
        futures = {
            executor.submit(_scan_candidate, candidate, criteria, prober, sleep): candidate
            for candidate in candidates
        }
        for fut in as_completed(futures):
            candidate = futures[fut]
            try:
                results.append(fut.result())
            except Exception as exc:
                log.error(
                    "Probing failed for relay",
                    extra={"hostname": candidate.hostname, "address": candidate.address, "error": repr(exc)},
                )
                failed = [ProbeSample.failed("error", repr(exc))] * criteria.attempts
                results.append(aggregate_samples(candidate, failed))

    log.info("Scan complete", extra={"relays": len(results), "workers": worker_count})
    return results


__all__ = ["scan_candidates"]

"""Fetch, filter, probe and rank relays in one run."""

from __future__ import annotations

import time
from typing import Callable

from relay_scan.data import CandidateSource
from relay_scan.interfaces.prober import Prober
from relay_scan.models.candidate import Candidate
from relay_scan.models.results import AggregatedResult
from relay_scan.schema.criteria import SelectionCriteria
from relay_scan.selection.filters import filter_candidates
from relay_scan.selection.ranker import rank_results
from relay_scan.selection.scan import scan_candidates
from relay_scan.utils.logging import get_logger
from relay_scan.utils.profiling import track_time

log = get_logger(__name__, component="pipeline")


def rank_candidates(
    candidates: list[Candidate],
    criteria: SelectionCriteria,
    prober: Prober,
    *,
    max_workers: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[AggregatedResult]:
    """Filter an already fetched relay list, probe the survivors and rank them."""

    selected = filter_candidates(candidates, criteria)
    if not selected:
        log.info("No relays matched the selection criteria")
        return []

    with track_time("scan"):
        results = scan_candidates(selected, criteria, prober, max_workers=max_workers, sleep=sleep)
    return rank_results(results, criteria.limit)


def select_relays(
    source: CandidateSource,
    criteria: SelectionCriteria,
    prober: Prober,
    *,
    max_workers: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[AggregatedResult]:
    """Run a full selection: SourceUnavailableError from the source is fatal."""

    candidates = source.fetch_candidates()
    return rank_candidates(candidates, criteria, prober, max_workers=max_workers, sleep=sleep)


__all__ = ["rank_candidates", "select_relays"]

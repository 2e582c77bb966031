"""Ordering and truncation of aggregated scan results."""

from __future__ import annotations

from typing import Iterable, List

from relay_scan.exceptions import ConfigValidationError
from relay_scan.models.results import AggregatedResult


def rank_results(results: Iterable[AggregatedResult], limit: int = 0) -> List[AggregatedResult]:
    """Sort by ascending score and keep the first ``limit`` entries (0 keeps all).

    The sort is stable: equal scores keep the order in which results were
    collected, which depends on probe completion order and so may differ
    between runs. Unranked relays sort after every measured one.
    """

    if limit < 0:
        raise ConfigValidationError("limit must be >= 0 (0 = unbounded)")
    ordered = sorted(results, key=lambda r: r.score)
    if limit:
        ordered = ordered[:limit]
    return ordered


__all__ = ["rank_results"]

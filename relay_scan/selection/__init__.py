"""Relay selection engine: filtering, concurrent probing and ranking."""

from relay_scan.selection.aggregate import aggregate_samples
from relay_scan.selection.filters import filter_candidates, matches_criteria
from relay_scan.selection.pipeline import rank_candidates, select_relays
from relay_scan.selection.ranker import rank_results
from relay_scan.selection.scan import scan_candidates

__all__ = [
    "aggregate_samples",
    "filter_candidates",
    "matches_criteria",
    "rank_candidates",
    "rank_results",
    "scan_candidates",
    "select_relays",
]

"""Static-metadata filtering of relay candidates."""

from __future__ import annotations

from typing import Iterable, List

from relay_scan.models.candidate import Candidate
from relay_scan.schema.criteria import SelectionCriteria
from relay_scan.utils.logging import get_logger

log = get_logger(__name__, component="filter")


def matches_criteria(candidate: Candidate, criteria: SelectionCriteria) -> bool:
    """Return True when the relay satisfies every selection criterion."""

    if criteria.country is not None and candidate.country_code.lower() != criteria.country.strip().lower():
        return False
    if criteria.server_type != "all" and candidate.protocol_type != criteria.server_type:
        return False
    if candidate.port_speed < criteria.min_port_speed:
        return False
    if criteria.run_mode != "all" and candidate.hosting_mode != criteria.run_mode:
        return False
    return True


def filter_candidates(candidates: Iterable[Candidate], criteria: SelectionCriteria) -> List[Candidate]:
    """Keep matching relays in source order."""

    pool = list(candidates)
    kept = [c for c in pool if matches_criteria(c, criteria)]
    log.info("Filtered relay candidates", extra={"relays": len(kept), "total": len(pool)})
    return kept


__all__ = ["filter_candidates", "matches_criteria"]

"""Country listing for the relay pool."""

from __future__ import annotations

from typing import Iterable

from relay_scan.models.candidate import Candidate


def list_countries(candidates: Iterable[Candidate]) -> list[tuple[str, str]]:
    """Return distinct ``(code, name)`` pairs sorted by country name."""

    pairs = {(c.country_code, c.country_name) for c in candidates}
    return sorted(pairs, key=lambda pair: (pair[1], pair[0]))


__all__ = ["list_countries"]

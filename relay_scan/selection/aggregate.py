"""Reduce probe samples to a comparable per-relay score."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from relay_scan.models.candidate import Candidate
from relay_scan.models.results import UNRANKED, AggregatedResult, ProbeSample


def aggregate_samples(candidate: Candidate, samples: Sequence[ProbeSample]) -> AggregatedResult:
    """Summarize one relay's samples.

    The score is the arithmetic mean of successful round-trip times; failed
    attempts are counted as loss but do not enter the mean. A relay with no
    successful sample gets the ``UNRANKED`` score.
    """

    rtts = np.asarray([s.rtt_ms for s in samples if s.ok], dtype=float)
    success_count = int(rtts.size)
    fail_count = len(samples) - success_count

    if success_count == 0:
        return AggregatedResult(candidate=candidate, success_count=0, fail_count=fail_count, score=UNRANKED)

    return AggregatedResult(
        candidate=candidate,
        success_count=success_count,
        fail_count=fail_count,
        score=float(rtts.mean()),
        best_ms=float(rtts.min()),
        median_ms=float(np.median(rtts)),
        worst_ms=float(rtts.max()),
        jitter_ms=round(float(rtts.std()), 3),
    )


__all__ = ["aggregate_samples"]

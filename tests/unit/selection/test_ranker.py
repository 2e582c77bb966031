import pytest

from relay_scan.exceptions import ConfigValidationError
from relay_scan.models.candidate import Candidate
from relay_scan.models.results import UNRANKED, AggregatedResult
from relay_scan.selection.ranker import rank_results


def _result(hostname: str, score: float) -> AggregatedResult:
    candidate = Candidate(
        hostname=hostname,
        address="10.0.0.3",
        country_code="nl",
        country_name="Netherlands",
        city_name="Amsterdam",
        protocol_type="openvpn",
        port_speed=1,
        hosting_mode="disk",
    )
    ok = score != UNRANKED
    return AggregatedResult(candidate=candidate, success_count=3 if ok else 0, fail_count=0 if ok else 3, score=score)


def test_top_two_of_three():
    results = [_result("a", 40.0), _result("b", 25.0), _result("c", UNRANKED)]

    ranked = rank_results(results, 2)

    assert [r.candidate.hostname for r in ranked] == ["b", "a"]


def test_unranked_sorts_after_every_finite_score():
    results = [_result("dead", UNRANKED), _result("slow", 900.0), _result("fast", 5.0)]

    ranked = rank_results(results, 0)

    assert [r.candidate.hostname for r in ranked] == ["fast", "slow", "dead"]


@pytest.mark.parametrize("limit, expected", [(0, 4), (1, 1), (3, 3), (4, 4), (10, 4)])
def test_length_is_min_of_count_and_limit(limit, expected):
    results = [_result(str(i), float(i)) for i in range(4)]
    assert len(rank_results(results, limit)) == expected


def test_ties_keep_collection_order():
    results = [_result("first", 10.0), _result("second", 10.0), _result("third", 5.0)]

    ranked = rank_results(results)

    assert [r.candidate.hostname for r in ranked] == ["third", "first", "second"]


def test_ranking_is_idempotent():
    results = [_result("x", 3.0), _result("y", UNRANKED), _result("z", 1.0), _result("w", 3.0)]

    once = rank_results(results, 3)
    twice = rank_results(results, 3)

    assert once == twice
    assert rank_results(once, 3) == once


def test_negative_limit_rejected():
    with pytest.raises(ConfigValidationError):
        rank_results([], -1)

from relay_scan.models.results import ProbeSample
from relay_scan.probing.adapter import probe_candidate


class SequenceProber:
    name = "sequence"

    def __init__(self, outcomes):
        self._outcomes = iter(outcomes)
        self.timeouts: list[float] = []

    def probe(self, address, *, timeout):
        self.timeouts.append(timeout)
        outcome = next(self._outcomes)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_exactly_n_samples_with_sleeps_between_attempts():
    sleeps: list[float] = []
    prober = SequenceProber([ProbeSample.success(1.0), ProbeSample.success(2.0), ProbeSample.success(3.0)])

    samples = probe_candidate(prober, "10.0.0.1", attempts=3, interval=0.5, timeout=2.0, sleep=sleeps.append)

    assert [s.rtt_ms for s in samples] == [1.0, 2.0, 3.0]
    assert sleeps == [0.5, 0.5]
    assert prober.timeouts == [2.0, 2.0, 2.0]


def test_single_attempt_never_sleeps():
    sleeps: list[float] = []
    probe_candidate(SequenceProber([ProbeSample.success(1.0)]), "h", attempts=1, interval=1.0, timeout=1.0, sleep=sleeps.append)
    assert sleeps == []


def test_failures_do_not_abort_remaining_attempts():
    prober = SequenceProber(
        [
            ProbeSample.failed("timeout"),
            OSError("Too many open files"),
            RuntimeError("garbled"),
            "not a sample",
            ProbeSample.success(9.0),
        ]
    )

    samples = probe_candidate(prober, "10.0.0.1", attempts=5, interval=0.0, timeout=1.0, sleep=lambda _: None)

    assert [s.failure for s in samples] == ["timeout", "launch_error", "error", "malformed", None]
    assert samples[-1].rtt_ms == 9.0

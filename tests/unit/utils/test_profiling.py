import time

from relay_scan.utils.profiling import track_time


def test_track_time_emits_info(caplog):
    with caplog.at_level("INFO"):
        with track_time("segment", warn_budget=10.0):
            time.sleep(0.01)
    records = [r for r in caplog.records if r.message == "Segment timing"]
    assert records and records[0].segment == "segment"
    assert records[0].duration_ms >= 10.0 * 0.5


def test_track_time_warns_over_budget(caplog):
    with caplog.at_level("INFO"):
        with track_time("slow", warn_budget=0.0):
            pass
    assert any(r.levelname == "WARNING" and r.message == "Time budget exceeded" for r in caplog.records)


def test_track_time_errors_past_error_budget(caplog):
    with caplog.at_level("INFO"):
        with track_time("stalled", warn_budget=0.0, error_budget=0.0):
            pass
    levels = [r.levelname for r in caplog.records if r.message == "Time budget exceeded"]
    assert levels == ["ERROR"]

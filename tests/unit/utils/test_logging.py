import io
import json
import logging

from relay_scan.utils.logging import configure_logging, get_logger


def test_json_logs_carry_context_fields():
    stream = io.StringIO()
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging(run_id="abc123", component="test", level="INFO", stream=stream)
        get_logger("relay_scan.test").info("probed", extra={"hostname": "de-fra-wg-001", "relays": 3})
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["message"] == "probed"
    assert payload["level"] == "INFO"
    assert payload["run_id"] == "abc123"
    assert payload["component"] == "test"
    assert payload["hostname"] == "de-fra-wg-001"
    assert payload["relays"] == 3

import math
from pathlib import Path

import pytest

from relay_scan.cli.validation import (
    ensure_known_country,
    require_non_negative,
    require_positive,
    validate_scan_inputs,
)
from relay_scan.exceptions import ConfigValidationError
from relay_scan.models.candidate import Candidate


def _relay(country: str) -> Candidate:
    return Candidate(
        hostname=f"{country}-1",
        address="1.2.3.4",
        country_code=country,
        country_name=country,
        city_name="",
        protocol_type=None,
        port_speed=1,
        hosting_mode="disk",
    )


BASE = {
    "method": "ping",
    "source": "mullvad",
    "source_file": None,
    "max_workers": 64,
    "tcp_port": 443,
    "timeout": 1.0,
    "interval": 0.2,
}


def test_validate_scan_inputs_accepts_defaults():
    validate_scan_inputs(**BASE)
    validate_scan_inputs(
        method="tcp",
        source="file",
        source_file="r.json",
        max_workers=0,
        tcp_port=22,
        timeout=0.5,
        interval=0,
        output=Path("x.json"),
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"method": "icmp6"},
        {"source": "nordvpn"},
        {"source": "file"},
        {"max_workers": -1},
        {"tcp_port": 70000},
        {"timeout": 0},
        {"timeout": math.nan},
        {"timeout": math.inf},
        {"interval": -0.5},
        {"interval": math.inf},
        {"output": Path("results.txt")},
    ],
)
def test_validate_scan_inputs_rejects(kwargs):
    with pytest.raises(ConfigValidationError):
        validate_scan_inputs(**{**BASE, **kwargs})


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_numeric_helpers_reject_non_finite(value):
    with pytest.raises(ConfigValidationError):
        require_positive("timeout", value)
    with pytest.raises(ConfigValidationError):
        require_non_negative("interval", value)
    require_positive("timeout", 0.25)
    require_non_negative("interval", 0)


def test_known_country_check():
    relays = [_relay("de"), _relay("us")]
    ensure_known_country(None, relays)
    ensure_known_country("DE", relays)
    with pytest.raises(ConfigValidationError):
        ensure_known_country("zz", relays)

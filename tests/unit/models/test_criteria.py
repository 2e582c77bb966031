import math

import pytest

from relay_scan.exceptions import ConfigValidationError
from relay_scan.schema.criteria import SelectionCriteria


def test_defaults_are_valid():
    criteria = SelectionCriteria()
    assert criteria.to_dict() == {
        "country": None,
        "server_type": "all",
        "min_port_speed": 1,
        "run_mode": "all",
        "attempts": 3,
        "interval": 0.2,
        "limit": 5,
        "attempt_timeout": 1.0,
    }


@pytest.mark.parametrize(
    "overrides",
    [
        {"server_type": "ipsec"},
        {"run_mode": "tmpfs"},
        {"attempts": 0},
        {"attempts": -2},
        {"interval": -0.1},
        {"interval": math.nan},
        {"interval": math.inf},
        {"limit": -1},
        {"min_port_speed": -1},
        {"attempt_timeout": 0},
        {"attempt_timeout": math.nan},
        {"attempt_timeout": math.inf},
        {"country": "  "},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigValidationError):
        SelectionCriteria(**overrides)


def test_round_trip_and_unknown_keys():
    criteria = SelectionCriteria(country="de", server_type="wireguard", limit=0)
    assert SelectionCriteria.from_dict(criteria.to_dict()) == criteria
    with pytest.raises(ConfigValidationError):
        SelectionCriteria.from_dict({"colour": "blue"})

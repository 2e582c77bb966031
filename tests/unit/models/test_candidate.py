import dataclasses

import pytest

from relay_scan.exceptions import SchemaError
from relay_scan.models.candidate import Candidate


def test_from_record_normalizes_fields():
    candidate = Candidate.from_record(
        {
            "hostname": "us-nyc-ovpn-101",
            "country_code": "US",
            "country_name": "USA",
            "city_name": "New York, NY",
            "ipv4_addr_in": "198.54.117.2",
            "network_port_speed": "1",
            "stboot": False,
            "type": "OpenVPN",
        }
    )

    assert candidate.country_code == "us"
    assert candidate.port_speed == 1
    assert candidate.protocol_type == "openvpn"
    assert candidate.hosting_mode == "disk"
    assert candidate.active is True


def test_missing_type_is_allowed():
    record = {"hostname": "x", "country_code": "de", "ipv4_addr_in": "1.2.3.4", "network_port_speed": 1}
    assert Candidate.from_record(record).protocol_type is None


@pytest.mark.parametrize(
    "record",
    [
        {"hostname": "x", "country_code": "de", "network_port_speed": 1},
        {"hostname": "x", "country_code": "de", "ipv4_addr_in": "1.2.3.4", "network_port_speed": None},
        {"hostname": "x", "country_code": "de", "ipv4_addr_in": "1.2.3.4", "network_port_speed": 1, "type": "pptp"},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_records_raise_schema_error(record):
    with pytest.raises(SchemaError):
        Candidate.from_record(record)


def test_candidate_is_immutable():
    candidate = Candidate.from_record(
        {"hostname": "x", "country_code": "de", "ipv4_addr_in": "1.2.3.4", "network_port_speed": 1}
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        candidate.port_speed = 100  # type: ignore[misc]

import json

import pytest

from relay_scan.data import SourceConfig
from relay_scan.data.factory import FallbackCandidateSource, build_candidate_source, get_candidate_source
from relay_scan.data.file_source import FileRelaySource
from relay_scan.data.mullvad import MullvadRelaySource
from relay_scan.exceptions import ConfigValidationError, DependencyError, SourceUnavailableError

RECORDS = [
    {
        "hostname": "se-got-wg-001",
        "country_code": "se",
        "country_name": "Sweden",
        "city_name": "Gothenburg",
        "ipv4_addr_in": "185.213.154.1",
        "network_port_speed": 10,
        "stboot": False,
        "type": "wireguard",
        "active": True,
    }
]


def test_file_source_reads_snapshot(tmp_path):
    path = tmp_path / "relays.json"
    path.write_text(json.dumps(RECORDS))

    relays = FileRelaySource(path).fetch_candidates()

    assert len(relays) == 1
    assert relays[0].country_code == "se" and relays[0].hosting_mode == "disk"


def test_file_source_missing_or_invalid(tmp_path):
    with pytest.raises(SourceUnavailableError):
        FileRelaySource(tmp_path / "missing.json").fetch_candidates()

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(SourceUnavailableError):
        FileRelaySource(bad).fetch_candidates()


def test_get_candidate_source_returns_sources(tmp_path):
    assert isinstance(get_candidate_source("mullvad", http_get=lambda *_, **__: []), MullvadRelaySource)
    assert isinstance(get_candidate_source("file", path=tmp_path / "x.json"), FileRelaySource)
    with pytest.raises(ConfigValidationError):
        get_candidate_source("file")
    with pytest.raises(DependencyError):
        get_candidate_source("carrier-pigeon")


def test_fallback_source_recovers(tmp_path):
    class Primary:
        name = "primary"

        def fetch_candidates(self):
            raise SourceUnavailableError("boom")

    path = tmp_path / "relays.json"
    path.write_text(json.dumps(RECORDS))
    wrapper = FallbackCandidateSource(Primary(), FileRelaySource(path))

    assert wrapper.name == "primary+file"
    assert [r.hostname for r in wrapper.fetch_candidates()] == ["se-got-wg-001"]


def test_build_candidate_source_wraps_fallback(tmp_path):
    plain = build_candidate_source(SourceConfig(primary="mullvad"), server_type="openvpn")
    assert isinstance(plain, MullvadRelaySource) and plain.server_type == "openvpn"

    wrapped = build_candidate_source(SourceConfig(primary="mullvad", fallback_file=str(tmp_path / "r.json")))
    assert isinstance(wrapped, FallbackCandidateSource)

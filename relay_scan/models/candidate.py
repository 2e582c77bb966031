"""Relay candidate model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional

from relay_scan.exceptions import SchemaError

ProtocolType = Literal["openvpn", "bridge", "wireguard"]
HostingMode = Literal["ram", "disk"]

PROTOCOL_TYPES: frozenset[str] = frozenset({"openvpn", "bridge", "wireguard"})
HOSTING_MODES: frozenset[str] = frozenset({"ram", "disk"})

_REQUIRED_FIELDS = ("hostname", "country_code", "ipv4_addr_in", "network_port_speed")


@dataclass(frozen=True, slots=True)
class Candidate:
    """Static metadata for one relay as published by its source.

    Attributes:
        hostname: Relay identity, unique within a source listing.
        address: IPv4 address probes are sent to.
        country_code: Lowercase ISO-ish code used by the provider (``de``, ``us``).
        protocol_type: Tunnel protocol, or ``None`` when the record omits it.
        port_speed: Declared network port speed in Gbps.
        hosting_mode: ``ram`` for stateless RAM-booted relays, ``disk`` otherwise.
    """

    hostname: str
    address: str
    country_code: str
    country_name: str
    city_name: str
    protocol_type: Optional[ProtocolType]
    port_speed: int
    hosting_mode: HostingMode
    provider: str = ""
    owned: bool = False
    active: bool = True

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Candidate":
        """Build a candidate from a relay API record.

        Raises:
            SchemaError: when required fields are missing or not coercible.
        """

        if not isinstance(record, Mapping):
            raise SchemaError(f"relay record must be a mapping, got {type(record).__name__}")
        missing = [name for name in _REQUIRED_FIELDS if record.get(name) in (None, "")]
        if missing:
            raise SchemaError(f"relay record missing fields: {missing}")

        try:
            port_speed = int(record["network_port_speed"])
        except (TypeError, ValueError) as exc:
            raise SchemaError(f"invalid network_port_speed: {record['network_port_speed']!r}") from exc

        server_type = record.get("type")
        if server_type is not None:
            server_type = str(server_type).lower()
            if server_type not in PROTOCOL_TYPES:
                raise SchemaError(f"unknown relay type: {server_type!r}")

        return cls(
            hostname=str(record["hostname"]),
            address=str(record["ipv4_addr_in"]),
            country_code=str(record["country_code"]).lower(),
            country_name=str(record.get("country_name") or record["country_code"]),
            city_name=str(record.get("city_name") or ""),
            protocol_type=server_type,  # type: ignore[arg-type]
            port_speed=port_speed,
            hosting_mode="ram" if bool(record.get("stboot")) else "disk",
            provider=str(record.get("provider") or ""),
            owned=bool(record.get("owned", False)),
            active=bool(record.get("active", True)),
        )


__all__ = ["Candidate", "HostingMode", "ProtocolType", "PROTOCOL_TYPES", "HOSTING_MODES"]

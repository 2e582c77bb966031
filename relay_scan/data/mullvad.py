"""Mullvad public relay list client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from relay_scan.data.records import dedupe_by_hostname, parse_relay_records
from relay_scan.exceptions import ConfigValidationError, SourceUnavailableError
from relay_scan.models.candidate import Candidate
from relay_scan.schema.criteria import SERVER_TYPES

log = logging.getLogger(__name__)


_HttpGetter = Callable[..., Any]


@dataclass(slots=True)
class _RelayResponse:
    status_code: int
    payload: Any

    def json(self) -> Any:
        return self.payload


class MullvadRelaySource:
    """REST adapter for the Mullvad relay listing.

    Network calls are delegated to an injectable HTTP getter (``requests.get``
    by default) to simplify testing. Every failure to obtain a usable listing
    is reported as SourceUnavailableError.
    """

    name = "mullvad"

    def __init__(
        self,
        *,
        server_type: str = "all",
        base_url: str = "https://api.mullvad.net/www/relays",
        timeout: float = 10.0,
        active_only: bool = False,
        http_get: _HttpGetter | None = None,
    ) -> None:
        if server_type not in SERVER_TYPES:
            raise ConfigValidationError(f"type must be one of {sorted(SERVER_TYPES)}, got {server_type!r}")
        self.server_type = server_type
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.active_only = active_only
        self._http_get = http_get

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.server_type}/"

    def fetch_candidates(self) -> list[Candidate]:
        payload = self._request()
        candidates = dedupe_by_hostname(parse_relay_records(payload, source=self.name, active_only=self.active_only))
        log.info("Fetched relay list", extra={"relays": len(candidates), "url": self.url})
        return candidates

    def _request(self) -> Any:
        try:
            response = self._perform_request()
        except SourceUnavailableError:
            raise
        except Exception as exc:
            raise SourceUnavailableError(f"Relay list request failed: {exc}") from exc

        status_code = getattr(response, "status_code", 500)
        if status_code >= 400:
            raise SourceUnavailableError(f"Mullvad API {status_code}: unable to fetch {self.url}")
        try:
            return response.json()
        except Exception as exc:
            raise SourceUnavailableError("Unable to parse relay list response as JSON") from exc

    def _perform_request(self) -> Any:
        client = self._http_get
        if client is None:
            import requests

            client = requests.get

        response = client(self.url, headers={"accept": "application/json"}, timeout=self.timeout)
        if not hasattr(response, "status_code"):
            # Getters used in tests may hand back the decoded payload directly
            return _RelayResponse(status_code=200, payload=response)
        return response


__all__ = ["MullvadRelaySource"]

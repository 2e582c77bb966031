"""CLI command listing the countries present in the relay pool."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from relay_scan.cli.validation import require_choice
from relay_scan.data import SourceConfig
from relay_scan.data.factory import build_candidate_source
from relay_scan.schema.criteria import SERVER_TYPES
from relay_scan.selection.countries import list_countries
from relay_scan.utils.logging import get_logger

log = get_logger(__name__, component="cli.countries")


def countries(
    server_type: str = typer.Option("all", "--type", "-t", help="Relay type: openvpn, bridge, wireguard, all"),
    source: str = typer.Option("mullvad", "--source", help="Relay source: mullvad or file"),
    source_file: Optional[Path] = typer.Option(None, "--source-file", help="Relay JSON file for --source file"),
    as_json: bool = typer.Option(False, "--json", help="Print countries as JSON"),
) -> None:
    """List the available country codes."""

    server_type = server_type.lower()
    require_choice("type", server_type, SERVER_TYPES)
    provider = build_candidate_source(
        SourceConfig(primary=source),
        server_type=server_type,
        source_file=str(source_file) if source_file else None,
    )
    pairs = list_countries(provider.fetch_candidates())

    if as_json:
        typer.echo(json.dumps([{"code": code, "name": name} for code, name in pairs], indent=2))
    else:
        for code, name in pairs:
            typer.echo(f"{code} - {name}")
    log.info("countries listed", extra={"countries": len(pairs)})


__all__ = ["countries"]

"""Scan CLI command wiring."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Optional

import typer
from click.core import ParameterSource
from rich.console import Console

from relay_scan.cli.render import render_results
from relay_scan.cli.validation import ensure_known_country, validate_scan_inputs
from relay_scan.config.loader import load_config_with_precedence, optional_str, parse_bool
from relay_scan.data import SourceConfig
from relay_scan.data.factory import build_candidate_source
from relay_scan.probing.factory import get_prober
from relay_scan.reporting import write_results
from relay_scan.schema.criteria import SelectionCriteria
from relay_scan.schema.run_meta import ScanMeta
from relay_scan.selection.pipeline import rank_candidates
from relay_scan.utils.logging import get_logger

console = Console()
err_console = Console(stderr=True)
log = get_logger(__name__, component="cli.scan")

SCAN_DEFAULTS = {
    "country": None,
    "server_type": "all",
    "pings": 3,
    "interval": 0.2,
    "count": 5,
    "port_speed": 1,
    "run_mode": "all",
    "timeout": 1.0,
    "max_workers": 64,
    "method": "ping",
    "tcp_port": 443,
    "source": "mullvad",
    "source_file": None,
    "fallback_file": None,
    "active_only": False,
}

SCAN_CASTERS = {
    "country": optional_str,
    "server_type": lambda v: str(v).lower(),
    "pings": int,
    "interval": float,
    "count": int,
    "port_speed": int,
    "run_mode": lambda v: str(v).lower(),
    "timeout": float,
    "max_workers": int,
    "method": lambda v: str(v).lower(),
    "tcp_port": int,
    "source": lambda v: str(v).lower(),
    "source_file": optional_str,
    "fallback_file": optional_str,
    "active_only": parse_bool,
}


def scan(
    ctx: typer.Context,
    country: Optional[str] = typer.Option(None, "--country", "-c", help="The country you want to query (e.g., us, gb, de)"),
    server_type: str = typer.Option("all", "--type", "-t", help="Relay type: openvpn, bridge, wireguard, all"),
    pings: int = typer.Option(3, "--pings", "-p", help="Probe attempts per relay"),
    interval: float = typer.Option(0.2, "--interval", "-i", help="Seconds between attempts to the same relay"),
    count: int = typer.Option(5, "--count", "-n", help="Number of top relays to show (0=all)"),
    port_speed: int = typer.Option(1, "--port-speed", "-s", help="Only relays with at least this port speed in Gbps"),
    run_mode: str = typer.Option("all", "--run-mode", "-r", help="Only relays running from: all, ram, disk"),
    timeout: float = typer.Option(1.0, "--timeout", help="Per-attempt probe timeout in seconds"),
    max_workers: int = typer.Option(64, "--max-workers", help="Relays probed at once (0=one worker per relay)"),
    method: str = typer.Option("ping", "--method", help="Probe method: ping (ICMP) or tcp (handshake time)"),
    tcp_port: int = typer.Option(443, "--tcp-port", help="Port used by the tcp probe method"),
    source: str = typer.Option("mullvad", "--source", help="Relay source: mullvad or file"),
    source_file: Optional[Path] = typer.Option(None, "--source-file", help="Relay JSON file for --source file"),
    fallback_file: Optional[Path] = typer.Option(None, "--fallback-file", help="Relay JSON file used when the source fails"),
    active_only: bool = typer.Option(False, "--active-only/--include-inactive", help="Skip relays marked inactive"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML/JSON file with scan defaults"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON instead of a table"),
    output: Optional[Path] = typer.Option(None, "--output", help="Write results to a .csv or .json file"),
) -> None:
    """Probe matching relays and list the fastest ones."""

    given = {
        "country": country,
        "server_type": server_type,
        "pings": pings,
        "interval": interval,
        "count": count,
        "port_speed": port_speed,
        "run_mode": run_mode,
        "timeout": timeout,
        "max_workers": max_workers,
        "method": method,
        "tcp_port": tcp_port,
        "source": source,
        "source_file": str(source_file) if source_file else None,
        "fallback_file": str(fallback_file) if fallback_file else None,
        "active_only": active_only,
    }
    cli_values = {
        key: value for key, value in given.items() if ctx.get_parameter_source(key) is ParameterSource.COMMANDLINE
    }
    merged = load_config_with_precedence(
        config_path=config,
        env_prefix="RELAY_SCAN_",
        cli_values=cli_values,
        defaults=SCAN_DEFAULTS,
        casters=SCAN_CASTERS,
    )

    validate_scan_inputs(
        method=merged["method"],
        source=merged["source"],
        source_file=merged["source_file"],
        max_workers=merged["max_workers"],
        tcp_port=merged["tcp_port"],
        timeout=merged["timeout"],
        interval=merged["interval"],
        output=output,
    )
    criteria = SelectionCriteria(
        country=merged["country"],
        server_type=merged["server_type"],
        min_port_speed=merged["port_speed"],
        run_mode=merged["run_mode"],
        attempts=merged["pings"],
        interval=merged["interval"],
        limit=merged["count"],
        attempt_timeout=merged["timeout"],
    )
    workers = merged["max_workers"] or None

    provider = build_candidate_source(
        SourceConfig(
            primary=merged["source"],
            fallback_file=merged["fallback_file"],
            active_only=merged["active_only"],
        ),
        server_type=criteria.server_type,
        source_file=merged["source_file"],
    )
    prober = get_prober(merged["method"], port=merged["tcp_port"])

    run_id = uuid.uuid4().hex[:12]
    meta = ScanMeta.capture_context(
        run_id=run_id,
        criteria=criteria.to_dict(),
        source=provider.name,
        prober=prober.name,
        max_workers=workers,
    )

    candidates = provider.fetch_candidates()
    ensure_known_country(criteria.country, candidates)
    results = rank_candidates(candidates, criteria, prober, max_workers=workers)

    meta.relays_ranked = sum(1 for r in results if r.ranked)
    meta.relays_unreachable = len(results) - meta.relays_ranked

    if output is not None:
        write_results(results, output)
        meta.extra["output"] = str(output)
        meta.write_atomic(output.with_name(output.stem + ".meta.json"))

    if as_json:
        typer.echo(json.dumps({"run_id": run_id, "results": [r.to_dict() for r in results]}, indent=2))
    else:
        render_results(results, console, err_console)

    log.info(
        "scan command completed",
        extra={"run_id": run_id, "relays": len(results), "unreachable": meta.relays_unreachable},
    )


__all__ = ["scan"]

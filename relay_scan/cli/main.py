"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import os
import sys

import typer

from relay_scan.cli.commands.countries import countries
from relay_scan.cli.commands.scan import scan
from relay_scan.exceptions import (
    ConfigError,
    DependencyError,
    SourceUnavailableError,
)
from relay_scan.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Find the lowest-latency VPN relays", no_args_is_help=True)


app.command()(scan)
app.command()(countries)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli", level=os.environ.get("RELAY_SCAN_LOG_LEVEL", "WARNING"))
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        sys.exit(1)
    except SourceUnavailableError as exc:
        log.error(f"Relay list unavailable: {exc}")
        sys.exit(2)
    except DependencyError as exc:
        log.error(f"Missing dependency: {exc}")
        sys.exit(3)
    except KeyboardInterrupt:
        log.info("Scan interrupted")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    sys.exit(main())

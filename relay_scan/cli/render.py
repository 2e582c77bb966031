"""Rich rendering of ranked relays."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table

from relay_scan.models.results import AggregatedResult


def _ms(value: float | None) -> str:
    return "-" if value is None else f"{value:.1f}"


def build_results_table(results: Sequence[AggregatedResult]) -> Table:
    table = Table(title=f"Top {len(results)} results")
    table.add_column("#", justify="right")
    table.add_column("Relay")
    table.add_column("Avg ms", justify="right")
    table.add_column("Jitter", justify="right")
    table.add_column("Loss", justify="right")
    table.add_column("Gbps", justify="right")
    table.add_column("Type")
    table.add_column("Mode")
    table.add_column("Location")
    for idx, res in enumerate(results, start=1):
        c = res.candidate
        avg = _ms(res.score) if res.ranked else "[red]unreachable[/red]"
        table.add_row(
            str(idx),
            c.hostname,
            avg,
            _ms(res.jitter_ms),
            f"{res.fail_count}/{res.attempts}",
            str(c.port_speed),
            c.protocol_type or "unknown",
            c.hosting_mode,
            f"{c.city_name}, {c.country_name}" if c.city_name else c.country_name,
        )
    return table


def render_results(results: Sequence[AggregatedResult], console: Console, err_console: Console) -> None:
    if not results:
        err_console.print("No relays found")
        return
    console.print(build_results_table(results))


__all__ = ["build_results_table", "render_results"]

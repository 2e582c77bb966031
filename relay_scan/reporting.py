"""Tabular export of ranked scan results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

import pandas as pd

from relay_scan.exceptions import ConfigValidationError
from relay_scan.models.results import AggregatedResult

COLUMNS = [
    "rank",
    "hostname",
    "address",
    "country_code",
    "country",
    "city",
    "type",
    "port_speed_gbps",
    "run_mode",
    "avg_ms",
    "best_ms",
    "median_ms",
    "worst_ms",
    "jitter_ms",
    "received",
    "lost",
    "loss_pct",
]


def results_to_frame(results: Sequence[AggregatedResult]) -> pd.DataFrame:
    """Return ranked results as a DataFrame, one row per relay in rank order."""

    rows = [{"rank": idx, **res.to_dict()} for idx, res in enumerate(results, start=1)]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_results(results: Sequence[AggregatedResult], path: Path) -> Path:
    """Write results as CSV or JSON depending on the file suffix."""

    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        results_to_frame(results).to_csv(path, index=False)
    elif suffix == ".json":
        payload = {"results": [{"rank": idx, **res.to_dict()} for idx, res in enumerate(results, start=1)]}
        path.write_text(json.dumps(payload, indent=2))
    else:
        raise ConfigValidationError(f"Unsupported output format: {path.suffix or '<none>'} (use .csv or .json)")
    return path


__all__ = ["COLUMNS", "results_to_frame", "write_results"]

"""Scan run metadata with JSON serialization."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class ReproducibilityContext:
    library_versions: Dict[str, str]
    system_info: Dict[str, Any]


@dataclass
class ScanMeta:
    run_id: str
    started_at: str
    criteria: Dict[str, Any]
    source: str
    prober: str
    max_workers: Optional[int] = None
    relays_ranked: int = 0
    relays_unreachable: int = 0
    reproducibility: Optional[ReproducibilityContext] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    def write_atomic(self, path: Path) -> None:
        """Write metadata to a temporary file then move for atomicity."""
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(self.to_json())
        tmp_path.replace(path)

    @classmethod
    def from_json(cls, raw: str) -> "ScanMeta":
        data = json.loads(raw)
        context = data.get("reproducibility")
        if context is not None:
            data["reproducibility"] = ReproducibilityContext(**context)
        return cls(**data)

    @classmethod
    def capture_context(
        cls,
        run_id: str,
        criteria: Dict[str, Any],
        source: str,
        prober: str,
        max_workers: Optional[int] = None,
    ) -> "ScanMeta":
        reproducibility = ReproducibilityContext(
            library_versions=_capture_lib_versions(),
            system_info={
                "os": platform.platform(),
                "cpu_count": os.cpu_count(),
                "python_version": platform.python_version(),
            },
        )
        return cls(
            run_id=run_id,
            started_at=datetime.now(timezone.utc).isoformat(),
            criteria=criteria,
            source=source,
            prober=prober,
            max_workers=max_workers,
            reproducibility=reproducibility,
        )


def _capture_lib_versions() -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for lib in ["numpy", "pandas", "requests", "typer", "rich", "yaml"]:
        try:
            module = __import__(lib)
            versions[lib] = getattr(module, "__version__", "unknown")
        except ImportError:
            versions[lib] = "missing"
    return versions

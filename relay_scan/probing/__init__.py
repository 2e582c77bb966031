"""Latency probers and the per-relay probe loop."""

from relay_scan.probing.adapter import probe_candidate
from relay_scan.probing.factory import get_prober

__all__ = ["get_prober", "probe_candidate"]

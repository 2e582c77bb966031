"""Relay and scan result models."""

from relay_scan.models.candidate import HOSTING_MODES, PROTOCOL_TYPES, Candidate
from relay_scan.models.results import UNRANKED, AggregatedResult, ProbeSample

__all__ = ["AggregatedResult", "Candidate", "HOSTING_MODES", "PROTOCOL_TYPES", "ProbeSample", "UNRANKED"]

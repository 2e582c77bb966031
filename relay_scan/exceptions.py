"""Project-wide exception types."""

class RelayScanError(Exception):
    """Base exception for all relay-scan errors."""


class ConfigError(RelayScanError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied selection criteria or options."""


class SourceUnavailableError(RelayScanError):
    """Raised when a candidate source cannot produce a relay list."""


class SchemaError(RelayScanError):
    """Raised when a single relay record does not match the expected shape."""


class DependencyError(RelayScanError):
    """Raised when a requested source or prober is unknown or unavailable."""

"""
Error types for Release Health Monitor.
"""


class MonitorError(Exception):
    """Base class for all monitor errors."""


class ConfigurationError(MonitorError):
    """Raised when the monitor configuration is incomplete."""


class InvalidRange(MonitorError):
    """Raised when the requested range is not a positive number of days."""

    def __init__(self, range_days):
        self.range_days = range_days
        super().__init__(f"Invalid range_days: {range_days!r}. Must be a positive integer")


class InvalidCompareMode(MonitorError):
    """Raised when the comparison mode is not recognised."""

    def __init__(self, compare_mode):
        self.compare_mode = compare_mode
        super().__init__(f"Invalid compare_mode: {compare_mode!r}. Must be 'day' or 'week'")


class CredentialsError(MonitorError):
    """Raised when service account credentials are missing or unusable."""


class UpstreamFailure(MonitorError):
    """
    Raised by a source adapter when its upstream call fails.

    The orchestrator catches it at the call boundary and records it as an Err.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")

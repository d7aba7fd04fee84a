"""
Crash event data model.

Represents one GA4 report row: crash events for a single app version.
"""

from dataclasses import dataclass
from typing import Dict, Optional

UNKNOWN_VERSION = "(not set)"


@dataclass(frozen=True)
class RawCrashEvent:
    """Crash event count for one app version within the reporting window."""
    app_version: str
    event_count: int  # Non-negative

    def __post_init__(self):
        if self.event_count < 0:
            raise ValueError(f"Invalid event_count: {self.event_count}. Must be >= 0")

    @classmethod
    def from_report_row(cls, row: Dict) -> Optional["RawCrashEvent"]:
        """
        Create RawCrashEvent from a GA4 runReport row.

        Returns None when the row has no usable event count.
        """
        dimensions = row.get("dimensionValues") or []
        metrics = row.get("metricValues") or []
        if not metrics:
            return None

        try:
            count = int(metrics[0].get("value", ""))
        except (TypeError, ValueError, AttributeError):
            return None
        if count < 0:
            return None

        version = UNKNOWN_VERSION
        if dimensions and isinstance(dimensions[0], dict):
            version = dimensions[0].get("value") or UNKNOWN_VERSION

        return cls(app_version=version, event_count=count)


@dataclass(frozen=True)
class VersionCount:
    """Summed crash events for one app version."""
    version: str
    count: int

    def to_dict(self) -> dict:
        return {"version": self.version, "count": self.count}

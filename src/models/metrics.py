"""
Metric data models.

Time windows, aggregated metrics and classified statuses.
All of these are derived per request and never stored.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from src.models.crash import VersionCount
from src.models.review import ReviewText

# Status levels
NORMAL = "normal"
WARNING = "warning"
CRITICAL = "critical"
STATUS_LEVELS = (NORMAL, WARNING, CRITICAL)

# Metric kinds
REVIEW = "review"
CRASH = "crash"

# Comparison modes
COMPARE_DAY = "day"
COMPARE_WEEK = "week"


@dataclass(frozen=True)
class TimeWindow:
    """Closed time interval: start <= t <= end."""
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    def to_dict(self) -> dict:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


@dataclass(frozen=True)
class WindowPair:
    """Current window and the previous window it is compared against."""
    current: TimeWindow
    previous: TimeWindow
    range_days: int
    compare_mode: str

    def to_dict(self) -> dict:
        return {
            "rangeDays": self.range_days,
            "compareMode": self.compare_mode,
            "current": self.current.to_dict(),
            "previous": self.previous.to_dict(),
        }


@dataclass(frozen=True)
class ClassifiedStatus:
    """Status level plus its human-readable label."""
    level: str  # "normal", "warning", or "critical"
    label: str

    def __post_init__(self):
        if self.level not in STATUS_LEVELS:
            raise ValueError(
                f"Invalid level: {self.level}. Must be 'normal', 'warning', or 'critical'"
            )


@dataclass
class AggregatedReviewMetric:
    bad_count: int = 0
    current_average: float = 0.0
    previous_average: float = 0.0
    texts: List[ReviewText] = field(default_factory=list)


@dataclass
class AggregatedCrashMetric:
    total_count: int = 0
    by_version: List[VersionCount] = field(default_factory=list)

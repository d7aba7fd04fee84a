"""
Dashboard snapshot model.

The single result object returned for one monitoring pass.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.models.crash import VersionCount
from src.models.metrics import ClassifiedStatus, WindowPair
from src.models.review import ReviewText


@dataclass
class ReviewSection:
    count: int
    status: ClassifiedStatus
    average: float
    previous_average: float
    texts: List[ReviewText] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "status": self.status.label,
            "level": self.status.level,
            "average": self.average,
            "previousAverage": self.previous_average,
            "texts": [t.to_dict() for t in self.texts],
        }


@dataclass
class CrashSection:
    count: int
    status: ClassifiedStatus
    versions: List[VersionCount] = field(default_factory=list)
    vitals: List[Dict] = field(default_factory=list)  # Opaque Play Vitals issues

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "status": self.status.label,
            "level": self.status.level,
            "versions": [v.to_dict() for v in self.versions],
            "vitals": list(self.vitals),
        }


@dataclass
class DashboardSnapshot:
    reviews: ReviewSection
    crashes: CrashSection
    updated_at: datetime
    window: Optional[WindowPair] = None
    raw_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to the JSON shape consumed by the presentation layer."""
        data = {
            "reviews": self.reviews.to_dict(),
            "crashes": self.crashes.to_dict(),
            "updatedAt": self.updated_at.isoformat(),
            "rawData": {
                "reviewSource": self.raw_data.get("reviewSource"),
                "crashSource": self.raw_data.get("crashSource"),
                "vitalsSource": self.raw_data.get("vitalsSource"),
            },
        }
        if self.window is not None:
            data["window"] = self.window.to_dict()
        return data

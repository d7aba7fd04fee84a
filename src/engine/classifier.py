"""
Status Classifier.

Maps an aggregated count, or a failed lookup, to a status level and label.
"""

import logging

from src.models.metrics import (
    CRASH,
    CRITICAL,
    NORMAL,
    REVIEW,
    WARNING,
    ClassifiedStatus,
)
from src.models.upstream import Err, UpstreamResult

logger = logging.getLogger(__name__)

# Thresholds: (warning_min, critical_above)
REVIEW_WARNING_MIN = 5
REVIEW_CRITICAL_ABOVE = 6
CRASH_WARNING_MIN = 1001
CRASH_CRITICAL_ABOVE = 1500

THRESHOLDS = {
    REVIEW: (REVIEW_WARNING_MIN, REVIEW_CRITICAL_ABOVE),
    CRASH: (CRASH_WARNING_MIN, CRASH_CRITICAL_ABOVE),
}

LABELS = {
    NORMAL: "정상",
    WARNING: "주의 (내부 공유)",
    CRITICAL: "위기 (즉시 중단)",
}
LOOKUP_FAILED_LABEL = "lookup failed"


class StatusClassifier:
    """
    Classifies review and crash counts against fixed thresholds.
    """

    def classify(self, kind: str, result: UpstreamResult[int]) -> ClassifiedStatus:
        """
        Classify a count for the given metric kind.

        Args:
            kind: "review" (bad review count) or "crash" (total crash events)
            result: Ok(count), or Err when the lookup failed

        Returns:
            ClassifiedStatus. A failed lookup is always warning / "lookup failed".
        """
        if kind not in THRESHOLDS:
            raise ValueError(f"Invalid kind: {kind}. Must be 'review' or 'crash'")

        if isinstance(result, Err):
            logger.warning(f"{kind} lookup failed: {result.reason}")
            return ClassifiedStatus(level=WARNING, label=LOOKUP_FAILED_LABEL)

        level = self.level_for(kind, result.value)
        return ClassifiedStatus(level=level, label=LABELS[level])

    def level_for(self, kind: str, count: int) -> str:
        """Threshold lookup for a known count."""
        warning_min, critical_above = THRESHOLDS[kind]
        if count > critical_above:
            return CRITICAL
        if count >= warning_min:
            return WARNING
        return NORMAL

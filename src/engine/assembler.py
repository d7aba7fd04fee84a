"""
Response Assembler.

Composes classified review and crash metrics into a DashboardSnapshot.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.engine.classifier import StatusClassifier
from src.models.metrics import (
    CRASH,
    REVIEW,
    AggregatedCrashMetric,
    AggregatedReviewMetric,
    WindowPair,
)
from src.models.snapshot import CrashSection, DashboardSnapshot, ReviewSection
from src.models.upstream import Ok, UpstreamResult, diagnostic_payload

logger = logging.getLogger(__name__)


class ResponseAssembler:
    """
    Builds the outward-facing snapshot.

    Total over its inputs: any mix of Ok and Err yields a complete snapshot,
    with zero defaults for metrics whose source failed.
    """

    def __init__(self, classifier: Optional[StatusClassifier] = None):
        self.classifier = classifier or StatusClassifier()

    def assemble(
        self,
        review_result: UpstreamResult[AggregatedReviewMetric],
        crash_result: UpstreamResult[AggregatedCrashMetric],
        windows: Optional[WindowPair],
        now: datetime,
        vitals_result: Optional[UpstreamResult[List[Dict]]] = None,
        diagnostics: Optional[Dict[str, Any]] = None
    ) -> DashboardSnapshot:
        """
        Assemble a snapshot from aggregated (or failed) metrics.

        Args:
            review_result: Ok(AggregatedReviewMetric) or Err
            crash_result: Ok(AggregatedCrashMetric) or Err
            windows: Window pair the metrics were computed over
            now: Assembly timestamp
            vitals_result: Optional Play Vitals issues, forwarded verbatim
            diagnostics: Overrides for rawData entries; defaults are taken
                from the raw payloads or error reasons of the results

        Returns:
            DashboardSnapshot
        """
        review_metric = review_result.value if isinstance(review_result, Ok) else AggregatedReviewMetric()
        crash_metric = crash_result.value if isinstance(crash_result, Ok) else AggregatedCrashMetric()

        review_status = self.classifier.classify(
            REVIEW, review_result.map(lambda m: m.bad_count)
        )
        crash_status = self.classifier.classify(
            CRASH, crash_result.map(lambda m: m.total_count)
        )

        vitals = []
        if isinstance(vitals_result, Ok):
            vitals = list(vitals_result.value or [])

        raw_data = {
            "reviewSource": diagnostic_payload(review_result),
            "crashSource": diagnostic_payload(crash_result),
            "vitalsSource": diagnostic_payload(vitals_result) if vitals_result is not None else None,
        }
        if diagnostics:
            raw_data.update(diagnostics)

        snapshot = DashboardSnapshot(
            reviews=ReviewSection(
                count=review_metric.bad_count,
                status=review_status,
                average=review_metric.current_average,
                previous_average=review_metric.previous_average,
                texts=list(review_metric.texts)
            ),
            crashes=CrashSection(
                count=crash_metric.total_count,
                status=crash_status,
                versions=list(crash_metric.by_version),
                vitals=vitals
            ),
            updated_at=now,
            window=windows,
            raw_data=raw_data
        )

        logger.info(
            f"Snapshot assembled: reviews={review_status.level} ({review_metric.bad_count}), "
            f"crashes={crash_status.level} ({crash_metric.total_count})"
        )

        return snapshot

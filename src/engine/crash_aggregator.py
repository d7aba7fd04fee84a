"""
Crash Aggregator.

Sums crash events per app version. The upstream query is already scoped
to the current window, so no time filtering happens here.
"""

import logging
from typing import Sequence

import pandas as pd

from src.models.crash import RawCrashEvent, VersionCount
from src.models.metrics import AggregatedCrashMetric

logger = logging.getLogger(__name__)


class CrashAggregator:
    """
    Groups crash events by app version.
    """

    def aggregate(self, events: Sequence[RawCrashEvent]) -> AggregatedCrashMetric:
        """
        Sum event counts per version.

        Args:
            events: Crash event rows from the crash-event source

        Returns:
            AggregatedCrashMetric with versions sorted by count descending,
            ties in first-seen order
        """
        if not events:
            logger.info("No crash events in window")
            return AggregatedCrashMetric()

        df = pd.DataFrame(
            [{"version": e.app_version, "events": e.event_count} for e in events]
        )

        # sort=False keeps first-seen order; the stable sort then preserves it on ties
        grouped = df.groupby("version", sort=False)["events"].sum().reset_index()
        grouped = grouped.sort_values("events", ascending=False, kind="stable")

        by_version = [
            VersionCount(version=str(row.version), count=int(row.events))
            for row in grouped.itertuples(index=False)
        ]

        metric = AggregatedCrashMetric(
            total_count=sum(v.count for v in by_version),
            by_version=by_version
        )

        logger.info(
            f"Aggregated {metric.total_count} crash events "
            f"across {len(by_version)} versions"
        )

        return metric

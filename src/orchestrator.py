"""
Monitor Orchestrator.

Runs one monitoring pass: windows → concurrent fetches → aggregation
→ classification → snapshot.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, Optional

import config.settings as settings
from src.engine.assembler import ResponseAssembler
from src.engine.crash_aggregator import CrashAggregator
from src.engine.review_aggregator import ReviewAggregator
from src.engine.windows import TimeWindowCalculator
from src.models.monitor_config import MonitorConfig
from src.models.snapshot import DashboardSnapshot
from src.models.upstream import Err, UpstreamResult
from src.sources.ga4_crashes import GA4CrashEventSource
from src.sources.play_reviews import PlayReviewSource
from src.sources.play_vitals import PlayVitalsSource
from src.utils.credentials import ServiceAccountTokenProvider

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MonitorOrchestrator:
    """
    Engine entry point.

    Holds no per-request state: every run() derives windows from the clock
    and performs exactly one fetch attempt per source.
    """

    def __init__(
        self,
        config: MonitorConfig,
        review_source: Optional[PlayReviewSource] = None,
        crash_source: Optional[GA4CrashEventSource] = None,
        vitals_source: Optional[PlayVitalsSource] = None,
        clock: Callable[[], datetime] = _utc_now
    ):
        """
        Initialize orchestrator.

        Args:
            config: Explicit monitor configuration
            review_source: Review source (built from config if omitted)
            crash_source: Crash event source (built from config if omitted)
            vitals_source: Vitals source (built from config if omitted)
            clock: Returns the current UTC time
        """
        config.validate()
        self.config = config
        self.clock = clock

        play_tokens = ServiceAccountTokenProvider(
            config.play_service_account_json,
            scopes=[settings.ANDROID_PUBLISHER_SCOPE, settings.PLAY_REPORTING_SCOPE]
        )

        self.review_source = review_source or PlayReviewSource(
            token_provider=play_tokens,
            base_url=settings.ANDROID_PUBLISHER_URL,
            timeout_seconds=config.http_timeout_seconds
        )
        self.crash_source = crash_source or GA4CrashEventSource(
            token_provider=ServiceAccountTokenProvider(
                config.firebase_service_account_json,
                scopes=[settings.ANALYTICS_SCOPE]
            ),
            base_url=settings.ANALYTICS_DATA_URL,
            timeout_seconds=config.http_timeout_seconds,
            event_name=config.crash_event_name
        )
        self.vitals_source = vitals_source or PlayVitalsSource(
            token_provider=play_tokens,
            base_url=settings.PLAY_REPORTING_URL,
            timeout_seconds=config.http_timeout_seconds
        )

        self.window_calculator = TimeWindowCalculator()
        self.review_aggregator = ReviewAggregator()
        self.crash_aggregator = CrashAggregator()
        self.assembler = ResponseAssembler()

        logger.info(f"Initialized MonitorOrchestrator ({config.describe()})")

    def run(
        self,
        range_days: Optional[int] = None,
        compare_mode: Optional[str] = None
    ) -> DashboardSnapshot:
        """
        Produce one dashboard snapshot.

        Args:
            range_days: Current window length in days (defaults to config)
            compare_mode: "day" or "week" (defaults to config)

        Returns:
            DashboardSnapshot. Upstream failures are reported inside it.

        Raises:
            InvalidRange: If range_days <= 0 (before any fetch is issued)
            InvalidCompareMode: If compare_mode is unknown
        """
        range_days = self.config.range_days if range_days is None else range_days
        compare_mode = compare_mode or self.config.compare_mode

        now = self.clock()
        windows = self.window_calculator.compute_windows(now, range_days, compare_mode)

        logger.info(
            f"Starting monitoring pass: {range_days} days, compare_mode={windows.compare_mode}"
        )

        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="upstream") as pool:
            review_future = pool.submit(
                self.review_source.fetch_recent_reviews,
                self.config.package_name,
                self.config.review_max_results
            )
            crash_future = None
            if self.config.has_crash_property:
                crash_future = pool.submit(
                    self.crash_source.fetch_events_by_version,
                    self.config.ga4_property_id,
                    windows.current.start,
                    windows.current.end
                )
            vitals_future = None
            if self.config.include_vitals:
                vitals_future = pool.submit(
                    self.vitals_source.fetch_top_issues,
                    self.config.package_name,
                    self.config.vitals_page_size
                )

            review_result = self._collect(review_future, PlayReviewSource.source_name)
            if crash_future is not None:
                crash_result = self._collect(crash_future, GA4CrashEventSource.source_name)
            else:
                crash_result = Err(
                    reason="GA4 property ID is not configured",
                    source=GA4CrashEventSource.source_name
                )
            vitals_result = None
            if vitals_future is not None:
                vitals_result = self._collect(vitals_future, PlayVitalsSource.source_name)

        review_metric = review_result.map(
            lambda reviews: self.review_aggregator.aggregate(reviews, windows)
        )
        crash_metric = crash_result.map(self.crash_aggregator.aggregate)

        return self.assembler.assemble(
            review_metric,
            crash_metric,
            windows,
            self.clock(),
            vitals_result=vitals_result
        )

    def _collect(self, future, source_name: str) -> UpstreamResult:
        """Wait for a fetch; anything it raises becomes Err for that source only."""
        try:
            return future.result()
        except Exception as e:
            logger.error(f"Unexpected failure in {source_name}: {e}", exc_info=True)
            return Err(reason=f"{type(e).__name__}: {e}", source=source_name)

"""
Time Window Calculator.

Derives the current window and the window it is compared against.
"""

import logging
from datetime import datetime, timedelta, timezone

from src.errors import InvalidCompareMode, InvalidRange
from src.models.metrics import COMPARE_DAY, COMPARE_WEEK, TimeWindow, WindowPair

logger = logging.getLogger(__name__)

# "previous-window" is accepted as a synonym of "day"
COMPARE_MODE_ALIASES = {
    COMPARE_DAY: COMPARE_DAY,
    "previous-window": COMPARE_DAY,
    COMPARE_WEEK: COMPARE_WEEK,
}

WEEK_DAYS = 7


class TimeWindowCalculator:
    """
    Computes current and previous windows from wall-clock "now".

    Stateless: every call derives fresh windows from its arguments.
    """

    def compute_windows(
        self,
        now: datetime,
        range_days: int,
        compare_mode: str = COMPARE_WEEK
    ) -> WindowPair:
        """
        Compute the current and previous windows.

        Args:
            now: End of the current window
            range_days: Length of the current window in days (> 0)
            compare_mode: "day" compares to the equally-sized preceding period,
                "week" compares to the 7 days before the current window

        Returns:
            WindowPair where previous.end == current.start

        Raises:
            InvalidRange: If range_days is not a positive integer
            InvalidCompareMode: If compare_mode is unknown
        """
        if isinstance(range_days, bool) or not isinstance(range_days, int) or range_days <= 0:
            raise InvalidRange(range_days)

        mode = COMPARE_MODE_ALIASES.get(compare_mode)
        if mode is None:
            raise InvalidCompareMode(compare_mode)

        # Review timestamps are UTC-aware; naive "now" is taken as UTC
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        current = TimeWindow(start=now - timedelta(days=range_days), end=now)

        previous_days = range_days if mode == COMPARE_DAY else WEEK_DAYS
        previous = TimeWindow(
            start=current.start - timedelta(days=previous_days),
            end=current.start
        )

        logger.debug(
            f"Windows for range_days={range_days}, mode={mode}: "
            f"current {current.start.isoformat()} - {current.end.isoformat()}, "
            f"previous {previous.start.isoformat()} - {previous.end.isoformat()}"
        )

        return WindowPair(
            current=current,
            previous=previous,
            range_days=range_days,
            compare_mode=mode
        )

"""
GA4 crash event source.

Crashlytics logs crashes as app_exception events in GA4; the Data API
runReport endpoint returns their counts per app version.
"""

import logging
from datetime import datetime
from typing import Dict, List, Tuple

from src.models.crash import RawCrashEvent
from src.models.upstream import UpstreamResult
from src.sources.base import UpstreamSource

logger = logging.getLogger(__name__)


def build_report_request(
    window_start: datetime,
    window_end: datetime,
    event_name: str = "app_exception"
) -> Dict:
    """Build a runReport body counting event_name per appVersion in the window."""
    return {
        "dateRanges": [
            {
                "startDate": window_start.strftime("%Y-%m-%d"),
                "endDate": window_end.strftime("%Y-%m-%d")
            }
        ],
        "dimensions": [{"name": "appVersion"}],
        "metrics": [{"name": "eventCount"}],
        "dimensionFilter": {
            "filter": {
                "fieldName": "eventName",
                "stringFilter": {"value": event_name}
            }
        }
    }


class GA4CrashEventSource(UpstreamSource):
    """
    Reads crash event counts per app version from the GA4 Data API.
    """

    source_name = "ga4_crashes"

    def __init__(self, *args, event_name: str = "app_exception", **kwargs):
        super().__init__(*args, **kwargs)
        self.event_name = event_name

    def fetch_events_by_version(
        self,
        property_id: str,
        window_start: datetime,
        window_end: datetime
    ) -> UpstreamResult[List[RawCrashEvent]]:
        """
        Fetch crash events for the window, grouped by version upstream.

        Args:
            property_id: GA4 property ID (digits only)
            window_start: Start of the current window
            window_end: End of the current window

        Returns:
            Ok(list of RawCrashEvent) or Err
        """
        return self._guarded(self._fetch, property_id, window_start, window_end)

    def _fetch(
        self,
        property_id: str,
        window_start: datetime,
        window_end: datetime
    ) -> Tuple[List[RawCrashEvent], Dict]:
        body = build_report_request(window_start, window_end, self.event_name)
        payload = self._post_json(f"properties/{property_id}:runReport", body)

        events = []
        dropped = 0
        for row in payload.get("rows") or []:
            event = RawCrashEvent.from_report_row(row) if isinstance(row, dict) else None
            if event is None:
                dropped += 1
                continue
            events.append(event)

        if dropped:
            logger.debug(f"Dropped {dropped} unparseable report rows")

        logger.info(f"Fetched {len(events)} crash event rows for property {property_id}")
        return events, payload

"""
Play Vitals source.

Fetches top error issues from the Play Developer Reporting API.
Issues are forwarded verbatim and never aggregated.
"""

import logging
from typing import Dict, List, Tuple

from src.models.upstream import UpstreamResult
from src.sources.base import UpstreamSource

logger = logging.getLogger(__name__)


class PlayVitalsSource(UpstreamSource):

    source_name = "play_vitals"

    def fetch_top_issues(
        self,
        package_name: str,
        page_size: int = 10
    ) -> UpstreamResult[List[Dict]]:
        """Fetch the first page of error issues for the app."""
        return self._guarded(self._fetch, package_name, page_size)

    def _fetch(self, package_name: str, page_size: int) -> Tuple[List[Dict], Dict]:
        payload = self._get_json(
            f"apps/{package_name}/errorIssues:search",
            params={"pageSize": page_size}
        )
        issues = list(payload.get("errorIssues") or [])
        logger.info(f"Fetched {len(issues)} vitals issues for {package_name}")
        return issues, payload

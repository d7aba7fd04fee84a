"""
Play Console review source.

Fetches the most recent reviews through the Android Publisher API.
"""

import logging
from typing import Dict, List, Tuple

from src.models.review import RawReview
from src.models.upstream import UpstreamResult
from src.sources.base import UpstreamSource

logger = logging.getLogger(__name__)


class PlayReviewSource(UpstreamSource):
    """
    Reads reviews from androidpublisher v3 reviews.list.

    The API only returns reviews from roughly the last week, newest first.
    """

    source_name = "play_reviews"

    def fetch_recent_reviews(
        self,
        package_name: str,
        max_results: int = 100
    ) -> UpstreamResult[List[RawReview]]:
        """
        Fetch recent reviews.

        Args:
            package_name: Android package name (e.g., "com.example.app")
            max_results: Page size requested from the API

        Returns:
            Ok(list of RawReview) or Err
        """
        return self._guarded(self._fetch, package_name, max_results)

    def _fetch(self, package_name: str, max_results: int) -> Tuple[List[RawReview], Dict]:
        payload = self._get_json(
            f"applications/{package_name}/reviews",
            params={"maxResults": max_results}
        )

        reviews = [
            RawReview.from_api(item)
            for item in payload.get("reviews") or []
            if isinstance(item, dict)
        ]

        logger.info(f"Fetched {len(reviews)} reviews for {package_name}")
        return reviews, payload

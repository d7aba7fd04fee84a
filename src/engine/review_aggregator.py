"""
Review Aggregator.

Partitions raw reviews into the current and previous windows and
computes bad-review count, averages and the text list.
"""

import logging
from typing import List, Sequence

from src.models.metrics import AggregatedReviewMetric, WindowPair
from src.models.review import DEFAULT_AUTHOR, RawReview, ReviewText

logger = logging.getLogger(__name__)

# Ratings at or below this count as bad reviews
BAD_RATING_MAX = 2


def _average(ratings: List[int]) -> float:
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


class ReviewAggregator:
    """
    Aggregates raw reviews over a window pair.

    Reviews without a rating or timestamp are skipped for both windows.
    """

    def aggregate(
        self,
        reviews: Sequence[RawReview],
        windows: WindowPair
    ) -> AggregatedReviewMetric:
        """
        Aggregate reviews for the current and previous windows.

        Args:
            reviews: Raw reviews from the review source
            windows: Current and previous windows

        Returns:
            AggregatedReviewMetric (all zeros when nothing falls in the current window)
        """
        current_ratings = []
        previous_ratings = []
        texts = []
        skipped = 0

        for review in reviews:
            if not review.is_valid:
                skipped += 1
                continue

            try:
                instant = review.instant
            except (OverflowError, OSError, ValueError):
                skipped += 1
                continue

            # Current is checked first so the shared boundary instant counts once
            if windows.current.contains(instant):
                current_ratings.append(review.rating)
                if review.text:
                    texts.append(ReviewText(
                        review_id=review.review_id,
                        rating=review.rating,
                        text=review.text,
                        date=instant,
                        author=review.author or DEFAULT_AUTHOR
                    ))
            elif windows.previous.contains(instant):
                previous_ratings.append(review.rating)

        # sorted() is stable, so ties keep their input order
        texts = sorted(texts, key=lambda t: t.date, reverse=True)

        metric = AggregatedReviewMetric(
            bad_count=sum(1 for rating in current_ratings if rating <= BAD_RATING_MAX),
            current_average=_average(current_ratings),
            previous_average=_average(previous_ratings),
            texts=texts
        )

        if skipped:
            logger.debug(f"Skipped {skipped} malformed reviews")

        logger.info(
            f"Aggregated {len(current_ratings)} current and {len(previous_ratings)} previous reviews "
            f"(bad: {metric.bad_count}, avg: {metric.current_average:.2f} "
            f"vs {metric.previous_average:.2f})"
        )

        return metric

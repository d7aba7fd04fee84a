"""
Review data models.

Represents raw reviews from the Play Console reviews API and
the text entries surfaced on the dashboard.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DEFAULT_AUTHOR = "Anonymous"


def _parse_int(value: Any) -> Optional[int]:
    """Parse ints and numeric strings; anything else becomes None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class RawReview:
    """
    Raw review from the Play Console.

    rating and timestamp_seconds are None when the upstream record
    did not carry a usable value. Such reviews are excluded from aggregation.
    """
    review_id: str
    rating: Optional[int]  # 1-5 star rating
    text: str  # Review text, may be empty
    timestamp_seconds: Optional[int]  # Epoch seconds of last modification
    author: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        if self.rating is None or self.timestamp_seconds is None:
            return False
        return 1 <= self.rating <= 5

    @property
    def instant(self) -> Optional[datetime]:
        if self.timestamp_seconds is None:
            return None
        return datetime.fromtimestamp(self.timestamp_seconds, tz=timezone.utc)

    @classmethod
    def from_api(cls, data: Dict) -> "RawReview":
        """
        Create RawReview from a Play Console reviews.list entry.

        The rating and timestamp live on the first user comment:
        comments[0].userComment.starRating and .lastModified.seconds.
        """
        comments = data.get("comments")
        user_comment = {}
        if isinstance(comments, list) and comments and isinstance(comments[0], dict):
            user_comment = comments[0].get("userComment")
        if not isinstance(user_comment, dict):
            user_comment = {}

        rating = _parse_int(user_comment.get("starRating"))
        if rating is not None and not (1 <= rating <= 5):
            rating = None

        last_modified = user_comment.get("lastModified") or {}
        timestamp = None
        if isinstance(last_modified, dict):
            timestamp = _parse_int(last_modified.get("seconds"))

        text = user_comment.get("text")
        author = data.get("authorName")

        return cls(
            review_id=str(data.get("reviewId", "")),
            rating=rating,
            text=text.strip() if isinstance(text, str) else "",
            timestamp_seconds=timestamp,
            author=author if isinstance(author, str) and author else None,
        )


@dataclass(frozen=True)
class ReviewText:
    """A review shown on the dashboard, from the current window."""
    review_id: str
    rating: int
    text: str
    date: datetime
    author: str = DEFAULT_AUTHOR

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.review_id,
            "rating": self.rating,
            "text": self.text,
            "date": self.date.isoformat(),
            "author": self.author,
        }

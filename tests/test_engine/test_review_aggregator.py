"""
Unit tests for ReviewAggregator.
"""

import pytest
from datetime import datetime, timedelta, timezone

from src.engine.review_aggregator import ReviewAggregator
from src.engine.windows import TimeWindowCalculator
from src.models.review import RawReview

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def ts(delta: timedelta) -> int:
    return int((NOW - delta).timestamp())


def make_review(review_id, rating, ago, text="", author="user"):
    return RawReview(
        review_id=review_id,
        rating=rating,
        text=text,
        timestamp_seconds=ts(ago) if ago is not None else None,
        author=author
    )


@pytest.fixture
def windows():
    return TimeWindowCalculator().compute_windows(NOW, 7, "week")


@pytest.fixture
def aggregator():
    return ReviewAggregator()


def test_scenario_current_window_only(aggregator, windows):
    """Two reviews one day ago are current; the ten-day-old one is previous."""
    reviews = [
        make_review("a", 1, timedelta(days=1)),
        make_review("b", 5, timedelta(days=1)),
        make_review("c", 2, timedelta(days=10)),
    ]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.bad_count == 1
    assert metric.current_average == 3.0
    assert metric.previous_average == 2.0


def test_empty_current_window(aggregator, windows):
    reviews = [make_review("old", 4, timedelta(days=9), text="fine")]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.bad_count == 0
    assert metric.current_average == 0
    assert metric.texts == []
    assert metric.previous_average == 4.0


def test_no_reviews(aggregator, windows):
    metric = aggregator.aggregate([], windows)

    assert metric.bad_count == 0
    assert metric.current_average == 0
    assert metric.previous_average == 0
    assert metric.texts == []


def test_malformed_reviews_excluded(aggregator, windows):
    reviews = [
        make_review("ok", 2, timedelta(days=1)),
        RawReview("no-rating", None, "text", ts(timedelta(days=1))),
        RawReview("no-ts", 1, "text", None),
    ]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.bad_count == 1
    assert metric.current_average == 2.0
    assert [t.review_id for t in metric.texts] == []


def test_reviews_outside_both_windows_ignored(aggregator, windows):
    reviews = [
        make_review("ancient", 1, timedelta(days=30)),
        make_review("future", 1, timedelta(days=-1)),
    ]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.bad_count == 0
    assert metric.previous_average == 0


def test_boundary_instant_counted_once_in_current(aggregator, windows):
    boundary = int(windows.current.start.timestamp())
    reviews = [RawReview("edge", 1, "", boundary)]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.bad_count == 1
    assert metric.current_average == 1.0
    assert metric.previous_average == 0


def test_texts_sorted_newest_first(aggregator, windows):
    reviews = [
        make_review("older", 3, timedelta(days=3), text="meh"),
        make_review("newest", 1, timedelta(hours=1), text="crashes"),
        make_review("middle", 5, timedelta(days=2), text="great"),
        make_review("silent", 1, timedelta(hours=2)),
    ]

    metric = aggregator.aggregate(reviews, windows)

    assert [t.review_id for t in metric.texts] == ["newest", "middle", "older"]


def test_texts_ties_keep_input_order(aggregator, windows):
    reviews = [
        make_review("first", 1, timedelta(days=1), text="one"),
        make_review("second", 2, timedelta(days=1), text="two"),
    ]

    metric = aggregator.aggregate(reviews, windows)

    assert [t.review_id for t in metric.texts] == ["first", "second"]


def test_missing_author_gets_placeholder(aggregator, windows):
    reviews = [make_review("a", 4, timedelta(days=1), text="nice", author=None)]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.texts[0].author == "Anonymous"


@pytest.mark.parametrize("bad_rating", [0, -3, 6])
def test_out_of_range_rating_excluded(aggregator, windows, bad_rating):
    reviews = [
        make_review("x", bad_rating, timedelta(days=1), text="odd"),
        make_review("y", 5, timedelta(days=1)),
    ]

    metric = aggregator.aggregate(reviews, windows)

    assert metric.bad_count == 0
    assert metric.current_average == 5.0
    assert metric.texts == []

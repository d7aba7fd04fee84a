"""
Unit tests for ResponseAssembler.
"""

import pytest
from datetime import datetime, timezone

from src.engine.assembler import ResponseAssembler
from src.engine.windows import TimeWindowCalculator
from src.models.crash import VersionCount
from src.models.metrics import AggregatedCrashMetric, AggregatedReviewMetric
from src.models.review import ReviewText
from src.models.upstream import Err, Ok

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def windows():
    return TimeWindowCalculator().compute_windows(NOW, 7, "week")


@pytest.fixture
def review_metric():
    return AggregatedReviewMetric(
        bad_count=5,
        current_average=2.5,
        previous_average=3.75,
        texts=[ReviewText("r1", 1, "Keeps crashing", NOW, "kim")]
    )


@pytest.fixture
def crash_metric():
    return AggregatedCrashMetric(
        total_count=1600,
        by_version=[VersionCount("1.0", 900), VersionCount("1.1", 700)]
    )


def test_assemble_both_ok(windows, review_metric, crash_metric):
    snapshot = ResponseAssembler().assemble(
        Ok(review_metric, raw={"reviews": []}),
        Ok(crash_metric, raw={"rows": []}),
        windows,
        NOW,
        vitals_result=Ok([{"name": "issue-1"}], raw={"errorIssues": [{"name": "issue-1"}]})
    )

    data = snapshot.to_dict()

    assert data["reviews"]["count"] == 5
    assert data["reviews"]["level"] == "warning"
    assert data["reviews"]["average"] == 2.5
    assert data["reviews"]["previousAverage"] == 3.75
    assert data["reviews"]["texts"][0]["id"] == "r1"
    assert data["crashes"]["count"] == 1600
    assert data["crashes"]["level"] == "critical"
    assert data["crashes"]["versions"] == [
        {"version": "1.0", "count": 900},
        {"version": "1.1", "count": 700},
    ]
    assert data["crashes"]["vitals"] == [{"name": "issue-1"}]
    assert data["updatedAt"] == NOW.isoformat()
    assert data["window"]["rangeDays"] == 7
    assert data["rawData"]["reviewSource"] == {"reviews": []}
    assert data["rawData"]["crashSource"] == {"rows": []}


def test_assemble_both_failed(windows):
    snapshot = ResponseAssembler().assemble(
        Err("HTTP 401", source="play_reviews"),
        Err("timeout", source="ga4_crashes"),
        windows,
        NOW
    )

    data = snapshot.to_dict()

    for section in ("reviews", "crashes"):
        assert data[section]["level"] == "warning"
        assert data[section]["status"] == "lookup failed"
        assert data[section]["count"] == 0
    assert data["reviews"]["average"] == 0
    assert data["reviews"]["texts"] == []
    assert data["crashes"]["versions"] == []
    assert data["crashes"]["vitals"] == []
    assert data["rawData"]["reviewSource"]["error"] == "HTTP 401"
    assert data["rawData"]["crashSource"]["error"] == "timeout"
    assert data["rawData"]["vitalsSource"] is None


def test_one_failure_does_not_affect_other(windows, review_metric):
    snapshot = ResponseAssembler().assemble(
        Ok(review_metric),
        Err("HTTP 500", source="ga4_crashes"),
        windows,
        NOW
    )

    assert snapshot.reviews.status.level == "warning"
    assert snapshot.reviews.count == 5
    assert snapshot.crashes.status.label == "lookup failed"
    assert snapshot.crashes.count == 0


def test_failed_vitals_forwarded_as_diagnostic(windows, review_metric, crash_metric):
    snapshot = ResponseAssembler().assemble(
        Ok(review_metric),
        Ok(crash_metric),
        windows,
        NOW,
        vitals_result=Err("HTTP 403", source="play_vitals")
    )

    assert snapshot.crashes.vitals == []
    assert snapshot.raw_data["vitalsSource"]["error"] == "HTTP 403"


def test_diagnostics_override(windows, review_metric, crash_metric):
    snapshot = ResponseAssembler().assemble(
        Ok(review_metric),
        Ok(crash_metric),
        windows,
        NOW,
        diagnostics={"reviewSource": "trimmed"}
    )

    assert snapshot.to_dict()["rawData"]["reviewSource"] == "trimmed"

"""Tests for footprint aggregation."""

from datetime import date

import pytest

from eco_tracker.domain.activities import ActivityCategory, ActivityRecord
from eco_tracker.services.reporting import aggregate


def _record(record_id: int, category: ActivityCategory, kg: float) -> ActivityRecord:
    return ActivityRecord(
        id=record_id,
        date=date(2024, 5, 1),
        category=category,
        detail="",
        amount=1.0,
        kg=kg,
    )


def test_aggregate_excludes_non_positive() -> None:
    records = [
        _record(1, ActivityCategory.TRANSPORT, 10.0),
        _record(2, ActivityCategory.RECYCLING, -5.0),
        _record(3, ActivityCategory.TRANSPORT, 5.0),
    ]

    summary = aggregate(records)

    assert summary.per_category == {ActivityCategory.TRANSPORT: pytest.approx(15.0)}
    assert summary.grand_total == pytest.approx(15.0)
    assert summary.credits_total == pytest.approx(-5.0)
    assert summary.record_count == 3


def test_aggregate_zero_kg_is_excluded() -> None:
    summary = aggregate([_record(1, ActivityCategory.TRANSPORT, 0.0)])

    assert summary.per_category == {}
    assert summary.grand_total == 0


def test_aggregate_empty() -> None:
    summary = aggregate([])

    assert summary.per_category == {}
    assert summary.grand_total == 0
    assert summary.record_count == 0


def test_aggregate_grand_total_matches_categories() -> None:
    records = [
        _record(1, ActivityCategory.FOOD, 8.0),
        _record(2, ActivityCategory.ELECTRICITY, 4.75),
        _record(3, ActivityCategory.FOOD, 2.0),
        _record(4, ActivityCategory.WATER, 0.5),
    ]

    summary = aggregate(records)

    assert list(summary.per_category) == [
        ActivityCategory.FOOD,
        ActivityCategory.ELECTRICITY,
        ActivityCategory.WATER,
    ]
    assert summary.grand_total == pytest.approx(sum(summary.per_category.values()))
    assert summary.grand_total == pytest.approx(15.25)

"""Aggregation of stored activities into footprint totals."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from eco_tracker.domain.activities import ActivityCategory, ActivityRecord


@dataclass
class FootprintSummary:
    """Positive-emission totals per category.

    Records with ``kg <= 0`` never contribute to ``per_category`` or
    ``grand_total``; their sum is kept apart in ``credits_total``.
    """

    per_category: dict[ActivityCategory, float] = field(default_factory=dict)
    grand_total: float = 0.0
    credits_total: float = 0.0
    record_count: int = 0


def aggregate(records: Iterable[ActivityRecord]) -> FootprintSummary:
    """Sum positive kg per category in order of first appearance."""
    summary = FootprintSummary()
    for record in records:
        summary.record_count += 1
        if record.kg <= 0:
            summary.credits_total += record.kg
            continue
        summary.per_category[record.category] = (
            summary.per_category.get(record.category, 0.0) + record.kg
        )
        summary.grand_total += record.kg
    return summary

"""Activity logging and reporting service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from eco_tracker.domain.activities import (
    ActivityCategory,
    ActivityRecord,
    ActivityRecordInput,
)
from eco_tracker.domain.emission_factors import DEFAULT_ELECTRICITY_FACTOR
from eco_tracker.domain.errors import ValidationError
from eco_tracker.services.carbon import compute_kg, parse_amount
from eco_tracker.services.reporting import FootprintSummary, aggregate

_logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 100
MAX_LIST_LIMIT = 100


class ActivityRepository(Protocol):
    """Persistence interface for activity records."""

    def insert(self, record: ActivityRecordInput) -> ActivityRecord:
        """Persist a record and return it with its assigned id."""

    def list_recent(self, limit: int) -> list[ActivityRecord]:
        """Return up to ``limit`` records, newest date first."""

    def list_between(self, start: date, end: date) -> list[ActivityRecord]:
        """Return records with ``start <= date < end``, newest date first."""


@dataclass
class ActivityService:
    """Application service for logging activities and summarizing them."""

    repository: ActivityRepository
    electricity_factor: float = DEFAULT_ELECTRICITY_FACTOR
    list_limit: int = DEFAULT_LIST_LIMIT

    def estimate(
        self,
        category: ActivityCategory,
        detail: str | None,
        amount: object,
        electricity_factor: float | None = None,
    ) -> float:
        """Validate the amount and return its kg CO2e without persisting."""
        value = parse_amount(amount)
        factor = (
            self.electricity_factor if electricity_factor is None else electricity_factor
        )
        return compute_kg(category, detail, value, factor)

    def log_activity(  # noqa: PLR0913
        self,
        category: ActivityCategory,
        detail: str | None,
        amount: object,
        day: date | None = None,
        electricity_factor: float | None = None,
    ) -> ActivityRecord:
        """Compute kg for an activity and store it."""
        value = parse_amount(amount)
        kg = self.estimate(category, detail, value, electricity_factor)
        return self.record_precomputed(
            ActivityRecordInput(
                date=day or current_day(),
                category=category,
                detail=detail or "",
                amount=value,
                kg=kg,
            )
        )

    def record_precomputed(self, record: ActivityRecordInput) -> ActivityRecord:
        """Store a record whose kg was computed by the caller."""
        created = self.repository.insert(record)
        _logger.info(
            "Activity logged: id=%s category=%s kg=%s",
            created.id,
            created.category,
            created.kg,
        )
        return created

    def list_activities(self, limit: int | None = None) -> list[ActivityRecord]:
        """Return recent activities, newest first."""
        return self.repository.list_recent(self.list_limit if limit is None else limit)

    def get_summary(self, limit: int | None = None) -> FootprintSummary:
        """Aggregate the most recent activities."""
        return aggregate(self.list_activities(limit))

    def get_period_summary(self, start: date, end: date) -> FootprintSummary:
        """Aggregate activities dated within ``[start, end)``."""
        if end <= start:
            raise ValidationError("end must be after start")
        return aggregate(self.repository.list_between(start, end))


def current_day() -> date:
    """Return the current UTC calendar day."""
    return datetime.now(tz=UTC).date()

"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from eco_tracker.config import Settings
from eco_tracker.containers import AppContainer
from eco_tracker.domain.activities import ActivityRecord, ActivityRecordInput
from eco_tracker.domain.errors import StoreReadError, StoreWriteError
from eco_tracker.services.activities import ActivityRepository, ActivityService


@dataclass
class InMemoryActivityRepository(ActivityRepository):
    """In-memory activity repository for tests."""

    records: list[ActivityRecord] = field(default_factory=list)
    fail_writes: str | None = None
    fail_reads: str | None = None
    insert_calls: int = 0

    def insert(self, record: ActivityRecordInput) -> ActivityRecord:
        self.insert_calls += 1
        if self.fail_writes is not None:
            raise StoreWriteError(self.fail_writes)
        created = ActivityRecord(
            id=len(self.records) + 1,
            date=record.date,
            category=record.category,
            detail=record.detail,
            amount=record.amount,
            kg=record.kg,
        )
        self.records.append(created)
        return created

    def list_recent(self, limit: int) -> list[ActivityRecord]:
        if self.fail_reads is not None:
            raise StoreReadError(self.fail_reads)
        return _newest_first(self.records)[:limit]

    def list_between(self, start: date, end: date) -> list[ActivityRecord]:
        if self.fail_reads is not None:
            raise StoreReadError(self.fail_reads)
        return _newest_first(
            [record for record in self.records if start <= record.date < end]
        )


def _newest_first(records: list[ActivityRecord]) -> list[ActivityRecord]:
    # Stable sort keeps insertion order among records sharing a date.
    return sorted(records, key=lambda record: record.date, reverse=True)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def activity_repository() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture
def activity_service(
    activity_repository: InMemoryActivityRepository,
) -> ActivityService:
    return ActivityService(activity_repository)


@pytest.fixture
def container(settings: Settings, activity_service: ActivityService) -> AppContainer:
    return AppContainer(settings=settings, activity_service=activity_service)

"""Supabase repository for activity records."""

from dataclasses import dataclass
from datetime import date

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from eco_tracker.domain.activities import (
    ActivityCategory,
    ActivityRecord,
    ActivityRecordInput,
)
from eco_tracker.domain.errors import StoreReadError, StoreWriteError
from eco_tracker.services.activities import ActivityRepository

_COLUMNS = "id, date, category, detail, amount, kg"


@dataclass
class SupabaseActivityRepository(ActivityRepository):
    """Supabase implementation for activity persistence."""

    client: Client
    table: str = "activities"

    def insert(self, record: ActivityRecordInput) -> ActivityRecord:
        """Insert one activity row and return it with its id."""
        try:
            response = (
                self.client.table(self.table)
                .insert(
                    {
                        "date": record.date.isoformat(),
                        "category": record.category.value,
                        "detail": record.detail,
                        "amount": record.amount,
                        "kg": record.kg,
                    }
                )
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreWriteError(_error_message(exc)) from exc
        if not response.data:
            raise StoreWriteError("Failed to create activity")
        return _parse_row(response.data[0])

    def list_recent(self, limit: int) -> list[ActivityRecord]:
        """Return the most recent activities by date."""
        try:
            response = (
                self.client.table(self.table)
                .select(_COLUMNS)
                .order("date", desc=True)
                .order("id", desc=False)
                .limit(limit)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreReadError(_error_message(exc)) from exc
        return [_parse_row(row) for row in response.data or []]

    def list_between(self, start: date, end: date) -> list[ActivityRecord]:
        """Return activities dated in the half-open range."""
        try:
            response = (
                self.client.table(self.table)
                .select(_COLUMNS)
                .gte("date", start.isoformat())
                .lt("date", end.isoformat())
                .order("date", desc=True)
                .order("id", desc=False)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreReadError(_error_message(exc)) from exc
        return [_parse_row(row) for row in response.data or []]


def _error_message(exc: Exception) -> str | None:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or None


def _parse_row(row: dict[str, object]) -> ActivityRecord:
    return ActivityRecord(
        id=int(row["id"]),
        date=date.fromisoformat(str(row["date"])),
        category=ActivityCategory(str(row["category"])),
        detail=str(row.get("detail") or ""),
        amount=float(row.get("amount", 0.0)),
        kg=float(row.get("kg", 0.0)),
    )

"""Pydantic models for the activities API."""

import datetime as dt

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from eco_tracker.domain.activities import ActivityCategory, ActivityRecord


class ActivityCreate(BaseModel):
    """Ingestion payload with kg computed by the caller."""

    date: dt.date | None = None
    category: ActivityCategory
    detail: str | None = None
    amount: float = Field(allow_inf_nan=False)
    kg: float = Field(allow_inf_nan=False)


class ActivityLogRequest(BaseModel):
    """Activity payload whose kg is computed by the server.

    ``amount`` keeps numbers and strings as sent so unparseable input is
    reported by the service. Booleans are rejected by request parsing.
    """

    date: dt.date | None = None
    category: ActivityCategory
    detail: str | None = None
    amount: StrictInt | StrictFloat | str | None = None
    electricity_factor: float | None = Field(default=None, gt=0, allow_inf_nan=False)


class EstimateRequest(BaseModel):
    """Request for a kg CO2e estimate."""

    category: ActivityCategory
    detail: str | None = None
    amount: StrictInt | StrictFloat | str | None = None
    electricity_factor: float | None = Field(default=None, gt=0, allow_inf_nan=False)


class ActivityOut(BaseModel):
    """Persisted activity record."""

    id: int
    date: dt.date
    category: ActivityCategory
    detail: str
    amount: float
    kg: float

    @classmethod
    def from_record(cls, record: ActivityRecord) -> "ActivityOut":
        """Build the response model from a domain record."""
        return cls(
            id=record.id,
            date=record.date,
            category=record.category,
            detail=record.detail,
            amount=record.amount,
            kg=record.kg,
        )


class SummaryOut(BaseModel):
    """Positive-emission totals by category."""

    per_category: dict[ActivityCategory, float]
    grand_total: float
    credits_total: float
    record_count: int

"""Activities API endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, Response, status

from eco_tracker.api.models import (
    ActivityCreate,
    ActivityLogRequest,
    ActivityOut,
    EstimateRequest,
    SummaryOut,
)
from eco_tracker.domain.activities import ActivityRecordInput
from eco_tracker.domain.errors import ValidationError
from eco_tracker.services.activities import MAX_LIST_LIMIT, current_day

if TYPE_CHECKING:
    from eco_tracker.containers import AppContainer
    from eco_tracker.services.reporting import FootprintSummary

router = APIRouter(prefix="/api/activities", tags=["activities"])

ALLOWED_METHODS = "GET, POST"


@router.get("")
async def list_activities(request: Request) -> list[ActivityOut]:
    """Return recent activities, newest date first."""
    container: AppContainer = request.app.state.container
    service = container.activity_service
    records = service.list_activities(min(service.list_limit, MAX_LIST_LIMIT))
    return [ActivityOut.from_record(record) for record in records]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_activity(payload: ActivityCreate, request: Request) -> ActivityOut:
    """Store an activity whose kg was computed by the caller."""
    container: AppContainer = request.app.state.container
    created = container.activity_service.record_precomputed(
        ActivityRecordInput(
            date=payload.date or current_day(),
            category=payload.category,
            detail=payload.detail or "",
            amount=payload.amount,
            kg=payload.kg,
        )
    )
    return ActivityOut.from_record(created)


@router.api_route(
    "",
    methods=["HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"],
    include_in_schema=False,
)
async def method_not_allowed() -> Response:
    """Reject methods other than GET and POST."""
    return Response(
        content="Method Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ALLOWED_METHODS},
    )


@router.post("/estimate")
async def estimate(payload: EstimateRequest, request: Request) -> dict[str, float]:
    """Return the kg CO2e for an activity without storing it."""
    container: AppContainer = request.app.state.container
    kg = container.activity_service.estimate(
        payload.category,
        payload.detail,
        payload.amount,
        electricity_factor=payload.electricity_factor,
    )
    return {"kg": kg}


@router.post("/log", status_code=status.HTTP_201_CREATED)
async def log_activity(payload: ActivityLogRequest, request: Request) -> ActivityOut:
    """Compute kg for an activity and store it."""
    container: AppContainer = request.app.state.container
    created = container.activity_service.log_activity(
        payload.category,
        payload.detail,
        payload.amount,
        day=payload.date,
        electricity_factor=payload.electricity_factor,
    )
    return ActivityOut.from_record(created)


@router.get("/summary")
async def summary(
    request: Request,
    limit: int | None = Query(default=None, gt=0),
    start: date | None = None,
    end: date | None = None,
) -> SummaryOut:
    """Return positive-emission totals per category.

    With ``start`` and ``end`` the totals cover that date range, otherwise the
    most recent ``limit`` activities. A single bound is rejected.
    """
    container: AppContainer = request.app.state.container
    service = container.activity_service
    if (start is None) != (end is None):
        raise ValidationError("start and end must be given together")
    if start is not None and end is not None:
        result = service.get_period_summary(start, end)
    else:
        result = service.get_summary(limit)
    return _summary_out(result)


def _summary_out(result: FootprintSummary) -> SummaryOut:
    return SummaryOut(
        per_category=dict(result.per_category),
        grand_total=result.grand_total,
        credits_total=result.credits_total,
        record_count=result.record_count,
    )

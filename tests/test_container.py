"""Tests for container wiring."""

from eco_tracker.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from eco_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    settings.default_electricity_factor = 0.3
    container = build_container(settings)

    service = container.activity_service
    assert isinstance(service.repository, SupabaseActivityRepository)
    assert service.repository.table == "activities"
    assert service.electricity_factor == 0.3

"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from eco_tracker.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from eco_tracker.config import Settings
from eco_tracker.services.activities import ActivityService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    activity_service: ActivityService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    activity_repository = SupabaseActivityRepository(
        client=supabase_client, table=resolved_settings.activities_table
    )
    activity_service = ActivityService(
        repository=activity_repository,
        electricity_factor=resolved_settings.default_electricity_factor,
        list_limit=resolved_settings.list_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        activity_service=activity_service,
    )

"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_log.adapters.supabase_entry_repository import SupabaseEntryRepository
from calorie_log.config import Settings
from calorie_log.services.entries import EntryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseEntryRepository(
        client=supabase_client, table_name=resolved_settings.entries_table
    )
    return AppContainer(
        settings=resolved_settings,
        entry_service=EntryService(entry_repository),
    )

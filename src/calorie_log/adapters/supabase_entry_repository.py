"""Supabase repository for calorie log entries."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from calorie_log.domain.entries import Entry, NewEntry
from calorie_log.services.entries import EntryRepository

_COLUMNS = "id, name, calories, category, date, created_at"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for entries."""

    client: Client
    table_name: str = "entries"

    def list_entries(self, date: str) -> list[Entry]:
        """Return entries for a date, oldest first."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("date", date)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(self, entry: NewEntry) -> Entry:
        """Insert an entry row and return the stored entry."""
        response = (
            self.client.table(self.table_name)
            .insert(
                {
                    "name": entry.name,
                    "calories": entry.calories,
                    "category": entry.category,
                    "date": entry.date,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry row by id."""
        response = (
            self.client.table(self.table_name).delete().eq("id", entry_id).execute()
        )
        if not response.data:
            raise LookupError(f"Entry {entry_id} not found")


def _parse_entry(row: dict[str, object]) -> Entry:
    category = row.get("category")
    return Entry(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=int(row.get("calories", 0)),
        category=str(category) if category else None,
        date=str(row.get("date", "")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )

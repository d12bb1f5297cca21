"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from calorie_log.config import Settings
from calorie_log.containers import AppContainer
from calorie_log.domain.entries import Entry, NewEntry
from calorie_log.services.entries import EntryRepository, EntryService

BASE_TIME = datetime(2024, 5, 1, 8, 0, tzinfo=UTC)


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: list[Entry] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    def list_entries(self, date: str) -> list[Entry]:
        self.calls.append("list")
        matching = [entry for entry in self.entries if entry.date == date]
        return sorted(matching, key=lambda entry: entry.created_at)

    def create_entry(self, entry: NewEntry) -> Entry:
        self.calls.append("create")
        created = Entry(
            id=str(uuid4()),
            name=entry.name,
            calories=entry.calories,
            category=entry.category,
            date=entry.date,
            created_at=BASE_TIME + timedelta(minutes=len(self.entries)),
        )
        self.entries.append(created)
        return created

    def delete_entry(self, entry_id: str) -> None:
        self.calls.append("delete")
        for entry in self.entries:
            if entry.id == entry_id:
                self.entries.remove(entry)
                return
        raise LookupError(f"Entry {entry_id} not found")


@dataclass
class FailingEntryRepository(EntryRepository):
    """Repository whose every call fails like an unavailable store."""

    calls: list[str] = field(default_factory=list)

    def list_entries(self, date: str) -> list[Entry]:
        self.calls.append("list")
        raise ConnectionError("store unavailable")

    def create_entry(self, entry: NewEntry) -> Entry:
        self.calls.append("create")
        raise ConnectionError("store unavailable")

    def delete_entry(self, entry_id: str) -> None:
        self.calls.append("delete")
        raise ConnectionError("store unavailable")


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def container(
    settings: Settings, entry_repository: InMemoryEntryRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        entry_service=EntryService(entry_repository),
    )

"""Domain models for calorie log entries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewEntry:
    """Validated fields for an entry that has not been stored yet."""

    name: str
    calories: int
    category: str | None
    date: str


@dataclass(frozen=True)
class Entry:
    """Logged food or meal with its calories."""

    id: str
    name: str
    calories: int
    category: str | None
    date: str
    created_at: datetime


@dataclass(frozen=True)
class DailyEntries:
    """Entries logged on a single date with their calorie total."""

    date: str
    entries: list[Entry]
    total_calories: int

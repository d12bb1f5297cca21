"""Entry logging service."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from calorie_log.domain.entries import DailyEntries, Entry, NewEntry
from calorie_log.services.errors import EntryStorageError, EntryValidationError
from calorie_log.services.estimator import estimate_calories, resolve_calories

_DATE_FORMAT = "%Y-%m-%d"
_DATE_LENGTH = len("YYYY-MM-DD")

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for calorie log entries."""

    def list_entries(self, date: str) -> list[Entry]:
        """Return entries for a date ordered by creation time ascending."""

    def create_entry(self, entry: NewEntry) -> Entry:
        """Persist an entry and return it with its id and timestamp."""

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry by id, raising LookupError if it does not exist."""


@dataclass
class EntryService:
    """Service that validates input, estimates calories and persists entries."""

    repository: EntryRepository

    def list_entries(self, date: str | None) -> DailyEntries:
        """Return the entries for a date with their calorie total."""
        day = _require_date(date)
        try:
            entries = self.repository.list_entries(day)
        except Exception as exc:
            _logger.exception("Failed to fetch entries for %s", day)
            raise EntryStorageError("Failed to fetch entries") from exc
        return DailyEntries(
            date=day,
            entries=entries,
            total_calories=sum(entry.calories for entry in entries),
        )

    def create_entry(
        self,
        name: str | None,
        date: str | None,
        calories: object = None,
        category: str | None = None,
    ) -> Entry:
        """Validate and persist a new entry, estimating calories when needed."""
        cleaned_name = _require_name(name)
        day = _require_date(date)
        cleaned_category = _clean_category(category)
        new_entry = NewEntry(
            name=cleaned_name,
            calories=resolve_calories(calories, cleaned_name, cleaned_category),
            category=cleaned_category,
            date=day,
        )
        try:
            created = self.repository.create_entry(new_entry)
        except Exception as exc:
            _logger.exception("Failed to create entry for %s", day)
            raise EntryStorageError("Failed to create entry") from exc
        _logger.info(
            "Created entry %s on %s (%s kcal)", created.id, day, created.calories
        )
        return created

    def delete_entry(self, entry_id: str | None) -> None:
        """Delete an entry; a missing entry is reported as a storage error."""
        if entry_id is None or not entry_id.strip():
            raise EntryValidationError("Missing required query param 'id'")
        cleaned_id = entry_id.strip()
        try:
            self.repository.delete_entry(cleaned_id)
        except Exception as exc:
            _logger.exception("Failed to delete entry %s", cleaned_id)
            raise EntryStorageError("Failed to delete entry") from exc
        _logger.info("Deleted entry %s", cleaned_id)

    def estimate(self, name: str | None, category: str | None = None) -> int:
        """Return the calorie estimate for a food name without persisting."""
        return estimate_calories(_require_name(name), _clean_category(category))


def is_valid_date(value: str) -> bool:
    """Return True for a real calendar date written as YYYY-MM-DD."""
    if len(value) != _DATE_LENGTH:
        return False
    try:
        datetime.strptime(value, _DATE_FORMAT)  # noqa: DTZ007
    except ValueError:
        return False
    return True


def _require_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise EntryValidationError("Missing required field: name")
    return name.strip()


def _require_date(date: str | None) -> str:
    if date is None or not date.strip():
        raise EntryValidationError(
            "Missing required query param 'date' (YYYY-MM-DD)"
        )
    cleaned = date.strip()
    if not is_valid_date(cleaned):
        raise EntryValidationError(f"Invalid date '{cleaned}', expected YYYY-MM-DD")
    return cleaned


def _clean_category(category: str | None) -> str | None:
    if category is None or not category.strip():
        return None
    return category.strip()

"""Entry logging service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from carbon_tracker.domain.entries import DailyActivity, Entry, build_entry

_logger = logging.getLogger(__name__)


class EntryLogRepository(Protocol):
    """Persistence interface for the append-only entry log."""

    def ensure_initialized(self) -> None:
        """Create the storage with its header if it does not exist."""

    def exists(self) -> bool:
        """Return True when the storage has been created."""

    def append(self, entry: Entry) -> None:
        """Append one entry to the log."""

    def read_all(self) -> list[Entry]:
        """Return every stored entry in append order."""


@dataclass
class EntryService:
    """Service that computes footprints and persists entries."""

    repository: EntryLogRepository

    def add_entry(self, activity: DailyActivity) -> Entry:
        """Compute the footprint for a day and append it to the log."""
        entry = build_entry(activity)
        self.repository.ensure_initialized()
        self.repository.append(entry)
        _logger.info(
            "Entry saved: date=%s footprint_kg=%.2f", entry.date, entry.footprint_kg
        )
        return entry

    def list_entries(self) -> list[Entry]:
        """Return all stored entries in append order."""
        return self.repository.read_all()

    def is_initialized(self) -> bool:
        """Return True when the log storage exists."""
        return self.repository.exists()

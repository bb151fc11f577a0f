"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from carbon_tracker.config import Settings
from carbon_tracker.containers import AppContainer
from carbon_tracker.domain.entries import Entry
from carbon_tracker.domain.stats import ExportSummary
from carbon_tracker.services.entries import EntryLogRepository, EntryService
from carbon_tracker.services.reports import ReportService, ReportWriter
from carbon_tracker.services.stats import StatsService


@dataclass
class InMemoryEntryLogRepository(EntryLogRepository):
    """In-memory entry log for tests."""

    entries: list[Entry] = field(default_factory=list)
    initialized: bool = False

    def ensure_initialized(self) -> None:
        self.initialized = True

    def exists(self) -> bool:
        return self.initialized

    def append(self, entry: Entry) -> None:
        self.entries.append(entry)

    def read_all(self) -> list[Entry]:
        return list(self.entries)


@dataclass
class FakeReportWriter(ReportWriter):
    """Report writer that records what it was asked to write."""

    reports: list[tuple[str, ExportSummary, date]] = field(default_factory=list)

    def write(
        self, destination: str, summary: ExportSummary, generated_on: date
    ) -> None:
        self.reports.append((destination, summary, generated_on))


def make_entry(day: str, footprint_kg: float = 0.0, **values: Any) -> Entry:
    """Build a stored entry with the given date and footprint."""
    return Entry(date=day, footprint_kg=footprint_kg, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(log_path=tmp_path / "carbon_log.csv", timezone="UTC")


@pytest.fixture
def repository() -> InMemoryEntryLogRepository:
    return InMemoryEntryLogRepository()


@pytest.fixture
def report_writer() -> FakeReportWriter:
    return FakeReportWriter()


@pytest.fixture
def container(
    settings: Settings,
    repository: InMemoryEntryLogRepository,
    report_writer: FakeReportWriter,
) -> AppContainer:
    stats_service = StatsService(repository, timezone_name=settings.timezone)
    return AppContainer(
        settings=settings,
        repository=repository,
        entry_service=EntryService(repository),
        stats_service=stats_service,
        report_service=ReportService(
            stats_service=stats_service,
            writer=report_writer,
        ),
    )

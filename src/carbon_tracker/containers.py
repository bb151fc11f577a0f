"""Dependency container wiring for the application."""

from dataclasses import dataclass

from carbon_tracker.adapters.csv_entry_log_repository import CsvEntryLogRepository
from carbon_tracker.adapters.text_report_writer import TextFileReportWriter
from carbon_tracker.config import Settings
from carbon_tracker.services.entries import EntryLogRepository, EntryService
from carbon_tracker.services.reports import ReportService
from carbon_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    repository: EntryLogRepository
    entry_service: EntryService
    stats_service: StatsService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repository = CsvEntryLogRepository(resolved_settings.log_path)
    entry_service = EntryService(repository)
    stats_service = StatsService(
        repository=repository,
        timezone_name=resolved_settings.timezone,
    )
    report_service = ReportService(
        stats_service=stats_service,
        writer=TextFileReportWriter(),
    )
    return AppContainer(
        settings=resolved_settings,
        repository=repository,
        entry_service=entry_service,
        stats_service=stats_service,
        report_service=report_service,
    )

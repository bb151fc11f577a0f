"""Tests for container wiring."""

from carbon_tracker.adapters.csv_entry_log_repository import CsvEntryLogRepository
from carbon_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.repository, CsvEntryLogRepository)
    assert container.repository.path == settings.log_path
    assert container.stats_service.timezone_name == "UTC"
    assert container.report_service.stats_service is container.stats_service

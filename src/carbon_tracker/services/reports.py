"""Export report service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from carbon_tracker.domain.stats import ExportSummary
from carbon_tracker.services.stats import StatsService

_logger = logging.getLogger(__name__)


class ReportWriter(Protocol):
    """Write target for exported footprint reports."""

    def write(
        self, destination: str, summary: ExportSummary, generated_on: date
    ) -> None:
        """Write a human-readable report to the destination."""


@dataclass
class ReportService:
    """Service that exports the entry log through a report writer."""

    stats_service: StatsService
    writer: ReportWriter

    def export(
        self, destination: str, generated_on: date | None = None
    ) -> ExportSummary:
        """Export every entry's footprint and the total to ``destination``."""
        summary = self.stats_service.get_export()
        self.writer.write(
            destination, summary, generated_on or self.stats_service.today()
        )
        _logger.info(
            "Report exported: destination=%s entries=%s",
            destination,
            len(summary.lines),
        )
        return summary

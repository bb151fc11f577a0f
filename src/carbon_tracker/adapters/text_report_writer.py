"""Plain-text file writer for exported reports."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from carbon_tracker.domain.errors import LogStorageError
from carbon_tracker.domain.stats import ExportSummary
from carbon_tracker.services.reports import ReportWriter


@dataclass
class TextFileReportWriter(ReportWriter):
    """Writes reports as UTF-8 text files."""

    base_dir: Path | None = None

    def write(
        self, destination: str, summary: ExportSummary, generated_on: date
    ) -> None:
        """Write the report, replacing any existing file at the destination."""
        path = Path(destination)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        try:
            path.write_text(render_report(summary, generated_on), encoding="utf-8")
        except OSError as exc:
            raise LogStorageError(f"Failed to write report to {path}") from exc


def render_report(summary: ExportSummary, generated_on: date) -> str:
    """Render the export report text."""
    lines = [f"Carbon footprint report generated on {generated_on.isoformat()}"]
    lines.extend(f"{day} , {kg:.2f} kg CO2" for day, kg in summary.lines)
    lines.append(f"Total: {summary.total_kg:.2f} kg CO2")
    return "\n".join(lines) + "\n"

"""CSV file repository for the append-only entry log."""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

from carbon_tracker.domain.entries import ENTRY_FIELDS, Entry
from carbon_tracker.domain.errors import LogStorageError
from carbon_tracker.services.entries import EntryLogRepository

_logger = logging.getLogger(__name__)

FLOAT_FIELDS = frozenset(
    {
        "car_km",
        "bus_km",
        "train_km",
        "flight_km",
        "electricity_kwh",
        "plastic_kg",
        "footprint_kg",
    }
)
BOOL_FIELDS = frozenset({"recycled"})


@dataclass
class CsvEntryLogRepository(EntryLogRepository):
    """Flat CSV file implementation of the entry log.

    Reads are lenient: a malformed numeric token becomes zero and is counted
    in ``last_parse_warnings`` instead of failing the read.
    """

    path: Path
    last_parse_warnings: int = field(default=0, init=False)

    def exists(self) -> bool:
        """Return True when the log file exists."""
        return self.path.exists()

    def ensure_initialized(self) -> None:
        """Create the log file with its header if it is missing."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(_format_line(ENTRY_FIELDS))
        except OSError as exc:
            raise LogStorageError(f"Failed to create entry log at {self.path}") from exc
        _logger.info("Entry log created: path=%s", self.path)

    def append(self, entry: Entry) -> None:
        """Append one entry as a single line."""
        line = _format_line(_serialize_entry(entry))
        try:
            with self.path.open("a", encoding="utf-8", newline="") as handle:
                handle.write(line)
        except OSError as exc:
            raise LogStorageError(
                f"Failed to append to entry log {self.path}"
            ) from exc

    def read_all(self) -> list[Entry]:
        """Return every entry in append order, or [] when the log is unreadable."""
        self.last_parse_warnings = 0
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return []
        except OSError:
            _logger.warning("Entry log unreadable: path=%s", self.path, exc_info=True)
            return []

        entries = []
        lines = text.split("\n")
        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            entry, warnings = _parse_row(line.split(","), line_number)
            self.last_parse_warnings += warnings
            entries.append(entry)
        return entries


def _format_line(values: tuple[str, ...] | list[str]) -> str:
    return ",".join(values) + "\n"


def _serialize_entry(entry: Entry) -> list[str]:
    values = []
    for name in ENTRY_FIELDS:
        value = getattr(entry, name)
        if name == "date":
            values.append(value)
        elif name in BOOL_FIELDS:
            values.append("1" if value else "0")
        elif name in FLOAT_FIELDS:
            values.append(f"{value:.2f}")
        else:
            values.append(str(int(value)))
    return values


def _parse_row(row: list[str], line_number: int) -> tuple[Entry, int]:
    values: dict[str, object] = {}
    warnings = 0
    for index, name in enumerate(ENTRY_FIELDS):
        token = row[index].strip() if index < len(row) else None
        if name == "date":
            values[name] = token or ""
            continue
        if token is None:
            values[name] = 0.0 if name in FLOAT_FIELDS else 0
            continue
        parsed = _parse_float(token) if name in FLOAT_FIELDS else _parse_int(token)
        if parsed is None:
            warnings += 1
            _logger.warning(
                "Malformed value in entry log: line=%s field=%s value=%r",
                line_number,
                name,
                token,
            )
            parsed = 0.0 if name in FLOAT_FIELDS else 0
        values[name] = parsed

    values["recycled"] = bool(values["recycled"])
    return Entry(**values), warnings  # type: ignore[arg-type]


def _parse_float(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return int(float(token))
    except (ValueError, OverflowError):
        return None

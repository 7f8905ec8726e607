# File: src/simple_calendar/persistence/csv_store.py
"""
Flat-file persistence for the calendar.

Each line holds one stored Event: ``title,start,end`` with both timestamps in
ISO-8601. Loading replays every valid line through AppointmentManager.add_event;
broken lines are skipped so a partly corrupted file still loads.
"""

import csv
import datetime
from pathlib import Path
from typing import Optional, Tuple

from simple_calendar.core.appointment_manager import AppointmentManager
from simple_calendar.core.config_manager import Config
from simple_calendar.core.exceptions import CalendarError
from simple_calendar.models import parse_iso_datetime
from simple_calendar.utils.logger import LoggerMixin

FIELD_SEPARATOR = ","
SEPARATOR_SUBSTITUTE = "-"


def sanitize_title(title: str) -> str:
    """Replace the field separator so a title always stays one field."""
    return title.replace(FIELD_SEPARATOR, SEPARATOR_SUBSTITUTE)


class CsvEventStore(LoggerMixin):
    """Reads and writes the calendar as one event per line."""

    def __init__(self, filepath: Optional[Path] = None):
        """
        Args:
            filepath: File to read and write (default: Config.DATA_FILE)
        """
        self.filepath = Path(filepath) if filepath else Config.DATA_FILE

    def load(self, manager: AppointmentManager) -> int:
        """
        Replay the stored events into a manager.

        Args:
            manager: Manager receiving the events

        Returns:
            Number of lines added successfully
        """
        if not self.filepath.exists():
            self.logger.info(f"No saved calendar at {self.filepath}, starting empty")
            return 0

        loaded = 0
        skipped = 0
        with open(self.filepath, 'r', encoding='utf-8', newline='') as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if not row:
                    continue

                parsed = self._parse_row(row)
                if parsed is None:
                    self.logger.warning(f"Skipping malformed line {line_no} in {self.filepath}: {row}")
                    skipped += 1
                    continue

                title, start, end = parsed
                try:
                    manager.add_event(title, start, end)
                except CalendarError as e:
                    self.logger.warning(f"Skipping line {line_no} in {self.filepath}: {e}")
                    skipped += 1
                    continue
                loaded += 1

        self.logger.info(f"Loaded {loaded} events from {self.filepath} ({skipped} skipped)")
        return loaded

    def save(self, manager: AppointmentManager) -> int:
        """
        Write every stored event to the file, replacing its contents.

        Args:
            manager: Manager whose events are written

        Returns:
            Number of lines written
        """
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        written = 0
        with open(self.filepath, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f, lineterminator='\n')
            for day, event in manager.iter_events():
                writer.writerow([
                    sanitize_title(event.title),
                    datetime.datetime.combine(day, event.start).isoformat(),
                    datetime.datetime.combine(day, event.end).isoformat(),
                ])
                written += 1

        self.logger.info(f"Saved {written} events to {self.filepath}")
        return written

    @staticmethod
    def _parse_row(row) -> Optional[Tuple[str, datetime.datetime, datetime.datetime]]:
        if len(row) != 3:
            return None

        title = row[0]
        start = parse_iso_datetime(row[1])
        end = parse_iso_datetime(row[2])
        if start is None or end is None:
            return None
        return title, start, end

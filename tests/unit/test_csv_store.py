# File: tests/unit/test_csv_store.py
"""
Unit tests for the flat-file calendar store.
"""

import logging
from datetime import date, datetime, time

from simple_calendar.core.appointment_manager import AppointmentManager
from simple_calendar.models import Event
from simple_calendar.persistence.csv_store import CsvEventStore, sanitize_title


class TestSanitizeTitle:
    """Tests for sanitize_title."""

    def test_commas_become_dashes(self):
        assert sanitize_title("Lunch, with Sam") == "Lunch- with Sam"

    def test_whitespace_is_kept(self):
        assert sanitize_title("  Gym  ") == "  Gym  "

    def test_empty_title_is_kept(self):
        assert sanitize_title("") == ""


class TestSave:
    """Tests for CsvEventStore.save."""

    def test_save_writes_one_line_per_event(self, manager, store, data_file):
        """Each stored day segment becomes a line."""
        manager.add_event("Meeting", datetime(2025, 12, 31, 10, 0), datetime(2025, 12, 31, 11, 0))
        manager.add_event("Overnight", datetime(2025, 12, 31, 22, 0), datetime(2026, 1, 1, 2, 0))

        written = store.save(manager)

        assert written == 3
        assert data_file.read_text(encoding="utf-8").splitlines() == [
            "Meeting,2025-12-31T10:00:00,2025-12-31T11:00:00",
            "Overnight,2025-12-31T22:00:00,2025-12-31T23:59:59.999999",
            "Overnight,2026-01-01T00:00:00,2026-01-01T02:00:00",
        ]

    def test_save_empty_calendar(self, manager, store, data_file):
        """An empty calendar writes an empty file."""
        assert store.save(manager) == 0
        assert data_file.read_text(encoding="utf-8") == ""

    def test_save_sanitizes_titles(self, manager, store, data_file):
        """Titles never break the field layout."""
        manager.add_event("Lunch, Sam", datetime(2025, 12, 31, 12, 0), datetime(2025, 12, 31, 13, 0))
        store.save(manager)

        assert data_file.read_text(encoding="utf-8").strip() == (
            "Lunch- Sam,2025-12-31T12:00:00,2025-12-31T13:00:00"
        )

    def test_save_creates_parent_directory(self, manager, tmp_path):
        """Missing directories are created."""
        store = CsvEventStore(tmp_path / "nested" / "events.csv")
        manager.add_event("Meeting", datetime(2025, 12, 31, 10, 0), datetime(2025, 12, 31, 11, 0))

        assert store.save(manager) == 1
        assert (tmp_path / "nested" / "events.csv").exists()


class TestLoad:
    """Tests for CsvEventStore.load."""

    def test_missing_file_loads_nothing(self, manager, store):
        """No file means an empty calendar."""
        assert store.load(manager) == 0
        assert len(manager) == 0

    def test_round_trip(self, clock, manager, store):
        """Saving then loading reproduces the per-day events."""
        manager.add_event("Meeting", datetime(2025, 12, 31, 10, 0), datetime(2025, 12, 31, 11, 0))
        manager.add_event("Evening", datetime(2025, 12, 31, 18, 0), datetime(2025, 12, 31, 19, 0))
        manager.add_event("Overnight", datetime(2025, 12, 31, 22, 0), datetime(2026, 1, 1, 2, 0))
        store.save(manager)

        reloaded = AppointmentManager(clock)
        assert store.load(reloaded) == 4

        assert list(reloaded.iter_events()) == list(manager.iter_events())
        assert reloaded.list_days_events(date(2025, 12, 31))[-1] == Event(
            "Overnight", time(22, 0), time.max
        )

    def test_round_trip_keeps_padded_and_empty_titles(self, clock, manager, store):
        """Titles come back exactly as stored, whitespace and all."""
        manager.add_event(" Lunch ", datetime(2025, 12, 31, 12, 0), datetime(2025, 12, 31, 13, 0))
        manager.add_event("", datetime(2025, 12, 31, 15, 0), datetime(2025, 12, 31, 16, 0))
        store.save(manager)

        reloaded = AppointmentManager(clock)
        assert store.load(reloaded) == 2

        assert list(reloaded.iter_events()) == list(manager.iter_events())
        assert [e.title for e in reloaded.list_days_events(date(2025, 12, 31))] == [" Lunch ", ""]

    def test_malformed_lines_are_skipped(self, manager, store, data_file, caplog):
        """Bad field counts and bad timestamps are skipped; an empty title is not malformed."""
        data_file.write_text(
            "Meeting,2025-12-31T10:00:00,2025-12-31T11:00:00\n"
            "Too,few\n"
            "Too,many,fields,2025-12-31T12:00:00,2025-12-31T13:00:00\n"
            "Bad date,yesterday,2025-12-31T13:00:00\n"
            ",2025-12-31T14:00:00,2025-12-31T15:00:00\n"
            "\n"
            "Menu format,2025-12-31 16:00,2025-12-31 17:00\n",
            encoding="utf-8"
        )

        assert store.load(manager) == 3

        titles = [e.title for e in manager.list_days_events(date(2025, 12, 31))]
        assert titles == ["Meeting", "", "Menu format"]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 3

    def test_rejected_events_are_skipped(self, manager, store, data_file):
        """Lines that overlap or run backwards are skipped, the rest load."""
        data_file.write_text(
            "Meeting,2025-12-31T10:00:00,2025-12-31T11:00:00\n"
            "Overlap,2025-12-31T10:30:00,2025-12-31T11:30:00\n"
            "Backwards,2025-12-31T15:00:00,2025-12-31T14:00:00\n"
            "Evening,2025-12-31T18:00:00,2025-12-31T19:00:00\n",
            encoding="utf-8"
        )

        assert store.load(manager) == 2
        titles = [e.title for e in manager.list_days_events(date(2025, 12, 31))]
        assert titles == ["Meeting", "Evening"]

    def test_default_path_comes_from_config(self, monkeypatch, tmp_path):
        """Without a path the store uses Config.DATA_FILE."""
        from simple_calendar.core.config_manager import Config
        monkeypatch.setattr(Config, "DATA_FILE", tmp_path / "default.csv")

        assert CsvEventStore().filepath == tmp_path / "default.csv"

    def test_store_logs_through_its_own_logger(self, store, caplog):
        """Messages are emitted under the simple_calendar.CsvEventStore logger."""
        assert store.logger.name == "simple_calendar.CsvEventStore"

        with caplog.at_level(logging.INFO, logger="simple_calendar.CsvEventStore"):
            store.load(AppointmentManager())

        assert any(r.name == "simple_calendar.CsvEventStore" for r in caplog.records)

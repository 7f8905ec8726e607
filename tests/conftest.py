# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable clocks, managers and stores for all tests.
"""

import pytest
from datetime import datetime
from pathlib import Path
import sys

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from simple_calendar.core.appointment_manager import AppointmentManager
from simple_calendar.core.clock import FixedClock
from simple_calendar.persistence.csv_store import CsvEventStore


# ==================== Clock Fixtures ====================

@pytest.fixture
def fixed_now():
    """The pinned 'current moment' used across tests (a day before New Year's Eve)."""
    return datetime(2025, 12, 30, 9, 0)


@pytest.fixture
def clock(fixed_now):
    """Clock pinned to fixed_now."""
    return FixedClock(fixed_now)


# ==================== Manager Fixtures ====================

@pytest.fixture
def manager(clock):
    """Empty manager on the pinned clock."""
    return AppointmentManager(clock)


@pytest.fixture
def meeting_manager(manager):
    """Manager holding 'Meeting' on 2025-12-31 10:00-11:00."""
    manager.add_event(
        "Meeting",
        datetime(2025, 12, 31, 10, 0),
        datetime(2025, 12, 31, 11, 0)
    )
    return manager


@pytest.fixture
def busy_day_manager(manager):
    """Manager with three events spread over 2025-12-31."""
    manager.add_event("Standup", datetime(2025, 12, 31, 9, 0), datetime(2025, 12, 31, 9, 15))
    manager.add_event("Review", datetime(2025, 12, 31, 11, 0), datetime(2025, 12, 31, 12, 0))
    manager.add_event("Dinner", datetime(2025, 12, 31, 18, 0), datetime(2025, 12, 31, 20, 0))
    return manager


# ==================== Persistence Fixtures ====================

@pytest.fixture
def data_file(tmp_path):
    """Path for a calendar file inside the test's temp dir."""
    return tmp_path / "events.csv"


@pytest.fixture
def store(data_file):
    """Store writing to the temp calendar file."""
    return CsvEventStore(data_file)

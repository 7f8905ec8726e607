# File: src/simple_calendar/core/clock.py
"""
Sources of the "current moment" used by the calendar engine.

The engine never calls datetime.now() itself; it asks the clock it was
given, so tests can pin the moment.
"""

import datetime
from abc import ABC, abstractmethod

import pytz


class Clock(ABC):
    """Provides today's date and the current time-of-day."""

    @abstractmethod
    def now(self) -> datetime.datetime:
        """Current local moment as a naive datetime."""

    def today(self) -> datetime.date:
        return self.now().date()


class SystemClock(Clock):
    """Wall clock read in a fixed timezone."""

    def __init__(self, timezone: str = "UTC"):
        """
        Args:
            timezone: Timezone name (e.g., 'Europe/Amsterdam')

        Raises:
            pytz.UnknownTimeZoneError: If the name is not a known timezone
        """
        self.timezone = pytz.timezone(timezone)

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(self.timezone).replace(tzinfo=None)

    def __repr__(self) -> str:
        return f"SystemClock({self.timezone.zone!r})"


class FixedClock(Clock):
    """Clock pinned to a given moment; handy for tests and replays."""

    def __init__(self, moment: datetime.datetime):
        self.moment = moment.replace(tzinfo=None)

    def now(self) -> datetime.datetime:
        return self.moment

    def advance(self, delta: datetime.timedelta) -> None:
        """Move the pinned moment forward (or backward for negative deltas)."""
        self.moment = self.moment + delta

    def __repr__(self) -> str:
        return f"FixedClock({self.moment.isoformat()!r})"

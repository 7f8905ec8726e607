# File: src/simple_calendar/models/event.py

from dataclasses import dataclass
from datetime import time
from typing import Tuple

from simple_calendar.core.exceptions import InvalidIntervalError


@dataclass(frozen=True)
class Event:
    """A titled, half-open time interval inside a single calendar day."""
    title: str
    start: time
    end: time

    def __post_init__(self):
        """Validate event data."""
        if not self.start < self.end:
            raise InvalidIntervalError(
                f"Event start must be before end: {self.title} "
                f"({self.start.isoformat()} - {self.end.isoformat()})"
            )

    @property
    def sort_key(self) -> Tuple[time, time]:
        """Ordering used for storage: start first, then end."""
        return (self.start, self.end)

    def __lt__(self, other: 'Event') -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: 'Event') -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: 'Event') -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: 'Event') -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def overlaps(self, other: 'Event') -> bool:
        """Check if this event overlaps with another. Touching ends do not count."""
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{self.title} {self.start.strftime('%H:%M')}-{self.end.strftime('%H:%M')}"

# File: src/simple_calendar/models/slot.py

from dataclasses import dataclass
from datetime import time

from simple_calendar.core.exceptions import InvalidIntervalError


@dataclass(frozen=True)
class TimeSlot:
    """A free window of time on a single day."""
    start: time
    end: time

    def __post_init__(self):
        if not self.start < self.end:
            raise InvalidIntervalError(
                f"Slot start must be before end: {self.start.isoformat()} - {self.end.isoformat()}"
            )

    def __iter__(self):
        # Allows `start, end = slot`
        yield self.start
        yield self.end

    def __str__(self) -> str:
        return f"{self.start.strftime('%H:%M')} to {self.end.strftime('%H:%M')}"

# File: src/simple_calendar/core/exceptions.py
"""
Error taxonomy for the calendar engine.

All errors subclass ValueError so callers that only guard against bad input
keep working.
"""

import datetime
from typing import Optional


class CalendarError(ValueError):
    """Base class for every error raised by the calendar engine."""


class InvalidIntervalError(CalendarError):
    """Raised when an interval does not start strictly before it ends."""


class OverlappingEventError(CalendarError):
    """Raised when a requested event collides with an existing one."""

    def __init__(self, date: datetime.date, conflict: Optional[object] = None):
        self.date = date
        self.conflict = conflict
        message = f"Event overlaps an existing event on {date.isoformat()}"
        if conflict is not None:
            message += f": {conflict}"
        super().__init__(message)

from .event import Event
from .slot import TimeSlot
from .common import parse_iso_datetime

__all__ = [
    "Event",
    "TimeSlot",
    "parse_iso_datetime",
]

# File: src/simple_calendar/core/appointment_manager.py
"""
Appointment management engine.

Structure:
    Key   = calendar date
    Value = that day's Events, kept sorted by (start, end)
    Events of one day never overlap.
"""

import datetime
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from sortedcontainers import SortedKeyList

from simple_calendar.core.clock import Clock, SystemClock
from simple_calendar.core.config_manager import Config
from simple_calendar.core.exceptions import InvalidIntervalError, OverlappingEventError
from simple_calendar.models import Event, TimeSlot
from simple_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)

# Gap kept between the end of an existing event and a suggested slot
SLOT_BUFFER = datetime.timedelta(minutes=1)


class Segment(NamedTuple):
    """One day's slice of an event request."""
    date: datetime.date
    start: datetime.time
    end: datetime.time


def _event_key(event: Event) -> Tuple[datetime.time, datetime.time]:
    return event.sort_key


class AppointmentManager:
    """
    Owns the calendar and enforces that no two events of a day overlap.

    Multi-day requests are split at midnight and stored as one Event per
    day. A request is either stored on every day it touches or not at all.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Args:
            clock: Source of the current moment (default: system clock in Config.TIMEZONE)
        """
        self.clock = clock or SystemClock(Config.TIMEZONE)
        self._events_each_day: Dict[datetime.date, SortedKeyList] = {}

    # --------------------------------------------------------------------------
    # Mutation
    # --------------------------------------------------------------------------

    def add_event(
        self,
        title: str,
        start: datetime.datetime,
        end: datetime.datetime
    ) -> List[Event]:
        """
        Add an event, splitting it across days when needed.

        Args:
            title: Event title
            start: Start date-time
            end: End date-time, strictly after start

        Returns:
            The stored Events, one per day touched

        Raises:
            InvalidIntervalError: If end is not after start
            OverlappingEventError: If any day's slice collides with an existing event
        """
        if not start < end:
            raise InvalidIntervalError(
                f"Start must be before end: {start.isoformat()} - {end.isoformat()}"
            )

        segments = self._build_segments(start, end)
        pending = self._validate_segments(title, segments)

        # Commit only once every segment is known to fit
        for day, event in pending:
            self._day(day, create=True).add(event)

        logger.info(
            f"Added '{title}' from {start.isoformat(sep=' ')} to {end.isoformat(sep=' ')} "
            f"({len(pending)} day segment(s))"
        )
        return [event for _, event in pending]

    def _build_segments(
        self,
        start: datetime.datetime,
        end: datetime.datetime
    ) -> List[Segment]:
        """Split a request into one segment per calendar day it touches."""
        segments: List[Segment] = []
        first_date = start.date()
        last_date = end.date()

        current_date = first_date
        while current_date <= last_date:
            seg_start = start.time() if current_date == first_date else datetime.time.min
            seg_end = end.time() if current_date == last_date else datetime.time.max

            # A request ending exactly at midnight leaves an empty slice
            if seg_start < seg_end:
                segments.append(Segment(current_date, seg_start, seg_end))
            else:
                logger.debug(f"Dropping empty segment on {current_date.isoformat()}")

            current_date += datetime.timedelta(days=1)

        return segments

    def _validate_segments(
        self,
        title: str,
        segments: List[Segment]
    ) -> List[Tuple[datetime.date, Event]]:
        """
        Check every segment against its day's neighbours.

        Returns:
            (date, Event) pairs ready to be committed

        Raises:
            OverlappingEventError: On the first segment that collides
        """
        pending = []
        for segment in segments:
            probe = Event(title, segment.start, segment.end)
            conflict = self._find_conflict(segment.date, probe)
            if conflict is not None:
                logger.warning(
                    f"Rejected '{title}': overlaps '{conflict.title}' on {segment.date.isoformat()}"
                )
                raise OverlappingEventError(segment.date, conflict)
            pending.append((segment.date, probe))
        return pending

    def _find_conflict(self, day: datetime.date, probe: Event) -> Optional[Event]:
        """
        Return the neighbour the probe would overlap, if any.

        The day's events are sorted and disjoint, so only the events directly
        before and after the probe's position can overlap it.
        """
        events = self._day(day)
        if not events:
            return None

        index = events.bisect_key_left(probe.sort_key)
        if index > 0 and events[index - 1].overlaps(probe):
            return events[index - 1]
        if index < len(events) and events[index].overlaps(probe):
            return events[index]
        return None

    def _day(self, day: datetime.date, create: bool = False) -> SortedKeyList:
        if create:
            return self._events_each_day.setdefault(day, SortedKeyList(key=_event_key))
        return self._events_each_day.get(day, ())

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------

    def list_days_events(self, day: datetime.date) -> List[Event]:
        """All events of a day in order; empty when the day has none."""
        return list(self._day(day))

    def list_todays_remaining_events(self) -> List[Event]:
        """Today's events that have not ended yet."""
        now = self.clock.now()
        current_time = now.time()
        return [event for event in self._day(now.date()) if event.end > current_time]

    def find_next_available_slot(
        self,
        day: datetime.date,
        duration: datetime.timedelta
    ) -> Optional[TimeSlot]:
        """
        Find the earliest free window of the given length on a day.

        For today the search starts at the current time, otherwise at
        midnight. A suggested window never starts within SLOT_BUFFER of an
        existing event's end and never runs into the next day. Only gaps in
        front of an event are offered: once every event has been passed
        the day has no slot.

        Args:
            day: Date to search
            duration: Required length, must be positive

        Returns:
            The slot, or None when the day has no room

        Raises:
            InvalidIntervalError: If duration is not positive
        """
        if duration <= datetime.timedelta(0):
            raise InvalidIntervalError(f"Slot duration must be positive, got {duration}")

        now = self.clock.now()
        if day == now.date():
            events_to_check = self.list_todays_remaining_events()
            floor = now.time()
        else:
            events_to_check = self.list_days_events(day)
            floor = datetime.time.min

        day_end = datetime.datetime.combine(day, datetime.time.max)
        candidate_start = datetime.datetime.combine(day, floor)

        for event in events_to_check:
            candidate_end = candidate_start + duration
            if candidate_end > day_end:
                return None
            if candidate_end < datetime.datetime.combine(day, event.start):
                return TimeSlot(candidate_start.time(), candidate_end.time())
            candidate_start = datetime.datetime.combine(day, event.end) + SLOT_BUFFER

        if events_to_check:
            logger.debug(f"No {duration} slot left on {day.isoformat()}")
            return None

        candidate_end = candidate_start + duration
        if candidate_end > day_end:
            return None
        return TimeSlot(candidate_start.time(), candidate_end.time())

    # --------------------------------------------------------------------------
    # Iteration helpers
    # --------------------------------------------------------------------------

    def dates(self) -> List[datetime.date]:
        """Dates holding at least one event, ascending."""
        return sorted(day for day, events in self._events_each_day.items() if events)

    def iter_events(self) -> Iterator[Tuple[datetime.date, Event]]:
        """Yield (date, event) for every stored event in calendar order."""
        for day in self.dates():
            for event in self._events_each_day[day]:
                yield day, event

    def __len__(self) -> int:
        return sum(len(events) for events in self._events_each_day.values())

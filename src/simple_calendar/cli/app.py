# File: src/simple_calendar/cli/app.py
"""
Interactive text menu for the calendar.

Options:
    1) Add an event
    2) List ALL events for today
    3) List all REMAINING events for today
    4) List ALL events for ANY day
    5) Find the next available slot of a given size on any day
    6) Save and Exit
"""

import datetime
import time
from pathlib import Path
from typing import Callable, Iterable, Optional

from simple_calendar.core.appointment_manager import AppointmentManager
from simple_calendar.core.clock import Clock, SystemClock
from simple_calendar.core.config_manager import Config
from simple_calendar.core.exceptions import CalendarError
from simple_calendar.models import Event
from simple_calendar.persistence.csv_store import CsvEventStore, sanitize_title
from simple_calendar.utils.logger import setup_logger

logger = setup_logger(__name__)

MENU = """
Select an option:
1) Add an event
2) List ALL events for today
3) List all REMAINING events for today
4) List ALL events for ANY day
5) Find the next available slot of a given size on any day
6) Save and Exit
=============================================================="""


class CalendarApp:
    """Menu loop wired to an AppointmentManager and a CsvEventStore."""

    def __init__(
        self,
        manager: AppointmentManager,
        store: CsvEventStore,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        self.manager = manager
        self.store = store
        self.input = input_func
        self.output = output

        self.actions = {
            "1": self.add_event,
            "2": self.list_today,
            "3": self.list_remaining,
            "4": self.list_any_day,
            "5": self.find_next_slot,
        }

    # --------------------------------------------------------------------------
    # Main loop
    # --------------------------------------------------------------------------

    def run(self) -> None:
        """Run the menu until the user saves and exits (or input ends)."""
        self.output("Welcome to the Simple Calendar App!")

        while True:
            self.output(MENU)
            try:
                choice = self.input("> ").strip()
                if choice == "6":
                    break
                action = self.actions.get(choice)
                if action is None:
                    self.output("Invalid option. Try again.")
                    continue
                action()
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, saving and exiting")
                break

        self.store.save(self.manager)
        self.output("Events saved. Goodbye!")

    # --------------------------------------------------------------------------
    # Commands
    # --------------------------------------------------------------------------

    def add_event(self) -> bool:
        """Prompt for title, start and end, then add the event."""
        self.output('Please note "," will be replaced with "-"')
        title = self.input("Enter event title (blank to cancel): ").strip()
        if not title:
            self.output("Cancelling...")
            return False
        title = sanitize_title(title)

        start = self._prompt_datetime("Enter start time (blank to cancel): ")
        if start is None:
            return False

        while True:
            end = self._prompt_datetime("Enter end time (blank to cancel): ")
            if end is None:
                return False
            if end <= start:
                self.output("End must be after start.")
                continue
            break

        try:
            self.manager.add_event(title, start, end)
        except CalendarError as e:
            self.output(f"Failed to add event: {e}")
            return False

        self.output("Event added successfully.")
        return True

    def list_today(self) -> None:
        events = self.manager.list_days_events(self.manager.clock.today())
        if not events:
            self.output("No events today.")
            return
        self.output("Here are today's events:")
        self._print_events(events)

    def list_remaining(self) -> None:
        events = self.manager.list_todays_remaining_events()
        if not events:
            self.output("There are no remaining events for today.")
            return
        self.output("Here are today's remaining events:")
        self._print_events(events)

    def list_any_day(self) -> None:
        day = self._prompt_date()
        if day is None:
            return
        events = self.manager.list_days_events(day)
        if not events:
            self.output(f"No events on {day.isoformat()}")
            return
        self.output(f"Events on {day.isoformat()}:")
        self._print_events(events)

    def find_next_slot(self) -> None:
        day = self._prompt_date()
        if day is None:
            return

        while True:
            raw = self.input("Enter the duration in minutes (as a number): ").strip()
            if not raw:
                self.output("Cancelling...")
                return
            try:
                minutes = int(raw)
            except ValueError:
                self.output("Invalid number. Try again.")
                continue
            if minutes <= 0:
                self.output("Duration must be positive.")
                continue
            break

        slot = self.manager.find_next_available_slot(day, datetime.timedelta(minutes=minutes))
        if slot is None:
            self.output(f"There was no available slot of that duration on {day.isoformat()}")
        else:
            self.output(f"The next available slot on {day.isoformat()}: {slot}")

    # --------------------------------------------------------------------------
    # Prompt helpers
    # --------------------------------------------------------------------------

    def _prompt_datetime(self, prompt: str) -> Optional[datetime.datetime]:
        while True:
            self.output("Please note the format is: yyyy-MM-dd HH:mm")
            raw = self.input(prompt).strip()
            if not raw:
                self.output("Cancelling...")
                return None
            try:
                return datetime.datetime.strptime(raw, Config.DATETIME_FORMAT)
            except ValueError:
                self.output("Invalid format. Try again.")

    def _prompt_date(self) -> Optional[datetime.date]:
        while True:
            self.output("Please note the format is: yyyy-MM-dd")
            raw = self.input("Enter the day (blank to cancel): ").strip()
            if not raw:
                self.output("Cancelling...")
                return None
            try:
                return datetime.datetime.strptime(raw, Config.DATE_FORMAT).date()
            except ValueError:
                self.output("Invalid date format. Try again.")

    def _print_events(self, events: Iterable[Event]) -> None:
        for event in events:
            self.output(f" - {event}")


class CalendarAppFactory:
    """Factory for creating CalendarApp instances with dependency injection."""

    @staticmethod
    def create(
        data_file: Optional[Path] = None,
        clock: Optional[Clock] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ) -> CalendarApp:
        """
        Create a CalendarApp with its saved events already loaded.

        Args:
            data_file: Calendar file (default: Config.DATA_FILE)
            clock: Source of the current moment (default: system clock in Config.TIMEZONE)
            input_func: Line reader for the menu
            output: Line writer for the menu

        Returns:
            CalendarApp ready to run
        """
        manager = AppointmentManager(clock or SystemClock(Config.TIMEZONE))
        store = CsvEventStore(data_file)
        store.load(manager)
        return CalendarApp(manager, store, input_func=input_func, output=output)


def main() -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    start_time = time.time()

    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1

    try:
        app = CalendarAppFactory.create()
        app.run()
        return 0

    except OSError as e:
        logger.error(f"Could not access calendar file: {e}", exc_info=True)
        return 1

    except Exception as e:
        logger.error(f"Unexpected fatal error: {e}", exc_info=True)
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.debug(f"Session lasted {elapsed:.2f} seconds")

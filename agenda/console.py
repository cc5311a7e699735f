"""Text front end for an EventScheduler.

Offers the three actions of an event entry form (add, view next, view all)
as methods returning the text to show to the user.
"""

from __future__ import annotations

from agenda.events import TIMESTAMP_PATTERN, Event
from agenda.exceptions import ParseError, ValidationError
from agenda.scheduler import EventScheduler

__all__ = ["EventConsole", "format_event"]

NO_EVENTS = "No events scheduled."
ADDED_HEADER = "Event Added Successfully:\n"
NEXT_HEADER = "NEXT UPCOMING EVENT (Priority Queue Top):\n\n"
ALL_HEADER = "ALL SCHEDULED EVENTS (Sorted by Date/Time):\n\n"
MISSING_FIELDS_MESSAGE = "Error: Title and a valid Date/Time are required."
FORMAT_ERROR_MESSAGE = (
    f"Format Error: Invalid Date/Time format. Use {TIMESTAMP_PATTERN}"
)


def format_event(event: Event) -> str:
    """Render an event as ``[YYYY-MM-DD HH:MM] title - description``."""
    return str(event)


class EventConsole:
    """Console collaborator of an EventScheduler.

    Attributes:
        scheduler (EventScheduler): the scheduler holding the events
    """

    def __init__(self, scheduler: EventScheduler | None = None) -> None:
        """Initialize the console.

        Args:
            scheduler: the scheduler to use, a new one is created if omitted
        """
        self.scheduler = scheduler if scheduler is not None else EventScheduler()

    def add_event(
        self, title: str, timestamp_text: str, description: str | None = ""
    ) -> str:
        """Submit the form fields and return the confirmation or error text."""
        try:
            event = self.scheduler.submit(title, timestamp_text, description)
        except ValidationError:
            return MISSING_FIELDS_MESSAGE
        except ParseError:
            return FORMAT_ERROR_MESSAGE
        return ADDED_HEADER + format_event(event)

    def view_next(self) -> str:
        """Return the text showing the next upcoming event."""
        event = self.scheduler.peek_next()
        if event is None:
            return NO_EVENTS
        return NEXT_HEADER + format_event(event)

    def view_all(self) -> str:
        """Return the text listing every event in chronological order."""
        events = self.scheduler.list_all_sorted()
        if not events:
            return NO_EVENTS
        return ALL_HEADER + "".join(f"{format_event(e)}\n" for e in events)

"""Tests for the text console."""

from agenda import EventScheduler
from agenda.console import EventConsole, format_event


def test_console_add_event():
    """Tests the add action and its error messages."""
    console = EventConsole()
    assert isinstance(console.scheduler, EventScheduler)

    text = console.add_event("Standup", "2024-06-01 09:30", "daily sync")
    assert text == "Event Added Successfully:\n[2024-06-01 09:30] Standup - daily sync"

    text = console.add_event("", "2024-06-01 09:30", "")
    assert text == "Error: Title and a valid Date/Time are required."

    text = console.add_event("Launch", "YYYY-MM-DD HH:MM", "")
    assert text == "Error: Title and a valid Date/Time are required."

    text = console.add_event("Launch", "2024-13-40 25:99", "")
    assert text == "Format Error: Invalid Date/Time format. Use YYYY-MM-DD HH:MM"

    text = console.add_event("Launch", "   ", "")
    assert text == "Format Error: Invalid Date/Time format. Use YYYY-MM-DD HH:MM"

    assert console.scheduler.size() == 1


def test_console_views():
    """Tests the next and all views."""
    scheduler = EventScheduler()
    console = EventConsole(scheduler)
    assert console.scheduler is scheduler

    assert console.view_next() == "No events scheduled."
    assert console.view_all() == "No events scheduled."

    console.add_event("Standup", "2024-06-01 09:30", "daily sync")
    console.add_event("Launch", "2024-05-20 14:00", "product launch")

    assert console.view_next() == (
        "NEXT UPCOMING EVENT (Priority Queue Top):\n\n"
        "[2024-05-20 14:00] Launch - product launch"
    )
    assert console.view_all() == (
        "ALL SCHEDULED EVENTS (Sorted by Date/Time):\n\n"
        "[2024-05-20 14:00] Launch - product launch\n"
        "[2024-06-01 09:30] Standup - daily sync\n"
    )
    # viewing never consumes events
    assert scheduler.size() == 2


def test_format_event():
    """Tests event rendering."""
    event = EventScheduler().submit("Launch", "2024-05-20 14:00", "")
    assert format_event(event) == "[2024-05-20 14:00] Launch - "

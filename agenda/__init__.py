"""Agenda: time-ordered event scheduling.

Core Objects: Event, and EventScheduler.
"""

import datetime

import agenda.console as console
from agenda.events import Event
from agenda.exceptions import ParseError, SubmitError, ValidationError
from agenda.scheduler import EventScheduler

__all__ = [
    "Event",
    "EventScheduler",
    "ParseError",
    "SubmitError",
    "ValidationError",
    "console",
]

__title__ = "agenda"
__version__ = "0.1.0"
__license__ = "Apache 2.0"
_this_year = datetime.datetime.now(tz=datetime.UTC).date().year
__copyright__ = f"Copyright {_this_year} Agenda Team"

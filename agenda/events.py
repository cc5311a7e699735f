"""Calendar events and the timestamp format they are entered in.

This module provides the value type held by the scheduler together with the
helpers that turn user-entered text into it:

- Event: a frozen value object with a title, a naive minute-precision
  timestamp and a free-text description
- parse_timestamp: strict parsing of ``YYYY-MM-DD HH:MM`` text
- timestamp_key: the ordering used by the scheduler, with by_timestamp as
  its comparator form for callers that sort with ``functools.cmp_to_key``

Events compare equal when their title and timestamp are equal; the description
takes no part in identity. Events deliberately define no ``<``/``>``
operators, the scheduler orders them through ``timestamp_key``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from agenda.exceptions import ParseError, ValidationError

__all__ = [
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_PATTERN",
    "Event",
    "by_timestamp",
    "format_timestamp",
    "missing_fields",
    "parse_timestamp",
    "timestamp_key",
]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
TIMESTAMP_PATTERN = "YYYY-MM-DD HH:MM"

# strptime alone accepts unpadded fields such as "2024-6-1 9:30"
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")


def parse_timestamp(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM`` text into a naive datetime.

    Args:
        text: the text to parse

    Returns:
        datetime: the parsed timestamp

    Raises:
        ParseError: if the text does not match the pattern or names a date
            or time that does not exist (e.g. month 13 or February 30)

    """
    if not isinstance(text, str) or _TIMESTAMP_RE.fullmatch(text) is None:
        raise ParseError(text, TIMESTAMP_PATTERN)
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise ParseError(text, TIMESTAMP_PATTERN) from e


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM``."""
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{timestamp.year:04d}-{timestamp.month:02d}-{timestamp.day:02d} "
        f"{timestamp.hour:02d}:{timestamp.minute:02d}"
    )


def missing_fields(title: str | None, timestamp_text: str | None) -> tuple[str, ...]:
    """Return the names of the required fields that were left blank.

    A timestamp still holding the ``YYYY-MM-DD HH:MM`` placeholder counts as
    blank. Whitespace is not blank: a whitespace timestamp fails to parse.
    """
    for name, value in (("title", title), ("timestamp_text", timestamp_text)):
        if value is not None and not isinstance(value, str):
            raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    missing = []
    if not title:
        missing.append("title")
    if not timestamp_text or timestamp_text == TIMESTAMP_PATTERN:
        missing.append("timestamp")
    return tuple(missing)


@dataclass(frozen=True, slots=True)
class Event:
    """A calendar event.

    Attributes:
        title (str): display title, never empty
        timestamp (datetime): naive timestamp with minute precision
        description (str): free text, may be empty. Not part of equality.
    """

    title: str
    timestamp: datetime
    description: str = field(default="", compare=False)

    def __post_init__(self):
        """Validate the event fields."""
        if not isinstance(self.title, str):
            raise TypeError(f"title must be a str, got {type(self.title).__name__}")
        if not self.title:
            raise ValidationError(("title",))
        if not isinstance(self.timestamp, datetime):
            raise TypeError(
                f"timestamp must be a datetime, got {type(self.timestamp).__name__}"
            )
        if self.timestamp.tzinfo is not None:
            raise ValueError(f"timestamp must be naive, got {self.timestamp!r}")
        if self.timestamp.second or self.timestamp.microsecond:
            raise ValueError(
                f"timestamp must have minute precision, got {self.timestamp!r}"
            )
        if not isinstance(self.description, str):
            raise TypeError(
                f"description must be a str, got {type(self.description).__name__}"
            )

    @classmethod
    def from_text(
        cls, title: str, timestamp_text: str, description: str | None = ""
    ) -> Event:
        """Build an event from the raw strings of an entry form.

        Args:
            title: the event title
            timestamp_text: the timestamp as ``YYYY-MM-DD HH:MM``
            description: optional free text, None is treated as empty

        Returns:
            Event: the new event

        Raises:
            ValidationError: if the title or the timestamp is blank
            ParseError: if the timestamp text is malformed

        """
        missing = missing_fields(title, timestamp_text)
        if missing:
            raise ValidationError(missing)
        timestamp = parse_timestamp(timestamp_text)
        return cls(title, timestamp, description if description is not None else "")

    def to_dict(self) -> dict[str, Any]:
        """Return the event as a plain dict."""
        return {
            "title": self.title,
            "timestamp": self.timestamp,
            "description": self.description,
        }

    def __str__(self) -> str:
        """Render as ``[YYYY-MM-DD HH:MM] title - description``."""
        return (
            f"[{format_timestamp(self.timestamp)}] "
            f"{self.title} - {self.description}"
        )


def timestamp_key(event: Event) -> datetime:
    """Return the sort key of an event.

    The scheduler orders its heap entries on this key.
    """
    return event.timestamp


def by_timestamp(a: Event, b: Event) -> int:
    """Compare two events chronologically.

    Comparator form of ``timestamp_key``; it orders events exactly as the
    scheduler does.

    Returns:
        int: negative if ``a`` is earlier, positive if later, 0 if simultaneous

    """
    return (a.timestamp > b.timestamp) - (a.timestamp < b.timestamp)

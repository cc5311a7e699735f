"""Exceptions raised when submitting events to the scheduler.

Both exceptions are caller-correctable: the scheduler is left untouched when
either is raised.
"""

from __future__ import annotations

__all__ = ["ParseError", "SubmitError", "ValidationError"]


class SubmitError(ValueError):
    """Base class for errors raised by ``EventScheduler.submit``."""


class ValidationError(SubmitError):
    """A required field is missing or still holds its placeholder.

    Attributes:
        fields (tuple[str, ...]): the names of the missing fields
    """

    def __init__(self, fields: tuple[str, ...]) -> None:
        """Initialize a ValidationError.

        Args:
            fields: the names of the missing fields, in form order
        """
        self.fields = tuple(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class ParseError(SubmitError):
    """The timestamp text does not match the expected pattern.

    Attributes:
        text (str): the rejected text
        pattern (str): the expected pattern
    """

    def __init__(self, text: str, pattern: str) -> None:
        """Initialize a ParseError.

        Args:
            text: the rejected timestamp text
            pattern: the human-readable pattern the text should follow
        """
        self.text = text
        self.pattern = pattern
        super().__init__(f"Invalid timestamp {text!r}, expected format {pattern}")

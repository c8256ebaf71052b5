"""Timezone-specific exception types for the project."""

from __future__ import annotations


class TzboardError(Exception):
    """Base exception for tzboard errors."""


class InvalidTimezone(TzboardError, ValueError):
    """Raised when formatting is requested against an unknown zone name.

    Names handed out by the grouper always resolve, so this signals a
    caller passing an identifier from somewhere else.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid IANA timezone: {name}")
        self.name = name


class TimezoneEnumerationFailure(TzboardError):
    """Raised when one zone's offset cannot be computed during grouping."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Could not process timezone {name}: {reason}")
        self.name = name
        self.reason = reason


class TimestampParseFailure(TzboardError, ValueError):
    """Raised by a timestamp parse strategy that does not accept its input."""

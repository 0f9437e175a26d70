from __future__ import annotations


class DateKeyError(ValueError):
    """Base exception for all date-key errors."""


class InvalidDateKeyError(DateKeyError):
    """A string is not a date key, or does not denote a real calendar period."""

    def __init__(self, key: object, reason: str | None = None) -> None:
        self.key = key
        message = f"Invalid DateKey: {key!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

from __future__ import annotations

from typing import Optional


class UnicalError(Exception):
    """Base error."""


class InvalidDateError(UnicalError, ValueError):
    """Raised by ``to_jdn`` when a month or day is outside the calendar's range."""

    def __init__(self, calendar: str, year: int, month: int, day: int, reason: str) -> None:
        self.calendar = calendar
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        super().__init__(f"Invalid {calendar} date {year}-{month:02d}-{day:02d}: {reason}")


class ConverterNotFoundError(UnicalError, KeyError):
    """Raised when a calendar kind has no registered converter."""

    def __init__(self, kind: object, *, source: Optional[str] = None, target: Optional[str] = None) -> None:
        self.kind = kind
        self.source = source
        self.target = target
        if source is not None and target is not None:
            msg = f"No converter for '{kind}' (converting {source} -> {target})"
        else:
            msg = f"No converter for '{kind}'"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0])

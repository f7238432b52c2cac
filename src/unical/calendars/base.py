"""
unical.calendars.base
---------------------
Shared converter machinery: validation, naming, formatting and parsing, plus
the closed-form "days before year" family used by the cyclic calendars.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.errors import InvalidDateError
from ..core.types import CalendarDate, CalendarInfo, CalendarKind
from ..formatter import DEFAULT_PATTERN, format_date, parse_ymd
from .names import MONTH_NAMES, MONTH_NAMES_SHORT
from .specs import CALENDAR_INFO, era_for

logger = logging.getLogger(__name__)


class CalendarBase:
    kind: CalendarKind

    def info(self) -> CalendarInfo:
        return CALENDAR_INFO[self.kind]

    def make_date(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(year, month, day, self.kind, era_for(self.kind, year))

    # ---- structure (overridden per calendar) ----
    def is_leap_year(self, year: int) -> bool:
        return False

    def months_in_year(self, year: int) -> int:
        return self.info().months[1]

    def days_in_month(self, year: int, month: int) -> int:
        raise NotImplementedError

    def validate(self, year: int, month: int, day: int) -> None:
        n = self.months_in_year(year)
        if not (1 <= month <= n):
            self._invalid(year, month, day, f"month must be in 1..{n}")
        dim = self.days_in_month(year, month)
        if not (1 <= day <= dim):
            self._invalid(year, month, day, f"day must be in 1..{dim}")

    def _invalid(self, year: int, month: int, day: int, reason: str) -> None:
        raise InvalidDateError(self.kind.value, year, month, day, reason)

    # ---- naming / text ----
    def month_name(self, year: int, month: int, *, short: bool = False) -> str:
        table = (MONTH_NAMES_SHORT if short else MONTH_NAMES)[self.kind]
        if 1 <= month <= len(table):
            return table[month - 1]
        return str(month)

    def format(self, d: CalendarDate, pattern: str = DEFAULT_PATTERN) -> str:
        return format_date(self, d, pattern)

    def parse(self, text: str) -> Optional[CalendarDate]:
        return parse_ymd(self, text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CyclicYearCalendar(CalendarBase):
    """
    Calendars whose year start is a closed-form function of the year number.

    Subclasses supply ``days_before_year`` (days from the epoch to the first day
    of ``year``, negative before the epoch), ``month_lengths`` and a year estimate.
    """
    epoch_jdn: int
    max_corrections = 8

    def days_before_year(self, year: int) -> int:
        raise NotImplementedError

    def month_lengths(self, year: int) -> Sequence[int]:
        raise NotImplementedError

    def estimate_year(self, days: int) -> int:
        raise NotImplementedError

    def year_length(self, year: int) -> int:
        return self.days_before_year(year + 1) - self.days_before_year(year)

    def months_in_year(self, year: int) -> int:
        return len(self.month_lengths(year))

    def days_in_month(self, year: int, month: int) -> int:
        return self.month_lengths(year)[month - 1]

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        lengths = self.month_lengths(year)
        return self.epoch_jdn + self.days_before_year(year) + sum(lengths[: month - 1]) + day - 1

    def locate_year(self, days: int) -> int:
        y = self.estimate_year(days)
        for _ in range(self.max_corrections):
            if days < self.days_before_year(y):
                y -= 1
            elif days >= self.days_before_year(y + 1):
                y += 1
            else:
                return y
        logger.warning("%s year correction hit its cap at day offset %d; using year %d", self.kind, days, y)
        return y

    def from_jdn(self, jdn: int) -> CalendarDate:
        days = jdn - self.epoch_jdn
        y = self.locate_year(days)
        rem = days - self.days_before_year(y)
        lengths = self.month_lengths(y)
        rem = min(max(rem, 0), sum(lengths) - 1)
        m = 1
        for n in lengths:
            if rem < n:
                break
            rem -= n
            m += 1
        return self.make_date(y, m, rem + 1)

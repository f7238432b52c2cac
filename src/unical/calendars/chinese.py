"""
unical.calendars.chinese
------------------------
Approximate Chinese lunisolar calendar.

Known limitation: no new-moon or solar-term computation. Year starts are
placed at multiples of a mean lunar year from 1900-02-05, months alternate
30/29 days, and a leap month follows month 6 in 7 of every 19 years. The
result does not agree with the authentic calendar; it only round-trips
through JDN to within one day (a common year's slot can be a day longer
than its months, and that day folds into the last day of month 12).

The leap month is encoded as ``12 + leap_month`` (18 for the default).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from ..core.types import CalendarDate, CalendarKind
from .base import CalendarBase
from .names import CHINESE_LEAP_PREFIX
from .specs import CHINESE_EPOCH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChineseParams:
    epoch_jdn: int = CHINESE_EPOCH
    epoch_year: int = 1900
    mean_month: float = 29.53059
    leap_positions: FrozenSet[int] = frozenset({3, 6, 9, 11, 14, 17, 19})
    leap_month: int = 6
    max_corrections: int = 4

    def __post_init__(self) -> None:
        if not (29.0 < self.mean_month < 30.0):
            raise ValueError("mean_month must be between 29 and 30 days")
        if not (1 <= self.leap_month <= 11):
            raise ValueError("leap_month must be in 1..11")
        if any(not (1 <= p <= 19) for p in self.leap_positions):
            raise ValueError("leap_positions must be in 1..19")

    @property
    def mean_year(self) -> float:
        return 12 * self.mean_month


class ChineseCalendar(CalendarBase):
    kind = CalendarKind.CHINESE

    def __init__(self, params: ChineseParams = ChineseParams()) -> None:
        self.p = params

    def __repr__(self) -> str:
        return f"ChineseCalendar({self.p})"

    @property
    def leap_code(self) -> int:
        return 12 + self.p.leap_month

    def is_leap_year(self, year: int) -> bool:
        return (year - 1) % 19 + 1 in self.p.leap_positions

    def year_start(self, year: int) -> int:
        return self.p.epoch_jdn + math.floor((year - self.p.epoch_year) * self.p.mean_year + 0.5)

    def month_sequence(self, year: int) -> List[Tuple[int, int]]:
        """(month code, length) in calendar order."""
        seq = []
        for m in range(1, 13):
            seq.append((m, 30 if m % 2 == 1 else 29))
            if m == self.p.leap_month and self.is_leap_year(year):
                seq.append((self.leap_code, 29))
        return seq

    def months_in_year(self, year: int) -> int:
        return 13 if self.is_leap_year(year) else 12

    def days_in_month(self, year: int, month: int) -> int:
        for code, n in self.month_sequence(year):
            if code == month:
                return n
        self._invalid(year, month, 1, "no such month in this year")

    def validate(self, year: int, month: int, day: int) -> None:
        codes = [code for code, _ in self.month_sequence(year)]
        if month not in codes:
            self._invalid(year, month, day, f"month must be one of {codes}")
        dim = self.days_in_month(year, month)
        if not (1 <= day <= dim):
            self._invalid(year, month, day, f"day must be in 1..{dim}")
        offset = self._month_offset(year, month) + day - 1
        if offset >= self.year_start(year + 1) - self.year_start(year):
            # leap years carry more month-days than the year slot holds
            self._invalid(year, month, day, "falls past the start of the next year")

    def month_name(self, year: int, month: int, *, short: bool = False) -> str:
        if month == self.leap_code:
            return CHINESE_LEAP_PREFIX + super().month_name(year, self.p.leap_month, short=short)
        return super().month_name(year, month, short=short)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self.year_start(year) + self._month_offset(year, month) + day - 1

    def _month_offset(self, year: int, month: int) -> int:
        offset = 0
        for code, n in self.month_sequence(year):
            if code == month:
                break
            offset += n
        return offset

    def from_jdn(self, jdn: int) -> CalendarDate:
        y = self.p.epoch_year + math.floor((jdn - self.p.epoch_jdn) / self.p.mean_year)
        for _ in range(self.p.max_corrections):
            if jdn < self.year_start(y):
                y -= 1
            elif jdn >= self.year_start(y + 1):
                y += 1
            else:
                break
        if not (self.year_start(y) <= jdn < self.year_start(y + 1)):
            logger.warning("Chinese year correction hit its cap at JDN %d; using year %d", jdn, y)
        rem = max(0, jdn - self.year_start(y))
        seq = self.month_sequence(y)
        for code, n in seq:
            if rem < n:
                return self.make_date(y, code, rem + 1)
            rem -= n
        code, n = seq[-1]
        return self.make_date(y, code, n)

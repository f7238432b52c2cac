"""
unical.calendars.solar
----------------------
Arithmetic solar calendars: Persian (33-year cycle) and the Alexandrian
13-month family (Coptic, Ethiopian).
"""

from __future__ import annotations

from typing import FrozenSet, List

from ..core.types import CalendarKind
from .base import CyclicYearCalendar
from .specs import COPTIC_EPOCH, ETHIOPIAN_EPOCH, PERSIAN_EPOCH

PERSIAN_CYCLE_YEARS = 33
PERSIAN_LEAP_POSITIONS: FrozenSet[int] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})
PERSIAN_CYCLE_DAYS = 365 * PERSIAN_CYCLE_YEARS + len(PERSIAN_LEAP_POSITIONS)   # 12053


class PersianCalendar(CyclicYearCalendar):
    """Six 31-day months, five of 30, and Esfand with 29 (30 in leap years)."""
    kind = CalendarKind.PERSIAN
    epoch_jdn = PERSIAN_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return (year - 1) % PERSIAN_CYCLE_YEARS + 1 in PERSIAN_LEAP_POSITIONS

    def days_before_year(self, year: int) -> int:
        cycles, rest = divmod(year - 1, PERSIAN_CYCLE_YEARS)
        leaps = cycles * len(PERSIAN_LEAP_POSITIONS) + sum(1 for p in PERSIAN_LEAP_POSITIONS if p <= rest)
        return 365 * (year - 1) + leaps

    def month_lengths(self, year: int) -> List[int]:
        return [31] * 6 + [30] * 5 + [30 if self.is_leap_year(year) else 29]

    def estimate_year(self, days: int) -> int:
        return (PERSIAN_CYCLE_YEARS * days) // PERSIAN_CYCLE_DAYS + 1


class CopticCalendar(CyclicYearCalendar):
    """Twelve 30-day months and an epagomenal month of 5 days (6 when year % 4 == 3)."""
    kind = CalendarKind.COPTIC
    epoch_jdn = COPTIC_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def days_before_year(self, year: int) -> int:
        return 365 * (year - 1) + year // 4

    def month_lengths(self, year: int) -> List[int]:
        return [30] * 12 + [6 if self.is_leap_year(year) else 5]

    def estimate_year(self, days: int) -> int:
        return (4 * days + 1463) // 1461


class EthiopianCalendar(CopticCalendar):
    kind = CalendarKind.ETHIOPIAN
    epoch_jdn = ETHIOPIAN_EPOCH

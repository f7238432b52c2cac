"""
unical.calendars.islamic
------------------------
Tabular Islamic calendar: 30-year cycle with 11 leap years, months alternating
30/29 days and Dhu al-Hijjah gaining a day in leap years.

Year numbering extends below 1 synthetically (year 0 precedes year 1). The
leap-count formula uses floor division, so the same closed form serves both
sides of the epoch.
"""

from __future__ import annotations

from typing import FrozenSet, List

from ..core.types import CalendarKind
from .base import CyclicYearCalendar
from .specs import ISLAMIC_EPOCH

CYCLE_YEARS = 30
CYCLE_DAYS = 30 * 354 + 11      # 10631
LEAP_POSITIONS: FrozenSet[int] = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})


def cycle_position(year: int) -> int:
    """Position 1..30 in the leap cycle; whole cycles are added for years below 1."""
    return (year - 1) % CYCLE_YEARS + 1


def is_leap_year(year: int) -> bool:
    return cycle_position(year) in LEAP_POSITIONS


def leap_years_before(year: int) -> int:
    """Leap years from year 1 up to (not including) ``year``; negative below year 1."""
    cycles, rest = divmod(year - 1, CYCLE_YEARS)
    return cycles * len(LEAP_POSITIONS) + sum(1 for p in LEAP_POSITIONS if p <= rest)


def month_length(year: int, month: int) -> int:
    if month == 12 and is_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29


class IslamicCalendar(CyclicYearCalendar):
    kind = CalendarKind.ISLAMIC
    epoch_jdn = ISLAMIC_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def days_before_year(self, year: int) -> int:
        return 354 * (year - 1) + leap_years_before(year)

    def month_lengths(self, year: int) -> List[int]:
        return [month_length(year, m) for m in range(1, 13)]

    def estimate_year(self, days: int) -> int:
        # mean year = CYCLE_DAYS / CYCLE_YEARS
        return (CYCLE_YEARS * days) // CYCLE_DAYS + 1

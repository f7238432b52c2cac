"""
unical.calendars.hebrew
-----------------------
Hebrew calendar with a simplified year-length heuristic (no molad computation).

Month 1 is Nisan; years have 12 months, or 13 in Metonic leap years (month 13
is Adar II). There is no year 0: year -1 directly precedes year 1.

Length computation is two-phase. ``compute_year_length`` is closed form and
``compute_month_length`` takes the year length as an argument, so neither
calls back into the other. The memoizing wrappers sit on top of these.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, FrozenSet, Optional, Tuple

from ..core.types import CalendarDate, CalendarKind
from .base import CalendarBase
from .names import HEBREW_ADAR_I
from .specs import HEBREW_EPOCH

logger = logging.getLogger(__name__)

METONIC_YEARS = 19
LEAP_POSITIONS: FrozenSet[int] = frozenset({3, 6, 8, 11, 14, 17, 19})

# Months 1-7, then Tevet and Shevat. Cheshvan (8) and Kislev (9) are variable.
_FIXED_MONTHS = {1: 30, 2: 29, 3: 30, 4: 29, 5: 30, 6: 29, 7: 30, 10: 29, 11: 30, 13: 29}

# Plausible year lengths; anything outside stops a search
_MIN_YEAR_DAYS = 1
_MAX_YEAR_DAYS = 400


def cycle_position(year: int) -> int:
    """Position 1..19 in the Metonic cycle (whole cycles added for years below 1)."""
    return (year - 1) % METONIC_YEARS + 1


def is_leap_year(year: int) -> bool:
    return cycle_position(year) in LEAP_POSITIONS


# ============================================================
# Phase 1: pure computations
# ============================================================

def compute_year_length(year: int) -> int:
    """353..355 days (383..385 in leap years), keyed to the cycle position."""
    pos = cycle_position(year)
    leap = pos in LEAP_POSITIONS
    base = 384 if leap else 354
    if pos % 3 == 0:
        base -= 1
    elif pos % 3 == 1:
        base += 1
    lo, hi = (383, 385) if leap else (353, 355)
    return max(lo, min(hi, base))


def compute_month_length(year: int, month: int, year_length: int) -> int:
    leap = is_leap_year(year)
    if month == 12:
        return 30 if leap else 29
    if month in (8, 9):
        fixed = 207 + 59 + (59 if leap else 29)
        variable = year_length - fixed
        cheshvan = 30 if variable >= 59 else 29
        if month == 8:
            return cheshvan
        kislev = variable - cheshvan
        return kislev if 29 <= kislev <= 30 else 29
    return _FIXED_MONTHS[month]


# ============================================================
# Phase 2: process-wide memoization (lru_cache is thread-safe)
# ============================================================

@lru_cache(maxsize=None)
def hebrew_year_length(year: int) -> int:
    return compute_year_length(year)


@lru_cache(maxsize=None)
def hebrew_month_length(year: int, month: int) -> int:
    return compute_month_length(year, month, hebrew_year_length(year))


def clear_caches() -> None:
    hebrew_year_length.cache_clear()
    hebrew_month_length.cache_clear()


# ============================================================
# Converter
# ============================================================

@dataclass(frozen=True)
class SearchLimits:
    max_bisect: int = 50
    max_walk: int = 10000

    def __post_init__(self) -> None:
        if self.max_bisect < 1 or self.max_walk < 1:
            raise ValueError("search limits must be positive")


@dataclass(frozen=True)
class YearSearch:
    """Outcome of locating the year containing a day offset from the epoch."""
    year: int
    day_of_year: int
    converged: bool
    iterations: int


def _prev_year(year: int) -> int:
    return -1 if year == 1 else year - 1


class HebrewCalendar(CalendarBase):
    kind = CalendarKind.HEBREW
    epoch_jdn = HEBREW_EPOCH

    def __init__(
        self,
        year_length: Optional[Callable[[int], int]] = None,
        limits: SearchLimits = SearchLimits(),
    ) -> None:
        self._custom = year_length is not None
        self._year_length: Callable[[int], int] = year_length or hebrew_year_length
        self.limits = limits
        # The heuristic depends only on the cycle position, so whole cycles can be skipped.
        self._cycle_prefix: Optional[Tuple[int, ...]] = None
        if not self._custom:
            acc = [0]
            for y in range(1, METONIC_YEARS + 1):
                acc.append(acc[-1] + self._year_length(y))
            self._cycle_prefix = tuple(acc)

    def __repr__(self) -> str:
        return f"HebrewCalendar(custom_year_length={self._custom}, limits={self.limits})"

    # ---- structure ----
    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def year_length(self, year: int) -> int:
        return self._year_length(year)

    def month_length(self, year: int, month: int) -> int:
        if not self._custom:
            return hebrew_month_length(year, month)
        return compute_month_length(year, month, self._year_length(year))

    def months_in_year(self, year: int) -> int:
        return 13 if is_leap_year(year) else 12

    def days_in_month(self, year: int, month: int) -> int:
        return self.month_length(year, month)

    def validate(self, year: int, month: int, day: int) -> None:
        if year == 0:
            self._invalid(year, month, day, "there is no year 0")
        super().validate(year, month, day)

    def month_name(self, year: int, month: int, *, short: bool = False) -> str:
        if month == 12 and is_leap_year(year):
            return HEBREW_ADAR_I[1 if short else 0]
        return super().month_name(year, month, short=short)

    # ---- cumulative days ----
    def days_before_year(self, year: int) -> int:
        """Days from the epoch to the first day of ``year`` (negative for year < 1)."""
        if year == 0:
            raise ValueError("there is no Hebrew year 0")
        prefix = self._cycle_prefix
        if year >= 1:
            if prefix is not None:
                full, rest = divmod(year - 1, METONIC_YEARS)
                return full * prefix[-1] + prefix[rest]
            return sum(self._year_length(y) for y in range(1, year))
        n = -year
        if prefix is not None:
            full, rest = divmod(n, METONIC_YEARS)
            return -(full * prefix[-1] + sum(self._year_length(y) for y in range(year, year + rest)))
        return -sum(self._year_length(y) for y in range(year, 0))

    def _valid_length(self, year: int) -> bool:
        length = self._year_length(year)
        return _MIN_YEAR_DAYS <= length <= _MAX_YEAR_DAYS

    def locate_year(self, days: int) -> YearSearch:
        if days >= 0:
            return self._bisect(days)
        return self._walk_back(days)

    def _bisect(self, days: int) -> YearSearch:
        lo, hi = 1, days // 350 + 10
        it = 0
        while lo < hi:
            it += 1
            if it > self.limits.max_bisect:
                return YearSearch(lo, 0, False, it - 1)
            mid = (lo + hi + 1) // 2
            if not self._valid_length(mid):
                return YearSearch(lo, 0, False, it)
            if self.days_before_year(mid) <= days:
                lo = mid
            else:
                hi = mid - 1
        doy = days - self.days_before_year(lo)
        ok = self._valid_length(lo) and 0 <= doy < self._year_length(lo)
        return YearSearch(lo, doy if ok else 0, ok, it)

    def _walk_back(self, days: int) -> YearSearch:
        year, start = 1, 0
        if self._cycle_prefix is not None:
            full = max(0, (-days) // self._cycle_prefix[-1] - 1)
            if full:
                year, start = -METONIC_YEARS * full, -full * self._cycle_prefix[-1]
        it = 0
        while start > days:
            it += 1
            if it > self.limits.max_walk:
                return YearSearch(year, 0, False, it - 1)
            prev = _prev_year(year)
            if not self._valid_length(prev):
                return YearSearch(year, 0, False, it)
            start -= self._year_length(prev)
            year = prev
        return YearSearch(year, days - start, True, it)

    # ---- conversion ----
    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        before_month = sum(self.month_length(year, m) for m in range(1, month))
        return self.epoch_jdn + self.days_before_year(year) + before_month + day - 1

    def from_jdn(self, jdn: int) -> CalendarDate:
        days = jdn - self.epoch_jdn
        found = self.locate_year(days)
        if not found.converged:
            logger.warning(
                "Hebrew year search did not converge for JDN %d after %d iterations; falling back to %d-01-01",
                jdn, found.iterations, found.year,
            )
            return self.make_date(found.year, 1, 1)
        rem = found.day_of_year
        month = 1
        last = self.months_in_year(found.year)
        while month < last:
            n = self.month_length(found.year, month)
            if rem < n:
                break
            rem -= n
            month += 1
        rem = min(rem, self.month_length(found.year, month) - 1)
        return self.make_date(found.year, month, rem + 1)

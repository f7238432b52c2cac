"""
unical.calendars.national
-------------------------
Solar calendars whose new year is pinned to a Gregorian date:
Indian National (Saka) and Baháʼí.
"""

from __future__ import annotations

from typing import List

from ..core.time import gregorian_to_jdn, is_gregorian_leap_year, jdn_to_gregorian
from ..core.types import CalendarKind
from .base import CyclicYearCalendar
from .specs import BAHAI_EPOCH, SAKA_EPOCH

SAKA_OFFSET = 78


class IndianSakaCalendar(CyclicYearCalendar):
    """Chaitra 1 falls on March 22, or March 21 when the Gregorian year is leap."""
    kind = CalendarKind.INDIAN_SAKA
    epoch_jdn = SAKA_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year + SAKA_OFFSET)

    def new_year_jdn(self, year: int) -> int:
        g = year + SAKA_OFFSET
        return gregorian_to_jdn(g, 3, 21 if is_gregorian_leap_year(g) else 22)

    def days_before_year(self, year: int) -> int:
        return self.new_year_jdn(year) - self.epoch_jdn

    def month_lengths(self, year: int) -> List[int]:
        chaitra = 31 if self.is_leap_year(year) else 30
        return [chaitra] + [31] * 5 + [30] * 6

    def estimate_year(self, days: int) -> int:
        g, _, _ = jdn_to_gregorian(self.epoch_jdn + days)
        return g - SAKA_OFFSET


# ------------------------------------------------------------
# Baháʼí: 18 months, Ayyám-i-Há, then the 19th month
# ------------------------------------------------------------

BAHAI_OFFSET = 1843
BAHAI_MONTH_DAYS = 19
AYYAM_I_HA = 19
ALA = 20


class BahaiCalendar(CyclicYearCalendar):
    """
    Months 1..18 have 19 days, month 19 is Ayyám-i-Há (4 or 5 days) and
    month 20 is ‘Alá’. Naw-Rúz is fixed at March 21 rather than the equinox.
    """
    kind = CalendarKind.BAHAI
    epoch_jdn = BAHAI_EPOCH

    def nawruz_jdn(self, year: int) -> int:
        return gregorian_to_jdn(year + BAHAI_OFFSET, 3, 21)

    def is_leap_year(self, year: int) -> bool:
        return self.year_length(year) == 366

    def days_before_year(self, year: int) -> int:
        return self.nawruz_jdn(year) - self.epoch_jdn

    def month_lengths(self, year: int) -> List[int]:
        ayyam = self.year_length(year) - 19 * BAHAI_MONTH_DAYS
        return [BAHAI_MONTH_DAYS] * 18 + [ayyam, BAHAI_MONTH_DAYS]

    def estimate_year(self, days: int) -> int:
        g, _, _ = jdn_to_gregorian(self.epoch_jdn + days)
        return g - BAHAI_OFFSET

"""
unical.calendars.gregorian
--------------------------
Gregorian and Julian converters plus the calendars that reuse Gregorian
structure: Thai Buddhist (year offset), Cherokee (renamed months) and
Iroquois (13 fixed-length moons over the Gregorian year).
"""

from __future__ import annotations

from ..core.time import (
    gregorian_month_days,
    gregorian_to_jdn,
    is_gregorian_leap_year,
    is_julian_leap_year,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_month_days,
    julian_to_jdn,
)
from ..core.types import CalendarDate, CalendarKind
from .base import CalendarBase


class GregorianCalendar(CalendarBase):
    kind = CalendarKind.GREGORIAN
    year_offset = 0

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year - self.year_offset)

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        return gregorian_month_days(year - self.year_offset, month)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return gregorian_to_jdn(year - self.year_offset, month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        y, m, d = jdn_to_gregorian(jdn)
        return self.make_date(y + self.year_offset, m, d)


class ThaiBuddhistCalendar(GregorianCalendar):
    kind = CalendarKind.THAI_BUDDHIST
    year_offset = 543


class CherokeeCalendar(GregorianCalendar):
    kind = CalendarKind.CHEROKEE


class JulianCalendar(CalendarBase):
    kind = CalendarKind.JULIAN

    def is_leap_year(self, year: int) -> bool:
        return is_julian_leap_year(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        return julian_month_days(year, month)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return julian_to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        return self.make_date(*jdn_to_julian(jdn))


# floor(365.25 / 13)
MOON_DAYS = 28


class IroquoisCalendar(CalendarBase):
    """
    Gregorian year cut into 13 moons of MOON_DAYS days. The thirteenth moon
    absorbs the remainder (29 or 30 days). Not an observational lunar calendar.
    """
    kind = CalendarKind.IROQUOIS

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year)

    def months_in_year(self, year: int) -> int:
        return 13

    def days_in_month(self, year: int, month: int) -> int:
        if month < 13:
            return MOON_DAYS
        return (366 if is_gregorian_leap_year(year) else 365) - 12 * MOON_DAYS

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return gregorian_to_jdn(year, 1, 1) + (month - 1) * MOON_DAYS + day - 1

    def from_jdn(self, jdn: int) -> CalendarDate:
        y, _, _ = jdn_to_gregorian(jdn)
        doy = jdn - gregorian_to_jdn(y, 1, 1)
        moon = min(13, doy // MOON_DAYS + 1)
        return self.make_date(y, moon, doy - (moon - 1) * MOON_DAYS + 1)

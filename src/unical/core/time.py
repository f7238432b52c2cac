"""
unical.core.time
----------------
Integer JDN arithmetic for the proleptic Gregorian and Julian calendars.

Years are astronomical (year 0 = 1 BCE). Every division is Python floor
division, which matches the reference formulas for negative years.
"""

from __future__ import annotations
from datetime import date
from typing import Tuple

YMD = Tuple[int, int, int]

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DAY_NAMES_SHORT = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to Julian Day Number (JDN)."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> YMD:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Julian date to JDN."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def jdn_to_julian(jdn: int) -> YMD:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def day_of_week(jdn: int) -> int:
    """0=Sunday..6=Saturday."""
    return (jdn + 1) % 7


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


def gregorian_month_days(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def julian_month_days(year: int, month: int) -> int:
    if month == 2 and is_julian_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def gregorian_day_of_year(year: int, month: int, day: int) -> int:
    """1-based ordinal day within the Gregorian year."""
    return gregorian_to_jdn(year, month, day) - gregorian_to_jdn(year, 1, 1) + 1


# ------------------------------------------------------------
# Host date bridging (datetime.date is always Gregorian, years 1..9999)
# ------------------------------------------------------------

def to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """JDN -> datetime.date. Raises ValueError outside date's 1..9999 year range."""
    y, m, d = jdn_to_gregorian(jdn)
    return date(y, m, d)

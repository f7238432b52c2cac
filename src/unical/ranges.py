"""
unical.ranges
-------------
Gregorian-anchored periods (day, week, month, year, decade) expressed in any
calendar. Weeks run Monday..Sunday for every calendar.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple, Union

from .core.errors import InvalidDateError
from .core.time import day_of_week, gregorian_month_days, gregorian_to_jdn, jdn_to_gregorian, to_jdn
from .core.types import CalendarDate, CalendarKind, Granularity, TimeRange
from .formatter import display_year

Anchor = Union[date, CalendarDate, int]

MONTH_LABEL = "MMMM YYYY ERA"
WEEK_LABEL = "MMM D, YYYY ERA"
DAY_LABEL = "EEEE, MMMM D, YYYY ERA"


def as_granularity(value: Union[Granularity, str]) -> Granularity:
    if isinstance(value, Granularity):
        return value
    try:
        return Granularity(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown granularity '{value}'. Available: {[g.value for g in Granularity]}") from None


def anchor_jdn(anchor: Anchor) -> int:
    """JDN of a Gregorian anchor: datetime.date, Gregorian CalendarDate, or a JDN."""
    if isinstance(anchor, CalendarDate):
        if anchor.calendar != CalendarKind.GREGORIAN:
            raise ValueError(f"Time ranges are anchored on Gregorian dates, got {anchor.calendar}")
        y, m, d = anchor.year, anchor.month, anchor.day
        if not (1 <= m <= 12) or not (1 <= d <= gregorian_month_days(y, m)):
            raise InvalidDateError("gregorian", y, m, d, "not a valid Gregorian date")
        return gregorian_to_jdn(y, m, d)
    if isinstance(anchor, date):
        return to_jdn(anchor)
    return int(anchor)


def gregorian_bounds(jdn: int, granularity: Union[Granularity, str]) -> Tuple[int, int]:
    """First and last JDN of the Gregorian period containing ``jdn``."""
    g = as_granularity(granularity)
    if g is Granularity.DAY:
        return jdn, jdn
    if g is Granularity.WEEK:
        start = jdn - (day_of_week(jdn) + 6) % 7
        return start, start + 6
    y, m, _ = jdn_to_gregorian(jdn)
    if g is Granularity.MONTH:
        start = gregorian_to_jdn(y, m, 1)
        return start, start + gregorian_month_days(y, m) - 1
    if g is Granularity.YEAR:
        return gregorian_to_jdn(y, 1, 1), gregorian_to_jdn(y, 12, 31)
    first = (y // 10) * 10
    return gregorian_to_jdn(first, 1, 1), gregorian_to_jdn(first + 9, 12, 31)


def range_label(converter, jdn: int, granularity: Union[Granularity, str]) -> str:
    g = as_granularity(granularity)
    d = converter.from_jdn(jdn)
    era_name = converter.info().era_name
    if g is Granularity.DECADE:
        if d.year <= 0:
            return f"{(abs(d.year) + 1) // 10 * 10}s BCE"
        return f"{d.year // 10 * 10}s {era_name}".rstrip()
    if g is Granularity.YEAR:
        shown, era = display_year(d.year, era_name)
        return f"{shown} {era}".rstrip()
    if g is Granularity.MONTH:
        return converter.format(d, MONTH_LABEL).rstrip()
    if g is Granularity.WEEK:
        start, _ = gregorian_bounds(jdn, g)
        return "Week of " + converter.format(converter.from_jdn(start), WEEK_LABEL).rstrip()
    return converter.format(d, DAY_LABEL).rstrip()


def time_range(converter, anchor: Anchor, granularity: Union[Granularity, str]) -> TimeRange:
    g = as_granularity(granularity)
    jdn = anchor_jdn(anchor)
    start, end = gregorian_bounds(jdn, g)
    return TimeRange(
        granularity=g,
        start_jdn=start,
        end_jdn=end,
        start=converter.from_jdn(start),
        end=converter.from_jdn(end),
        label=range_label(converter, jdn, g),
    )


def canonical_date(converter, anchor: Anchor, granularity: Union[Granularity, str]) -> CalendarDate:
    """Representative date of the period: its first day, in the target calendar."""
    start, _ = gregorian_bounds(anchor_jdn(anchor), granularity)
    return converter.from_jdn(start)


def navigate(anchor: Anchor, granularity: Union[Granularity, str], steps: int = 1) -> int:
    """Move a Gregorian anchor by whole periods; month and year moves clamp the day."""
    g = as_granularity(granularity)
    jdn = anchor_jdn(anchor)
    if g is Granularity.DAY:
        return jdn + steps
    if g is Granularity.WEEK:
        return jdn + 7 * steps
    y, m, d = jdn_to_gregorian(jdn)
    if g is Granularity.MONTH:
        y, m0 = divmod(y * 12 + (m - 1) + steps, 12)
        m = m0 + 1
    elif g is Granularity.YEAR:
        y += steps
    else:
        y += 10 * steps
    return gregorian_to_jdn(y, m, min(d, gregorian_month_days(y, m)))

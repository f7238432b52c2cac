# tests/test_time.py

import pytest
import random
from datetime import date

from unical.core import time as t
from unical.calendars.gregorian import GregorianCalendar, JulianCalendar
from unical.core.errors import InvalidDateError


def test_known_jdn_fixtures():
    assert t.gregorian_to_jdn(2024, 1, 1) == 2460311
    assert t.gregorian_to_jdn(2024, 2, 29) == 2460370
    assert t.gregorian_to_jdn(2000, 1, 1) == 2451545
    assert t.gregorian_to_jdn(1, 1, 1) == 1721426
    assert t.julian_to_jdn(1, 1, 1) == 1721424
    # Mayan epoch, 3114 BCE in historical numbering
    assert t.gregorian_to_jdn(-3113, 8, 11) == 584283


def test_gregorian_jdn_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(-1000000, 5373484)
        y, m, d = t.jdn_to_gregorian(jdn_in)
        assert t.gregorian_to_jdn(y, m, d) == jdn_in


def test_julian_jdn_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(-1000000, 5373484)
        y, m, d = t.jdn_to_julian(jdn_in)
        assert 1 <= m <= 12 and 1 <= d <= t.julian_month_days(y, m)
        assert t.julian_to_jdn(y, m, d) == jdn_in


def test_year_zero_is_one_bce():
    # 0-12-31 and 1-01-01 are consecutive days
    assert t.gregorian_to_jdn(1, 1, 1) - t.gregorian_to_jdn(0, 12, 31) == 1
    assert t.jdn_to_gregorian(t.gregorian_to_jdn(-1, 3, 1)) == (-1, 3, 1)


def test_day_of_week():
    # 2024-01-01 was a Monday, 2000-01-01 a Saturday
    assert t.day_of_week(2460311) == 1
    assert t.day_of_week(2451545) == 6
    assert t.DAY_NAMES[t.day_of_week(2460311)] == "Monday"


def test_leap_rules():
    assert t.is_gregorian_leap_year(2000)
    assert t.is_gregorian_leap_year(2024)
    assert not t.is_gregorian_leap_year(1900)
    assert not t.is_gregorian_leap_year(2023)
    assert t.is_gregorian_leap_year(0)
    assert t.is_julian_leap_year(1900)
    assert t.is_julian_leap_year(-4)
    assert not t.is_julian_leap_year(-1)


def test_century_leap_day_rejected():
    with pytest.raises(InvalidDateError) as ei:
        GregorianCalendar().to_jdn(1900, 2, 29)
    assert ei.value.calendar == "gregorian"
    assert (ei.value.year, ei.value.month, ei.value.day) == (1900, 2, 29)
    # the Julian calendar does have it
    assert JulianCalendar().to_jdn(1900, 2, 29) == t.julian_to_jdn(1900, 3, 1) - 1


@pytest.mark.parametrize("y", [2000, 2024])
def test_leap_day_roundtrip(y):
    cal = GregorianCalendar()
    j = cal.to_jdn(y, 2, 29)
    d = cal.from_jdn(j)
    assert (d.year, d.month, d.day) == (y, 2, 29)


def test_day_of_year():
    assert t.gregorian_day_of_year(2024, 1, 1) == 1
    assert t.gregorian_day_of_year(2024, 12, 31) == 366
    assert t.gregorian_day_of_year(2023, 3, 22) == 81


def test_host_date_bridge():
    assert t.to_jdn(date(2024, 1, 1)) == 2460311
    assert t.from_jdn(2460370) == date(2024, 2, 29)
    with pytest.raises(ValueError):
        t.from_jdn(t.gregorian_to_jdn(0, 6, 1))

# tests/test_islamic.py

import pytest

from unical.calendars import islamic
from unical.calendars.islamic import IslamicCalendar
from unical.calendars.specs import ISLAMIC_EPOCH
from unical.core.errors import InvalidDateError


def test_epoch():
    cal = IslamicCalendar()
    assert cal.to_jdn(1, 1, 1) == ISLAMIC_EPOCH == 1948439
    d = cal.from_jdn(ISLAMIC_EPOCH)
    assert (d.year, d.month, d.day, d.era) == (1, 1, 1, "AH")


def test_cycle_idempotence():
    for y in range(-300, 300):
        assert islamic.is_leap_year(y) == islamic.is_leap_year(y + islamic.CYCLE_YEARS)
        assert 1 <= islamic.cycle_position(y) <= 30


def test_cycle_length():
    cal = IslamicCalendar()
    assert sum(cal.year_length(y) for y in range(1, 31)) == islamic.CYCLE_DAYS
    assert sum(cal.year_length(y) for y in range(-59, -29)) == islamic.CYCLE_DAYS
    assert cal.days_before_year(31) == islamic.CYCLE_DAYS


def test_leap_years_before_counts_backwards():
    assert islamic.leap_years_before(1) == 0
    assert islamic.leap_years_before(3) == 1
    assert islamic.leap_years_before(31) == 11
    # year 0 is position 30 (common), so nothing is gained or lost
    assert islamic.leap_years_before(0) == 0
    assert islamic.leap_years_before(-29) == -11


def test_month_lengths():
    cal = IslamicCalendar()
    # 1445 is cycle position 5 (leap), 1446 is position 6 (common)
    assert cal.is_leap_year(1445) and not cal.is_leap_year(1446)
    assert cal.month_lengths(1446) == [30, 29] * 6
    assert cal.month_lengths(1445)[-1] == 30
    assert sum(cal.month_lengths(1445)) == 355
    assert cal.to_jdn(1445, 12, 30) + 1 == cal.to_jdn(1446, 1, 1)


@pytest.mark.parametrize("ymd", [(1446, 12, 30), (1445, 2, 30), (1445, 13, 1), (1445, 0, 1), (1445, 1, 0)])
def test_invalid_dates_raise(ymd):
    with pytest.raises(InvalidDateError):
        IslamicCalendar().to_jdn(*ymd)


def test_pre_epoch_years():
    cal = IslamicCalendar()
    # year 0 is a common year directly before year 1
    assert cal.to_jdn(0, 1, 1) == ISLAMIC_EPOCH - 354
    assert cal.to_jdn(0, 12, 29) == ISLAMIC_EPOCH - 1
    d = cal.from_jdn(ISLAMIC_EPOCH - 1)
    assert (d.year, d.month, d.day, d.era) == (0, 12, 29, "BCE")
    # walking back one year at a time agrees with the closed form
    start = ISLAMIC_EPOCH
    for y in range(0, -100, -1):
        start -= cal.year_length(y)
        assert cal.to_jdn(y, 1, 1) == start

# tests/test_chinese.py

import logging
import pytest

import unical
from unical.calendars.chinese import ChineseCalendar, ChineseParams
from unical.calendars.specs import CHINESE_EPOCH
from unical.core.errors import InvalidDateError
from unical.core.time import gregorian_to_jdn


@pytest.fixture
def cal():
    return ChineseCalendar()


def test_reference_point(cal):
    assert CHINESE_EPOCH == gregorian_to_jdn(1900, 2, 5)
    assert cal.to_jdn(1900, 1, 1) == CHINESE_EPOCH
    d = cal.from_jdn(CHINESE_EPOCH)
    assert (d.year, d.month, d.day) == (1900, 1, 1)


def test_year_starts_follow_mean_lunar_year(cal):
    # 354.36708 days per year, rounded half up
    assert cal.year_start(1901) - cal.year_start(1900) == 354
    assert cal.year_start(1903) - cal.year_start(1900) == 1063
    assert cal.year_start(1899) - cal.year_start(1900) == -354


def test_leap_month_encoding(cal):
    # 1900 is position 19 in the 19-year cycle
    assert cal.is_leap_year(1900) and not cal.is_leap_year(1901)
    assert cal.leap_code == 18
    assert [code for code, _ in cal.month_sequence(1900)] == [1, 2, 3, 4, 5, 6, 18, 7, 8, 9, 10, 11, 12]
    assert cal.months_in_year(1900) == 13
    assert cal.to_jdn(1900, 18, 1) == CHINESE_EPOCH + 177
    assert cal.to_jdn(1900, 7, 1) == CHINESE_EPOCH + 177 + 29
    assert cal.month_name(1900, 18) == "闰六"
    assert cal.format(cal.make_date(1900, 18, 3), "MMMM D") == "闰六 3"
    with pytest.raises(InvalidDateError):
        cal.to_jdn(1901, 18, 1)


def test_last_day_folds_into_month_twelve(cal):
    # 1901 has a 355-day slot but 354 days of months
    assert cal.year_start(1902) - cal.year_start(1901) == 355
    last = cal.year_start(1902) - 1
    d = cal.from_jdn(last)
    assert (d.year, d.month, d.day) == (1901, 12, 29)
    assert last - cal.to_jdn(d.year, d.month, d.day) == 1


def test_params_validated():
    with pytest.raises(ValueError):
        ChineseParams(mean_month=31.0)
    with pytest.raises(ValueError):
        ChineseParams(leap_month=12)
    with pytest.raises(ValueError):
        ChineseParams(leap_positions=frozenset({0, 5}))
    p = ChineseParams(leap_month=4)
    assert ChineseCalendar(p).leap_code == 16


def test_estimate_needs_few_corrections(cal, caplog):
    with caplog.at_level(logging.WARNING, logger="unical.calendars.chinese"):
        for j in range(CHINESE_EPOCH - 40000, CHINESE_EPOCH + 40000, 37):
            d = cal.from_jdn(j)
            assert cal.year_start(d.year) <= j < cal.year_start(d.year + 1)
    assert "hit its cap" not in caplog.text


def test_leap_year_dates_stop_at_the_next_year(cal):
    # 1900 carries 383 days of months in a 354-day slot
    slot = cal.year_start(1901) - cal.year_start(1900)
    assert slot == 354
    seen = set()
    for code, n in cal.month_sequence(1900):
        for day in range(1, n + 1):
            try:
                j = cal.to_jdn(1900, code, day)
            except InvalidDateError:
                continue
            d = cal.from_jdn(j)
            assert (d.year, d.month, d.day) == (1900, code, day)
            seen.add(j)
    assert len(seen) == slot
    assert min(seen) == cal.year_start(1900) and max(seen) == cal.year_start(1901) - 1

    with pytest.raises(InvalidDateError):
        cal.to_jdn(1900, 12, 29)
    assert cal.to_jdn(1901, 1, 29) == cal.year_start(1901) + 28


def test_overflowing_leap_year_dates_do_not_parse():
    assert unical.parse_calendar_date("1900-12-29", "chinese") is None
    assert unical.parse_calendar_date("1901-01-29", "chinese") is not None

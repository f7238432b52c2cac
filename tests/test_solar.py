# tests/test_solar.py

import pytest

import unical
from unical.calendars.gregorian import IroquoisCalendar, MOON_DAYS, ThaiBuddhistCalendar
from unical.calendars.national import ALA, AYYAM_I_HA, BahaiCalendar, IndianSakaCalendar
from unical.calendars.solar import CopticCalendar, EthiopianCalendar, PersianCalendar
from unical.calendars.specs import COPTIC_EPOCH, ETHIOPIAN_EPOCH, PERSIAN_EPOCH
from unical.core.errors import InvalidDateError
from unical.core.time import gregorian_to_jdn


def test_thai_buddhist_offset():
    cal = ThaiBuddhistCalendar()
    assert cal.to_jdn(2567, 1, 1) == 2460311
    d = cal.from_jdn(2460370)
    assert (d.year, d.month, d.day, d.era) == (2567, 2, 29, "BE")
    assert cal.format(d, "D MMMM YYYY") == "29 กุมภาพันธ์ 2567"


def test_cherokee_renames_gregorian_months():
    d = unical.from_jdn(2460311, calendar="cherokee")
    assert (d.year, d.month, d.day) == (2024, 1, 1)
    assert unical.format_calendar_date(d, "MMMM D, YYYY") == "Cold Moon 1, 2024"


def test_iroquois_moons():
    cal = IroquoisCalendar()
    jan1 = gregorian_to_jdn(2024, 1, 1)
    assert cal.to_jdn(2024, 2, 1) == jan1 + MOON_DAYS
    assert cal.days_in_month(2024, 13) == 30
    assert cal.days_in_month(2023, 13) == 29
    d = cal.from_jdn(gregorian_to_jdn(2024, 12, 31))
    assert (d.year, d.month, d.day) == (2024, 13, 30)
    with pytest.raises(InvalidDateError):
        cal.to_jdn(2024, 1, 29)


def test_persian():
    cal = PersianCalendar()
    assert cal.to_jdn(1, 1, 1) == PERSIAN_EPOCH
    assert cal.month_lengths(2) == [31] * 6 + [30] * 5 + [29]
    assert cal.is_leap_year(1) and cal.is_leap_year(34)
    assert cal.year_length(1) == 366
    assert sum(cal.year_length(y) for y in range(1, 34)) == 365 * 33 + 8
    with pytest.raises(InvalidDateError):
        cal.to_jdn(2, 12, 30)


def test_coptic_and_ethiopian():
    coptic, ethiopian = CopticCalendar(), EthiopianCalendar()
    assert coptic.to_jdn(1, 1, 1) == COPTIC_EPOCH
    assert ethiopian.to_jdn(1, 1, 1) == ETHIOPIAN_EPOCH
    # leap year when year % 4 == 3: the epagomenal month gets a sixth day
    assert coptic.days_in_month(3, 13) == 6
    assert coptic.days_in_month(4, 13) == 5
    assert coptic.to_jdn(4, 1, 1) - coptic.to_jdn(3, 1, 1) == 366
    assert ethiopian.months_in_year(2016) == 13
    with pytest.raises(InvalidDateError):
        ethiopian.to_jdn(2016, 13, 6)
    # same structure, different epoch
    assert ethiopian.to_jdn(10, 5, 5) - ETHIOPIAN_EPOCH == coptic.to_jdn(10, 5, 5) - COPTIC_EPOCH


def test_indian_saka_new_year():
    cal = IndianSakaCalendar()
    # Chaitra 1 is March 21 in Gregorian leap years, otherwise March 22
    assert cal.to_jdn(1946, 1, 1) == gregorian_to_jdn(2024, 3, 21)
    assert cal.to_jdn(1945, 1, 1) == gregorian_to_jdn(2023, 3, 22)
    assert cal.days_in_month(1946, 1) == 31
    assert cal.days_in_month(1945, 1) == 30
    assert cal.year_length(1946) == 366    # 2024-03-21 .. 2025-03-22
    assert cal.year_length(1945) == 365
    d = cal.from_jdn(2460311)
    assert (d.year, d.month, d.day, d.era) == (1945, 10, 11, "Saka")


def test_bahai_intercalary_days():
    cal = BahaiCalendar()
    assert cal.to_jdn(181, 1, 1) == gregorian_to_jdn(2024, 3, 21)
    assert cal.days_in_month(180, AYYAM_I_HA) == 5
    assert cal.days_in_month(181, AYYAM_I_HA) == 4
    assert cal.is_leap_year(180) and not cal.is_leap_year(181)
    assert cal.months_in_year(181) == 20
    # ‘Alá’ ends the day before Naw-Rúz
    assert cal.to_jdn(180, ALA, 19) + 1 == cal.to_jdn(181, 1, 1)
    assert cal.month_name(180, AYYAM_I_HA) == "Ayyám-i-Há"
    with pytest.raises(InvalidDateError):
        cal.to_jdn(181, AYYAM_I_HA, 5)

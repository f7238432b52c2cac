# tests/test_attributes.py

import pytest

import unical
from unical.attributes.registry import list_attributes, register_attribute
from unical.calendars.chinese import ChineseCalendar
from unical.calendars.mayan import CALENDAR_ROUND_DAYS
from unical.calendars.specs import HEBREW_EPOCH, MAYAN_EPOCH


def test_builtins_registered():
    assert {"weekday", "sexagenary_year", "metonic_cycle", "calendar_round", "long_count"} <= set(list_attributes())


def test_day_info_without_attributes():
    info = unical.day_info(2460311, calendar="hebrew")
    assert info.jdn == 2460311
    assert (info.gregorian.year, info.gregorian.month, info.gregorian.day) == (2024, 1, 1)
    assert info.date.calendar is unical.CalendarKind.HEBREW
    assert info.attributes is None


def test_weekday():
    a = unical.day_info(2460311, attributes=("weekday",)).attributes
    assert a == {"weekday": 1, "weekday_name": "Monday"}


def test_sexagenary_year():
    j = ChineseCalendar().to_jdn(1984, 1, 1)
    a = unical.day_info(j, attributes=["sexagenary_year"]).attributes
    assert a["chinese_year"] == 1984
    assert a["sexagenary_position"] == 1
    assert a["sexagenary_name"] == "甲子"
    assert a["animal"] == "Rat"
    assert a["sexagenary_cycle"] == 0

    j = ChineseCalendar().to_jdn(2043, 1, 1)
    a = unical.day_info(j, attributes=["sexagenary_year"]).attributes
    assert a["sexagenary_position"] == 60
    assert a["sexagenary_name"] == "癸亥"
    assert a["animal"] == "Pig"


def test_metonic_cycle():
    a = unical.day_info(HEBREW_EPOCH, attributes=["metonic_cycle"]).attributes
    assert a == {"hebrew_year": 1, "metonic_position": 1, "metonic_cycle": 0, "metonic_leap_year": False}
    j = unical.to_jdn(20, 1, 1, calendar="hebrew")
    a = unical.day_info(j, attributes=["metonic_cycle"]).attributes
    assert (a["metonic_position"], a["metonic_cycle"]) == (1, 1)


def test_calendar_round():
    a = unical.day_info(MAYAN_EPOCH, attributes=["calendar_round"]).attributes
    assert a == {
        "calendar_round": 0,
        "calendar_round_day": 0,
        "calendar_round_year": 0,
        "tzolkin": "1 Imix",
        "haab": "1 Pop",
    }
    again = unical.day_info(MAYAN_EPOCH + CALENDAR_ROUND_DAYS, attributes=["calendar_round"]).attributes
    assert again["calendar_round"] == 1
    assert (again["tzolkin"], again["haab"]) == ("1 Imix", "1 Pop")
    before = unical.day_info(MAYAN_EPOCH - 1, attributes=["calendar_round"]).attributes
    assert before["calendar_round"] == -1
    assert before["calendar_round_day"] == CALENDAR_ROUND_DAYS - 1


def test_long_count():
    a = unical.day_info(2456283, attributes=["long_count"]).attributes
    assert a == {"long_count": "13.0.0.0.0", "katun_global": 260, "days_into_katun": 0, "days_into_baktun": 0}


def test_several_attributes_merge():
    a = unical.day_info(2460311, attributes=["weekday", "long_count"]).attributes
    assert a["weekday_name"] == "Monday"
    assert a["long_count"].startswith("13.0.")


def test_unknown_attribute():
    with pytest.raises(KeyError):
        unical.day_info(2460311, attributes=["moon_phase"])


def test_register_custom_attribute():
    register_attribute("is_even_jdn", lambda info: {"is_even_jdn": info.jdn % 2 == 0})
    assert unical.day_info(2460311, attributes=["is_even_jdn"]).attributes == {"is_even_jdn": False}


def test_duplicate_attribute_rejected():
    with pytest.raises(KeyError):
        register_attribute("weekday", lambda info: {})

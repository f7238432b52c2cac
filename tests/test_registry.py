# tests/test_registry.py

import pytest
from datetime import date

import unical
from unical import CalendarDate, CalendarKind as K, ConverterNotFoundError
from unical.core.engine import CalendarRegistry
from unical.calendars.gregorian import GregorianCalendar


@pytest.fixture
def restore_registry():
    saved = unical.get_registry()
    yield
    unical.set_registry(saved)


def test_all_kinds_registered():
    names = unical.list_calendars()
    assert len(names) == 17
    assert names == sorted(k.value for k in K)
    for k in K:
        conv = unical.get_calendar_converter(k)
        assert conv.kind is k
        assert conv.info() is unical.CALENDAR_INFO[k]


def test_string_and_enum_lookup_agree():
    assert unical.get_calendar_converter("indian-saka") is unical.get_calendar_converter(K.INDIAN_SAKA)
    assert unical.get_calendar_converter(" Hebrew ") is unical.get_calendar_converter(K.HEBREW)


def test_unknown_kind_is_hard_failure():
    with pytest.raises(ConverterNotFoundError) as ei:
        unical.get_calendar_converter("klingon")
    assert isinstance(ei.value, KeyError)
    assert "klingon" in str(ei.value)


def test_convert_names_source_and_target():
    reg = CalendarRegistry({K.GREGORIAN: GregorianCalendar()})
    d = CalendarDate(2024, 1, 1, K.GREGORIAN)
    with pytest.raises(ConverterNotFoundError) as ei:
        reg.convert(d, "islamic")
    assert ei.value.source == "gregorian"
    assert ei.value.target == "islamic"
    assert "gregorian -> islamic" in str(ei.value)

    with pytest.raises(ConverterNotFoundError) as ei:
        reg.convert(d, "klingon")
    assert (ei.value.source, ei.value.target) == ("gregorian", "klingon")


def test_registry_is_immutable():
    reg = unical.get_registry()
    with pytest.raises(TypeError):
        reg._converters[K.GREGORIAN] = GregorianCalendar()

    small = CalendarRegistry({K.GREGORIAN: GregorianCalendar()})
    bigger = small.with_converter("julian", unical.get_calendar_converter("julian"))
    assert len(small) == 1 and len(bigger) == 2
    assert K.JULIAN in bigger and K.JULIAN not in small

    with pytest.raises(KeyError):
        bigger.with_converter(K.JULIAN, GregorianCalendar())
    replaced = bigger.with_converter(K.JULIAN, GregorianCalendar(), overwrite=True)
    assert isinstance(replaced.get(K.JULIAN), GregorianCalendar)


def test_register_calendar_swaps_default(restore_registry):
    with pytest.raises(KeyError):
        unical.register_calendar("julian", GregorianCalendar())
    reg = unical.register_calendar("julian", GregorianCalendar(), overwrite=True)
    assert unical.get_registry() is reg
    assert unical.to_jdn(2024, 1, 1, calendar="julian") == 2460311


def test_convert_date_pivots_through_jdn():
    d = CalendarDate(2024, 1, 1, K.GREGORIAN)
    for k in K:
        out = unical.convert_date(d, k)
        assert out.calendar is k
        back = unical.get_calendar_converter(k).to_jdn(out.year, out.month, out.day)
        assert abs(back - 2460311) <= (1 if k is K.CHINESE else 0)


def test_explicit_registry_argument():
    reg = CalendarRegistry({K.GREGORIAN: GregorianCalendar()})
    assert unical.from_jdn(2460311, registry=reg).year == 2024
    with pytest.raises(ConverterNotFoundError):
        unical.from_jdn(2460311, calendar="islamic", registry=reg)


def test_calendar_info_table():
    assert len(unical.CALENDAR_INFO) == 17
    assert unical.calendar_epoch("islamic") == 1948439
    assert unical.calendar_epoch("hebrew") == 347997
    assert unical.calendar_epoch("mayan-longcount") == 584283
    info = unical.calendar_info("hebrew")
    assert info.type == "lunisolar"
    assert info.months == (12, 13)
    assert info.era_name == "AM"
    with pytest.raises(TypeError):
        unical.CALENDAR_INFO[K.GREGORIAN] = info


def test_host_date_bridging():
    d = unical.date_to_calendar_date(date(2024, 1, 1), "thai-buddhist")
    assert (d.year, d.month, d.day, d.era) == (2567, 1, 1, "BE")
    assert unical.calendar_date_to_date(d) == date(2024, 1, 1)

    islamic = unical.date_to_calendar_date(date(2024, 2, 29), K.ISLAMIC)
    assert unical.calendar_date_to_date(islamic) == date(2024, 2, 29)

    with pytest.raises(ValueError):
        unical.calendar_date_to_date(CalendarDate(0, 1, 1, K.GREGORIAN))

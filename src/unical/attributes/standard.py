"""Multi-year cycles attached to a day: weekday, sexagenary year, Metonic
cycle, Mayan Calendar Round and Long Count units."""

from __future__ import annotations
from typing import Any, Dict

from ..core.time import DAY_NAMES, day_of_week
from ..core.types import DayInfo
from ..calendars.chinese import ChineseCalendar
from ..calendars.hebrew import HebrewCalendar, METONIC_YEARS, cycle_position, is_leap_year
from ..calendars.mayan import CALENDAR_ROUND_DAYS, HaabCalendar, LongCountCalendar, TzolkinCalendar
from ..calendars.names import EARTHLY_BRANCHES, HEAVENLY_STEMS, ZODIAC_ANIMALS
from ..calendars.specs import MAYAN_EPOCH
from .registry import attribute

# 1984 = 甲子, position 1
SEXAGENARY_REFERENCE_YEAR = 1984

_chinese = ChineseCalendar()
_hebrew = HebrewCalendar()
_tzolkin = TzolkinCalendar()
_haab = HaabCalendar()
_long_count = LongCountCalendar()


@attribute("weekday")
def weekday(info: DayInfo) -> Dict[str, Any]:
    # 0=Sun..6=Sat
    w = day_of_week(info.jdn)
    return {"weekday": w, "weekday_name": DAY_NAMES[w]}


@attribute("sexagenary_year")
def sexagenary_year(info: DayInfo) -> Dict[str, Any]:
    y = _chinese.from_jdn(info.jdn).year
    offset = y - SEXAGENARY_REFERENCE_YEAR
    pos = offset % 60
    return {
        "chinese_year": y,
        "stem": HEAVENLY_STEMS[pos % 10],
        "branch": EARTHLY_BRANCHES[pos % 12],
        "animal": ZODIAC_ANIMALS[pos % 12],
        "sexagenary_name": HEAVENLY_STEMS[pos % 10] + EARTHLY_BRANCHES[pos % 12],
        "sexagenary_position": pos + 1,
        "sexagenary_cycle": offset // 60,
    }


@attribute("metonic_cycle")
def metonic_cycle(info: DayInfo) -> Dict[str, Any]:
    y = _hebrew.from_jdn(info.jdn).year
    return {
        "hebrew_year": y,
        "metonic_position": cycle_position(y),
        "metonic_cycle": (y - 1) // METONIC_YEARS,
        "metonic_leap_year": is_leap_year(y),
    }


@attribute("calendar_round")
def calendar_round(info: DayInfo) -> Dict[str, Any]:
    j = info.jdn
    rnd, into = divmod(j - MAYAN_EPOCH, CALENDAR_ROUND_DAYS)
    return {
        "calendar_round": rnd,
        "calendar_round_day": into,
        "calendar_round_year": into // 365,
        "tzolkin": _tzolkin.label(_tzolkin.from_jdn(j)),
        "haab": _haab.label(_haab.from_jdn(j)),
    }


@attribute("long_count")
def long_count(info: DayInfo) -> Dict[str, Any]:
    d = _long_count.from_jdn(info.jdn)
    b, k, t, u, kin = _long_count.units(d)
    into_katun = t * 360 + u * 20 + kin
    return {
        "long_count": f"{b}.{k}.{t}.{u}.{kin}",
        "katun_global": b * 20 + k,
        "days_into_katun": into_katun,
        "days_into_baktun": k * 7200 + into_katun,
    }


from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, Union

from .errors import ConverterNotFoundError


class CalendarKind(str, Enum):
    GREGORIAN = "gregorian"
    JULIAN = "julian"
    ISLAMIC = "islamic"
    HEBREW = "hebrew"
    PERSIAN = "persian"
    CHINESE = "chinese"
    ETHIOPIAN = "ethiopian"
    COPTIC = "coptic"
    INDIAN_SAKA = "indian-saka"
    BAHAI = "bahai"
    THAI_BUDDHIST = "thai-buddhist"
    MAYAN_TZOLKIN = "mayan-tzolkin"
    MAYAN_HAAB = "mayan-haab"
    MAYAN_LONGCOUNT = "mayan-longcount"
    CHEROKEE = "cherokee"
    IROQUOIS = "iroquois"
    AZTEC_XIUHPOHUALLI = "aztec-xiuhpohualli"

    def __str__(self) -> str:
        return self.value


KindLike = Union[CalendarKind, str]


def as_kind(value: KindLike) -> CalendarKind:
    """Coerce a kind or its string value; unknown names raise ConverterNotFoundError."""
    if isinstance(value, CalendarKind):
        return value
    try:
        return CalendarKind(str(value).strip().lower())
    except ValueError:
        raise ConverterNotFoundError(value) from None


CalendarType = Literal["solar", "lunar", "lunisolar", "other"]


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    calendar: CalendarKind
    era: str = ""


@dataclass(frozen=True)
class CalendarInfo:
    kind: CalendarKind
    name: str
    native_name: str
    type: CalendarType
    months: Tuple[int, int]
    days_in_year: Tuple[int, int]
    era_start: int
    era_name: str
    leap_year_rule: str
    epoch_jdn: int


@dataclass(frozen=True)
class DayInfo:
    jdn: int
    gregorian: CalendarDate
    date: CalendarDate
    attributes: Optional[Dict[str, Any]] = None


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"


@dataclass(frozen=True)
class TimeRange:
    """Gregorian-anchored period expressed in a target calendar."""
    granularity: Granularity
    start_jdn: int
    end_jdn: int
    start: CalendarDate
    end: CalendarDate
    label: str

    @property
    def days(self) -> int:
        return self.end_jdn - self.start_jdn + 1

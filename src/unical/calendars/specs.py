"""
unical.calendars.specs
----------------------
Static descriptors for every calendar kind. ``epoch_jdn`` is the JDN each
converter counts from.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.types import CalendarInfo, CalendarKind as K
from ..core.time import gregorian_to_jdn, julian_to_jdn


# ============================================================
# EPOCHS
# ============================================================

GREGORIAN_EPOCH = gregorian_to_jdn(1, 1, 1)           # 1721426
JULIAN_EPOCH = julian_to_jdn(1, 1, 1)                 # 1721424
ISLAMIC_EPOCH = 1948439
HEBREW_EPOCH = 347997
PERSIAN_EPOCH = 1948318
CHINESE_EPOCH = gregorian_to_jdn(1900, 2, 5)          # reference point, not year 1
ETHIOPIAN_EPOCH = 1724221
COPTIC_EPOCH = 1825030
SAKA_EPOCH = gregorian_to_jdn(79, 3, 22)
BAHAI_EPOCH = gregorian_to_jdn(1844, 3, 21)           # 2394647
THAI_EPOCH = gregorian_to_jdn(-542, 1, 1)
MAYAN_EPOCH = 584283                                  # GMT correlation, -3113-08-11 Gregorian

_ALL = (
    CalendarInfo(K.GREGORIAN, "Gregorian", "Gregorian", "solar", (12, 12), (365, 366), 1, "CE",
                 "Every 4 years, except century years unless divisible by 400", GREGORIAN_EPOCH),
    CalendarInfo(K.JULIAN, "Julian", "Julian", "solar", (12, 12), (365, 366), 1, "CE",
                 "Every 4 years", JULIAN_EPOCH),
    CalendarInfo(K.ISLAMIC, "Islamic (Hijri)", "التقويم الهجري", "lunar", (12, 12), (354, 355), 622, "AH",
                 "30-year cycle with 11 leap years", ISLAMIC_EPOCH),
    CalendarInfo(K.HEBREW, "Hebrew (Jewish)", "הלוח העברי", "lunisolar", (12, 13), (353, 385), -3761, "AM",
                 "19-year Metonic cycle", HEBREW_EPOCH),
    CalendarInfo(K.PERSIAN, "Persian (Jalali)", "گاهشماری جلالی", "solar", (12, 12), (365, 366), 622, "SH",
                 "33-year cycle with 8 leap years", PERSIAN_EPOCH),
    CalendarInfo(K.CHINESE, "Chinese", "农历", "lunisolar", (12, 13), (353, 385), 1, "CE",
                 "19-year cycle with 7 leap months (approximation)", CHINESE_EPOCH),
    CalendarInfo(K.ETHIOPIAN, "Ethiopian", "የኢትዮጵያ ዘመን አቆጣጠር", "solar", (13, 13), (365, 366), 8, "EE",
                 "Every 4 years (year mod 4 = 3)", ETHIOPIAN_EPOCH),
    CalendarInfo(K.COPTIC, "Coptic", "ⲛⲓⲙⲉⲧⲟⲩⲛⲓⲙⲓⲛⲓ", "solar", (13, 13), (365, 366), 284, "AM",
                 "Every 4 years (year mod 4 = 3)", COPTIC_EPOCH),
    CalendarInfo(K.INDIAN_SAKA, "Indian National (Saka)", "शक संवत", "solar", (12, 12), (365, 366), 78, "Saka",
                 "Same as the Gregorian year it begins in", SAKA_EPOCH),
    CalendarInfo(K.BAHAI, "Baháʼí", "Badíʻ", "solar", (20, 20), (365, 366), 1844, "BE",
                 "Naw-Rúz fixed at March 21; Ayyám-i-Há absorbs the leap day", BAHAI_EPOCH),
    CalendarInfo(K.THAI_BUDDHIST, "Thai Buddhist", "พุทธศักราช", "solar", (12, 12), (365, 366), -543, "BE",
                 "Same as Gregorian", THAI_EPOCH),
    CalendarInfo(K.MAYAN_TZOLKIN, "Mayan Tzolk'in", "Tzolk'in", "other", (20, 20), (260, 260), -3114, "",
                 "260-day cycle", MAYAN_EPOCH),
    CalendarInfo(K.MAYAN_HAAB, "Mayan Haab'", "Haab'", "solar", (19, 19), (365, 365), -3114, "",
                 "Fixed 365-day year", MAYAN_EPOCH),
    CalendarInfo(K.MAYAN_LONGCOUNT, "Mayan Long Count", "Long Count", "other", (20, 20), (144000, 144000), -3114, "",
                 "Linear count from epoch", MAYAN_EPOCH),
    CalendarInfo(K.CHEROKEE, "Cherokee", "ᎠᏂᏴᏫᏯᎢ", "lunisolar", (12, 12), (365, 366), 1, "CE",
                 "Same as Gregorian (adapted 12-month system)", GREGORIAN_EPOCH),
    CalendarInfo(K.IROQUOIS, "Iroquois (Haudenosaunee)", "Haudenosaunee", "lunisolar", (13, 13), (365, 366), 1, "CE",
                 "13 moons of 28 days over the Gregorian year", GREGORIAN_EPOCH),
    CalendarInfo(K.AZTEC_XIUHPOHUALLI, "Aztec Xiuhpohualli", "Xiuhpohualli", "solar", (19, 19), (365, 365), -3114, "",
                 "Fixed 365-day year (no leap years)", MAYAN_EPOCH),
)

CALENDAR_INFO: Mapping[K, CalendarInfo] = MappingProxyType({info.kind: info for info in _ALL})


def era_for(kind: K, year: int) -> str:
    """Era label for a stored year: 'BCE' for year <= 0, else the calendar's era name."""
    if year <= 0:
        return "BCE"
    return CALENDAR_INFO[kind].era_name

"""
unical.calendars.factory
------------------------
Maps every CalendarKind to the class that implements it.
"""

from __future__ import annotations
from typing import Callable, Dict

from ..core.engine import CalendarConverter
from ..core.types import CalendarKind as K, KindLike, as_kind
from .chinese import ChineseCalendar
from .gregorian import CherokeeCalendar, GregorianCalendar, IroquoisCalendar, JulianCalendar, ThaiBuddhistCalendar
from .hebrew import HebrewCalendar
from .islamic import IslamicCalendar
from .mayan import AztecXiuhpohualliCalendar, HaabCalendar, LongCountCalendar, TzolkinCalendar
from .national import BahaiCalendar, IndianSakaCalendar
from .solar import CopticCalendar, EthiopianCalendar, PersianCalendar

CONVERTER_CLASSES: Dict[K, Callable[[], CalendarConverter]] = {
    K.GREGORIAN: GregorianCalendar,
    K.JULIAN: JulianCalendar,
    K.ISLAMIC: IslamicCalendar,
    K.HEBREW: HebrewCalendar,
    K.PERSIAN: PersianCalendar,
    K.CHINESE: ChineseCalendar,
    K.ETHIOPIAN: EthiopianCalendar,
    K.COPTIC: CopticCalendar,
    K.INDIAN_SAKA: IndianSakaCalendar,
    K.BAHAI: BahaiCalendar,
    K.THAI_BUDDHIST: ThaiBuddhistCalendar,
    K.MAYAN_TZOLKIN: TzolkinCalendar,
    K.MAYAN_HAAB: HaabCalendar,
    K.MAYAN_LONGCOUNT: LongCountCalendar,
    K.CHEROKEE: CherokeeCalendar,
    K.IROQUOIS: IroquoisCalendar,
    K.AZTEC_XIUHPOHUALLI: AztecXiuhpohualliCalendar,
}


def make_converter(kind: KindLike) -> CalendarConverter:
    """The universal entry point."""
    return CONVERTER_CLASSES[as_kind(kind)]()

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.engine import CalendarConverter, CalendarRegistry
from .core.types import CalendarDate, CalendarInfo, CalendarKind, DayInfo, Granularity, KindLike, TimeRange
from .core.time import from_jdn as _date_from_jdn, to_jdn as _date_to_jdn
from .attributes.registry import compute_attributes
from . import ranges as _ranges

logger = logging.getLogger(__name__)

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def get_registry() -> CalendarRegistry:
    return _reg()

def _reg(registry: Optional[CalendarRegistry] = None) -> CalendarRegistry:
    if registry is not None:
        return registry
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def register_calendar(
    kind: KindLike, converter: CalendarConverter, *, overwrite: bool = False
) -> CalendarRegistry:
    """Swap the default registry for one that also holds ``converter``."""
    reg = _reg().with_converter(kind, converter, overwrite=overwrite)
    set_registry(reg)
    logger.debug("registered %r for %s", converter, kind)
    return reg

# ============================================================
# Lookup
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar_converter(kind: KindLike, *, registry: Optional[CalendarRegistry] = None) -> CalendarConverter:
    return _reg(registry).get(kind)

def calendar_info(kind: KindLike, *, registry: Optional[CalendarRegistry] = None) -> CalendarInfo:
    return _reg(registry).get(kind).info()

def calendar_epoch(kind: KindLike) -> int:
    return calendar_info(kind).epoch_jdn

# ============================================================
# Conversion
# ============================================================

def to_jdn(year: int, month: int, day: int, *, calendar: KindLike = "gregorian",
           registry: Optional[CalendarRegistry] = None) -> int:
    return _reg(registry).get(calendar).to_jdn(year, month, day)

def from_jdn(jdn: int, *, calendar: KindLike = "gregorian",
             registry: Optional[CalendarRegistry] = None) -> CalendarDate:
    return _reg(registry).get(calendar).from_jdn(jdn)

def convert_date(d: CalendarDate, target: KindLike, *, registry: Optional[CalendarRegistry] = None) -> CalendarDate:
    return _reg(registry).convert(d, target)

def date_to_calendar_date(d: date, kind: KindLike = "gregorian", *,
                          registry: Optional[CalendarRegistry] = None) -> CalendarDate:
    return _reg(registry).get(kind).from_jdn(_date_to_jdn(d))

def calendar_date_to_date(d: CalendarDate, *, registry: Optional[CalendarRegistry] = None) -> date:
    """Raises ValueError when the day falls outside datetime.date's range."""
    jdn = _reg(registry).get(d.calendar).to_jdn(d.year, d.month, d.day)
    return _date_from_jdn(jdn)

# ============================================================
# Text
# ============================================================

def format_calendar_date(d: CalendarDate, pattern: str = "YYYY-MM-DD", *,
                         registry: Optional[CalendarRegistry] = None) -> str:
    return _reg(registry).get(d.calendar).format(d, pattern)

def parse_calendar_date(text: str, kind: KindLike = "gregorian", *,
                        registry: Optional[CalendarRegistry] = None) -> Optional[CalendarDate]:
    return _reg(registry).get(kind).parse(text)

# ============================================================
# Time ranges
# ============================================================

def time_range(anchor: _ranges.Anchor, granularity: Union[Granularity, str] = "day",
               calendar: KindLike = "gregorian", *, registry: Optional[CalendarRegistry] = None) -> TimeRange:
    return _ranges.time_range(_reg(registry).get(calendar), anchor, granularity)

def time_range_label(anchor: _ranges.Anchor, granularity: Union[Granularity, str] = "day",
                     calendar: KindLike = "gregorian", *, registry: Optional[CalendarRegistry] = None) -> str:
    return _ranges.range_label(_reg(registry).get(calendar), _ranges.anchor_jdn(anchor), granularity)

def canonical_date(anchor: _ranges.Anchor, granularity: Union[Granularity, str] = "day",
                   calendar: KindLike = "gregorian", *, registry: Optional[CalendarRegistry] = None) -> CalendarDate:
    return _ranges.canonical_date(_reg(registry).get(calendar), anchor, granularity)

def navigate(anchor: _ranges.Anchor, granularity: Union[Granularity, str] = "day", steps: int = 1, *,
             registry: Optional[CalendarRegistry] = None) -> CalendarDate:
    """Gregorian date ``steps`` periods away from ``anchor``."""
    return _reg(registry).get(CalendarKind.GREGORIAN).from_jdn(_ranges.navigate(anchor, granularity, steps))

# ============================================================
# Day info
# ============================================================

def day_info(
    anchor: _ranges.Anchor,
    *,
    calendar: KindLike = "gregorian",
    attributes: Sequence[str] = (),
    registry: Optional[CalendarRegistry] = None,
) -> DayInfo:
    reg = _reg(registry)
    jdn = _ranges.anchor_jdn(anchor)
    info = DayInfo(
        jdn=jdn,
        gregorian=reg.get(CalendarKind.GREGORIAN).from_jdn(jdn),
        date=reg.get(calendar).from_jdn(jdn),
    )
    if attributes:
        attrs: Dict[str, Any] = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

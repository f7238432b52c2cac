from __future__ import annotations
from unical.core.engine import CalendarRegistry
from unical.core.types import CalendarKind
from unical.calendars.factory import make_converter
from unical.calendars.names import MONTH_NAMES, MONTH_NAMES_SHORT
from unical.calendars.specs import CALENDAR_INFO


def build_registry() -> CalendarRegistry:
    missing = [
        k.value for k in CalendarKind
        if k not in CALENDAR_INFO or k not in MONTH_NAMES or k not in MONTH_NAMES_SHORT
    ]
    if missing:
        raise RuntimeError(f"Calendar tables incomplete for: {missing}")
    return CalendarRegistry({k: make_converter(k) for k in CalendarKind})

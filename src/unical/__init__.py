"""unical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar_converter,
    get_registry,
    set_registry,
    register_calendar,
    calendar_info,
    calendar_epoch,
    to_jdn,
    from_jdn,
    convert_date,
    date_to_calendar_date,
    calendar_date_to_date,
    format_calendar_date,
    parse_calendar_date,
    time_range,
    time_range_label,
    canonical_date,
    navigate,
    day_info,
)
from .calendars.specs import CALENDAR_INFO
from .core.errors import UnicalError, InvalidDateError, ConverterNotFoundError
from .core.types import CalendarDate, CalendarInfo, CalendarKind, DayInfo, Granularity, TimeRange

__all__ = [
    "list_calendars",
    "get_calendar_converter",
    "get_registry",
    "set_registry",
    "register_calendar",
    "calendar_info",
    "calendar_epoch",
    "to_jdn",
    "from_jdn",
    "convert_date",
    "date_to_calendar_date",
    "calendar_date_to_date",
    "format_calendar_date",
    "parse_calendar_date",
    "time_range",
    "time_range_label",
    "canonical_date",
    "navigate",
    "day_info",
    "CALENDAR_INFO",
    "UnicalError",
    "InvalidDateError",
    "ConverterNotFoundError",
    "CalendarDate",
    "CalendarInfo",
    "CalendarKind",
    "DayInfo",
    "Granularity",
    "TimeRange",
]

"""storycal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_engine,
    make_engine,
    register_calendar,
    unregister_calendar,
    story_time_to_date,
    date_to_story_time,
    format_story_time,
    format_age,
    date_info,
    explain,
    load_config,
    dump_config,
)
from .core.errors import CalendarConfigError, StoryCalError, UnknownCalendarError
from .core.types import (
    CalendarConfig,
    DisplayConfig,
    Duration,
    Eras,
    FixedWidthSubdivision,
    ParsedDate,
    StoryTime,
    VariableWidthSubdivision,
)
from .engines.calendar import CalendarEngine
from .engines.specs import CORUSCANT_CALENDAR, SIMPLE_365_CALENDAR

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_engine",
    "make_engine",
    "register_calendar",
    "unregister_calendar",
    "story_time_to_date",
    "date_to_story_time",
    "format_story_time",
    "format_age",
    "date_info",
    "explain",
    "load_config",
    "dump_config",
    "CalendarConfigError",
    "StoryCalError",
    "UnknownCalendarError",
    "CalendarConfig",
    "DisplayConfig",
    "Duration",
    "Eras",
    "FixedWidthSubdivision",
    "ParsedDate",
    "StoryTime",
    "VariableWidthSubdivision",
    "CalendarEngine",
    "CORUSCANT_CALENDAR",
    "SIMPLE_365_CALENDAR",
]

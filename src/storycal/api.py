from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .core.config_io import dump_config, load_config
from .core.engine import EngineRegistry
from .core.types import CalendarConfig, ParsedDate, StoryTime
from .attributes.registry import compute_attributes
from .engines.calendar import CalendarEngine
from .engines.factory import make_engine as _make_engine
from .engines.specs import DEFAULT_CALENDAR

_registry: Optional[EngineRegistry] = None

ConfigLike = Union[CalendarConfig, Mapping[str, Any], str]

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_engine(calendar: str = DEFAULT_CALENDAR) -> CalendarEngine:
    return _reg().get(calendar)

def make_engine(config: ConfigLike, *, validate: bool = True) -> CalendarEngine:
    return _make_engine(config, validate=validate)

def register_calendar(config: ConfigLike, *, overwrite: bool = False) -> CalendarEngine:
    """Validate a config, build its engine and cache it under the config id."""
    engine = _make_engine(config)
    _reg().register(engine.id, engine, overwrite=overwrite)
    return engine

def unregister_calendar(calendar: str) -> None:
    _reg().unregister(calendar)

def story_time_to_date(time: StoryTime, *, calendar: str = DEFAULT_CALENDAR) -> ParsedDate:
    return _reg().get(calendar).story_time_to_date(time)

def date_to_story_time(date: ParsedDate, *, calendar: str = DEFAULT_CALENDAR) -> StoryTime:
    return _reg().get(calendar).date_to_story_time(date)

def format_story_time(
    time: StoryTime,
    *,
    calendar: str = DEFAULT_CALENDAR,
    include_time: Optional[bool] = None,
) -> str:
    return _reg().get(calendar).format_story_time(time, include_time)

def format_age(birth: StoryTime, current: StoryTime, *, calendar: str = DEFAULT_CALENDAR) -> str:
    return _reg().get(calendar).format_age(birth, current)

def date_info(
    time: StoryTime,
    *,
    calendar: str = DEFAULT_CALENDAR,
    attributes: Sequence[str] = (),
) -> Dict[str, Any]:
    eng = _reg().get(calendar)
    date = eng.story_time_to_date(time)
    out: Dict[str, Any] = {
        "calendar": eng.id,
        "time": time,
        "date": date,
        "formatted": eng.format_date(date, eng.config.display.include_time_by_default),
    }
    if attributes:
        out["attributes"] = compute_attributes(eng, date, attributes)
    return out

def explain(time: StoryTime, *, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).explain(time)

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
]

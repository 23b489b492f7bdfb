from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Any, Dict, List, Optional, Protocol

from .errors import UnknownCalendarError
from .types import CalendarConfig, ParsedDate, StoryTime

logger = logging.getLogger(__name__)

class CalendarEngine(Protocol):
    config: CalendarConfig
    def info(self) -> Dict[str, Any]: ...
    def story_time_to_date(self, time: StoryTime) -> ParsedDate: ...
    def date_to_story_time(self, date: ParsedDate) -> StoryTime: ...
    def format_story_time(self, time: StoryTime, include_time: Optional[bool] = None) -> str: ...
    def explain(self, time: StoryTime) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine] = field(default_factory=dict)

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
        logger.debug("registered calendar %r", name)

    def unregister(self, name: str) -> None:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        del self._engines[name]
        logger.debug("unregistered calendar %r", name)

    def __contains__(self, name: str) -> bool:
        return name in self._engines

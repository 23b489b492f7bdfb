"""
storycal.engines.batch
----------------------
Vectorised StoryTime decomposition for timeline rendering. Produces the same
fields as TimeConverter/SubdivisionCalculator, one numpy array per field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import numpy as np

from storycal.core.types import (
    CalendarConfig,
    FixedWidthSubdivision,
    ParsedDate,
    StoryTime,
    Subdivision,
    VariableWidthSubdivision,
)


@dataclass(frozen=True)
class DateFields:
    year: np.ndarray
    day_of_year: np.ndarray
    hour: np.ndarray
    minute: np.ndarray
    subdivisions: Dict[str, np.ndarray]

    def __len__(self) -> int:
        return int(self.year.shape[0])

    def date_at(self, i: int) -> ParsedDate:
        return ParsedDate(
            year=int(self.year[i]),
            day_of_year=int(self.day_of_year[i]),
            hour=int(self.hour[i]),
            minute=int(self.minute[i]),
            subdivisions={sid: int(units[i]) for sid, units in self.subdivisions.items()},
        )


def _locate_units(sub: Subdivision, offset: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    zeros = np.zeros_like(offset)
    if isinstance(sub, FixedWidthSubdivision):
        if not isinstance(sub.days_per_unit, int) or sub.days_per_unit <= 0:
            return zeros, zeros
        idx = np.floor_divide(offset, sub.days_per_unit)
        return idx, idx * sub.days_per_unit

    if isinstance(sub, VariableWidthSubdivision) and sub.days_per_unit:
        ends = np.cumsum(np.asarray(sub.days_per_unit[: sub.count], dtype=np.int64))
        idx = np.searchsorted(ends, offset, side="right")
        # past the configured span: unit index 0, nothing consumed
        beyond = idx >= ends.shape[0]
        idx = np.where(beyond, 0, idx)
        starts = np.concatenate(([0], ends[:-1]))
        consumed = np.where(beyond, 0, starts[idx])
        return idx.astype(np.int64), consumed.astype(np.int64)

    return zeros, zeros


def _visit(sub: Subdivision, offset: np.ndarray, out: Dict[str, np.ndarray]) -> None:
    idx, consumed = _locate_units(sub, offset)
    out[sub.id] = idx + 1
    inner = offset - consumed
    for child in sub.subdivisions:
        _visit(child, inner, out)


def story_times_to_fields(config: CalendarConfig, times: Iterable[StoryTime]) -> DateFields:
    """Decompose many StoryTime values at once (int64 domain)."""
    t = np.asarray(times if isinstance(times, np.ndarray) else list(times), dtype=np.int64)
    adjusted = t - np.int64(config.epoch_offset * config.minutes_per_year)

    # np.floor_divide / np.mod floor toward -inf like Python's divmod
    year, rem = np.divmod(adjusted, config.minutes_per_year)
    day0, rem = np.divmod(rem, config.minutes_per_day)
    hour, minute = np.divmod(rem, config.minutes_per_hour)
    day_of_year = day0 + 1

    subdivisions: Dict[str, np.ndarray] = {}
    for sub in config.subdivisions:
        _visit(sub, day0, subdivisions)

    return DateFields(
        year=year,
        day_of_year=day_of_year,
        hour=hour,
        minute=minute,
        subdivisions=subdivisions,
    )


def format_story_times(engine, times: Iterable[StoryTime], include_time: Optional[bool] = None) -> List[str]:
    """Format many StoryTime values with one engine."""
    if include_time is None:
        include_time = engine.config.display.include_time_by_default
    fields = story_times_to_fields(engine.config, times)
    return [engine.format_date(fields.date_at(i), include_time) for i in range(len(fields))]

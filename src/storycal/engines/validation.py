"""
storycal.engines.validation
---------------------------
Eager structural checks on a CalendarConfig. All problems are collected and
reported together in a single CalendarConfigError.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Set

from storycal.core.errors import CalendarConfigError
from storycal.core.types import (
    CalendarConfig,
    FixedWidthSubdivision,
    Subdivision,
    VariableWidthSubdivision,
)

logger = logging.getLogger(__name__)


def _positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _check_subdivision(
    sub: Subdivision,
    parent_spans: Sequence[int],
    parent: str,
    seen: Set[str],
    problems: List[str],
) -> None:
    if not isinstance(sub.id, str) or not sub.id:
        problems.append(f"subdivision under {parent} has an empty id")
        return
    where = f"subdivision '{sub.id}'"
    if sub.id in seen:
        problems.append(f"{where}: duplicate id")
    seen.add(sub.id)

    if not _positive_int(sub.count):
        problems.append(f"{where}: count must be a positive integer, got {sub.count!r}")
        return
    if sub.labels and len(sub.labels) != sub.count:
        problems.append(f"{where}: {len(sub.labels)} labels for {sub.count} units")
    if sub.label_format is not None and not isinstance(sub.label_format, str):
        problems.append(f"{where}: label_format must be a string")

    if isinstance(sub, FixedWidthSubdivision):
        if not _positive_int(sub.days_per_unit):
            problems.append(f"{where}: days_per_unit must be a positive integer, got {sub.days_per_unit!r}")
            return
        for span in parent_spans:
            if sub.span > span:
                problems.append(
                    f"{where}: {sub.count} x {sub.days_per_unit} days exceeds the {span}-day span of {parent}"
                )
                break
        child_spans = [sub.days_per_unit]
    elif isinstance(sub, VariableWidthSubdivision):
        lengths = sub.days_per_unit
        if len(lengths) != sub.count:
            problems.append(f"{where}: {len(lengths)} unit lengths for {sub.count} units")
            return
        if not all(_positive_int(d) for d in lengths):
            problems.append(f"{where}: unit lengths must be positive integers")
            return
        for span in parent_spans:
            if sub.span != span:
                problems.append(f"{where}: unit lengths sum to {sub.span}, but {parent} spans {span} days")
                break
        child_spans = sorted(set(lengths))
    else:
        problems.append(f"{where}: unknown sizing type {type(sub).__name__}")
        return

    for child in sub.subdivisions:
        _check_subdivision(child, child_spans, f"a unit of '{sub.id}'", seen, problems)


def collect_problems(config: CalendarConfig) -> List[str]:
    problems: List[str] = []
    for name in ("minutes_per_hour", "hours_per_day", "days_per_year"):
        value = getattr(config, name)
        if not _positive_int(value):
            problems.append(f"{name} must be a positive integer, got {value!r}")
    if not isinstance(config.epoch_offset, int) or isinstance(config.epoch_offset, bool):
        problems.append(f"epoch_offset must be an integer, got {config.epoch_offset!r}")
    if problems:
        # spans below are meaningless without the scalar constants
        return problems

    seen: Set[str] = set()
    for sub in config.subdivisions:
        _check_subdivision(sub, [config.days_per_year], "the year", seen, problems)

    for sid, day_map in config.special_days.items():
        if sid not in seen:
            problems.append(f"special days reference unknown subdivision '{sid}'")
        for day in day_map:
            if not _positive_int(day):
                problems.append(f"special day number {day!r} for '{sid}' must be a positive integer")
    return problems


def validate_config(config: CalendarConfig) -> CalendarConfig:
    """Raise CalendarConfigError unless the config is well-formed."""
    problems = collect_problems(config)
    if problems:
        logger.debug("calendar %r rejected: %d problem(s)", config.id, len(problems))
        raise CalendarConfigError(problems, calendar_id=config.id)
    return config


def is_valid(config: CalendarConfig) -> bool:
    return not collect_problems(config)

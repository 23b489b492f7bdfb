"""
storycal.engines.subdivisions
-----------------------------
Walks the subdivision tree of a calendar. Every node is evaluated against
the day offset inside its parent unit; siblings never consume each other's
days.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from storycal.core.types import (
    FixedWidthSubdivision,
    Subdivision,
    VariableWidthSubdivision,
)


def locate_unit(sub: Subdivision, offset: int) -> Tuple[int, int]:
    """
    Returns (unit_index, days_consumed) for a 0-indexed day offset.

    Ill-formed sizing yields (0, 0) instead of raising.
    """
    if isinstance(sub, FixedWidthSubdivision):
        width = sub.days_per_unit
        if not isinstance(width, int) or width <= 0:
            return 0, 0
        unit_index = offset // width
        return unit_index, unit_index * width

    if isinstance(sub, VariableWidthSubdivision):
        running = 0
        for i, days in enumerate(sub.days_per_unit[: sub.count]):
            if not isinstance(days, int):
                break
            if running + days > offset:
                return i, running
            running += days

    return 0, 0


def days_before_unit(sub: Subdivision, unit: int) -> int:
    """Total length of the units preceding a 1-indexed unit."""
    if unit <= 1:
        return 0
    if isinstance(sub, FixedWidthSubdivision) and isinstance(sub.days_per_unit, int):
        return (unit - 1) * sub.days_per_unit
    if isinstance(sub, VariableWidthSubdivision):
        return sum(d for d in sub.days_per_unit[: unit - 1] if isinstance(d, int))
    return 0


class SubdivisionCalculator:
    def __init__(self, subdivisions: Sequence[Subdivision]):
        self.subdivisions = tuple(subdivisions)
        # id -> chain of nodes from a top-level subdivision down to the id
        self._paths: Dict[str, Tuple[Subdivision, ...]] = {}
        for path in walk_paths(self.subdivisions):
            # first definition wins, matching a depth-first search
            self._paths.setdefault(path[-1].id, path)

    def __call__(self, day_of_year: int) -> Dict[str, int]:
        return self.calculate(day_of_year)

    def calculate(self, day_of_year: int) -> Dict[str, int]:
        """Map subdivision id -> 1-indexed unit for a 1-indexed day of year."""
        result: Dict[str, int] = {}
        remaining = day_of_year - 1
        for sub in self.subdivisions:
            self._visit(sub, remaining, result)
        return result

    def _visit(self, sub: Subdivision, offset: int, result: Dict[str, int]) -> None:
        unit_index, consumed = locate_unit(sub, offset)
        result[sub.id] = unit_index + 1
        inner = offset - consumed
        for child in sub.subdivisions:
            self._visit(child, inner, result)

    def find(self, subdivision_id: str) -> Optional[Subdivision]:
        path = self._paths.get(subdivision_id)
        return path[-1] if path else None

    def path(self, subdivision_id: str) -> Tuple[Subdivision, ...]:
        return self._paths.get(subdivision_id, ())

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._paths)


def walk_paths(
    subdivisions: Iterable[Subdivision], prefix: Tuple[Subdivision, ...] = ()
) -> Iterator[Tuple[Subdivision, ...]]:
    """Depth-first, pre-order traversal yielding the ancestor chain of each node."""
    for sub in subdivisions:
        path = prefix + (sub,)
        yield path
        yield from walk_paths(sub.subdivisions, path)

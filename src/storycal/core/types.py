from __future__ import annotations
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Tuple, Union

# Minutes since universal time zero
StoryTime = int

EraKey = Literal["positive", "negative"]
HourFormat = Literal["12", "24"]


@dataclass(frozen=True)
class _SubdivisionBase:
    id: str
    name: str
    plural_name: str
    count: int

    @property
    def uses_custom_labels(self) -> bool:
        # use_custom_labels=None means "on whenever labels exist"
        if self.use_custom_labels is False:
            return False
        return bool(self.labels)

    def label_for(self, unit: int) -> Optional[str]:
        """Custom label of a 1-indexed unit, or None when unset or blank."""
        if not self.uses_custom_labels or not (1 <= unit <= len(self.labels)):
            return None
        label = self.labels[unit - 1]
        if not isinstance(label, str) or not label.strip():
            return None
        return label


@dataclass(frozen=True)
class FixedWidthSubdivision(_SubdivisionBase):
    """Units of uniform length, e.g. 7-day weeks."""
    days_per_unit: int = 0
    labels: Tuple[str, ...] = ()
    label_format: Optional[str] = None
    use_custom_labels: Optional[bool] = None
    subdivisions: Tuple["Subdivision", ...] = ()

    def unit_length(self, unit_index: int) -> int:
        return self.days_per_unit

    @property
    def span(self) -> int:
        return self.count * self.days_per_unit


@dataclass(frozen=True)
class VariableWidthSubdivision(_SubdivisionBase):
    """Units with individual lengths, e.g. months."""
    days_per_unit: Tuple[int, ...] = ()
    labels: Tuple[str, ...] = ()
    label_format: Optional[str] = None
    use_custom_labels: Optional[bool] = None
    subdivisions: Tuple["Subdivision", ...] = ()

    def unit_length(self, unit_index: int) -> int:
        return self.days_per_unit[unit_index]

    @property
    def span(self) -> int:
        return sum(self.days_per_unit[: self.count])


Subdivision = Union[FixedWidthSubdivision, VariableWidthSubdivision]


@dataclass(frozen=True)
class Eras:
    positive: str
    negative: str
    zero_label: Optional[str] = None

    def label(self, era: EraKey) -> str:
        return self.positive if era == "positive" else self.negative


@dataclass(frozen=True)
class DisplayConfig:
    default_format: str
    short_format: str
    include_time_by_default: bool = True
    hour_format: HourFormat = "24"


@dataclass(frozen=True)
class CalendarConfig:
    """Pure data payload describing one author-defined calendar."""
    id: str
    name: str
    minutes_per_hour: int
    hours_per_day: int
    days_per_year: int
    eras: Eras
    display: DisplayConfig
    description: str = ""
    epoch_offset: int = 0
    subdivisions: Tuple[Subdivision, ...] = ()
    # subdivision id -> day number -> label; iteration order is precedence
    special_days: Mapping[str, Mapping[int, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "subdivisions", tuple(self.subdivisions))
        frozen_days = {
            sid: MappingProxyType(dict(days)) for sid, days in self.special_days.items()
        }
        object.__setattr__(self, "special_days", MappingProxyType(frozen_days))

    def __hash__(self) -> int:
        # mapping proxies are unhashable; equality ignores their order
        days = frozenset(
            (sid, frozenset(labels.items())) for sid, labels in self.special_days.items()
        )
        return hash((
            self.id,
            self.name,
            self.minutes_per_hour,
            self.hours_per_day,
            self.days_per_year,
            self.eras,
            self.display,
            self.description,
            self.epoch_offset,
            self.subdivisions,
            days,
        ))

    @property
    def minutes_per_day(self) -> int:
        return self.minutes_per_hour * self.hours_per_day

    @property
    def minutes_per_year(self) -> int:
        return self.minutes_per_day * self.days_per_year

    def tweak(self, **kwargs) -> "CalendarConfig":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ParsedDate:
    year: int
    day_of_year: int
    hour: int = 0
    minute: int = 0
    # derived display data; never used when converting back to StoryTime
    subdivisions: Mapping[str, int] = field(default_factory=dict, compare=False)

    @property
    def era(self) -> EraKey:
        return "negative" if self.year < 0 else "positive"

    def replace(self, **changes) -> "ParsedDate":
        return replace(self, **changes)

    def key(self) -> Tuple[int, int, int, int]:
        """Lexicographic ordering key (year, day_of_year, hour, minute)."""
        return (self.year, self.day_of_year, self.hour, self.minute)


@dataclass(frozen=True)
class Duration:
    days: int
    hours: int
    minutes: int

    @property
    def is_negative(self) -> bool:
        return self.days < 0 or self.hours < 0 or self.minutes < 0

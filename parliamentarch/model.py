"""Core data structures for the layout engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, List, Optional, Tuple, Union

from .errors import ConfigurationError

Group = Hashable
Point = Tuple[float, float]
Cell = Tuple[int, int]

DEFAULT_SPAN_ANGLE = 180.0
DEFAULT_SEAT_RADIUS_FACTOR = 0.8


class FillingStrategy(str, Enum):
    """How the seats of a hemicycle are distributed among its rows."""

    # all rows, proportionally to their capacity
    DEFAULT = "default"
    # as few outermost rows as necessary, proportionally to their capacity
    EMPTY_INNER = "empty_inner"
    # outermost rows filled to capacity first
    OUTER_PRIORITY = "outer_priority"

    @classmethod
    def coerce(cls, value: Union["FillingStrategy", str]) -> "FillingStrategy":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            key = _FILLING_STRATEGY_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError(f"invalid filling strategy: {value!r}")


_FILLING_STRATEGY_ALIASES = {"proportional": "default"}


class Area(str, Enum):
    """The four regions of a Westminster diagram, in placement order."""

    SPEAK = "speak"
    OPPOSITION = "opposition"
    GOVERNMENT = "government"
    CROSS = "cross"

    @classmethod
    def coerce(cls, value: Union["Area", str]) -> "Area":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError(f"unknown area: {value!r}")


AREAS: Tuple[Area, ...] = tuple(Area)
WINGS: Tuple[Area, ...] = (Area.OPPOSITION, Area.GOVERNMENT)


@dataclass(frozen=True, eq=False)
class SeatGroup:
    """A party, compared and hashed by identity.

    Two groups sharing a colour are still two distinct groups, which is what
    allows them to be used as mapping keys by the dispatcher.
    """

    color: str
    n_seats: int = 1
    id: Optional[str] = None
    data: Optional[str] = None
    area: Optional[Area] = None

    def __post_init__(self) -> None:
        if self.area is not None:
            object.__setattr__(self, "area", Area.coerce(self.area))


@dataclass
class ArcOptions:
    min_n_rows: int = 0
    filling_strategy: FillingStrategy = FillingStrategy.DEFAULT
    span_angle: float = DEFAULT_SPAN_ANGLE

    def __post_init__(self) -> None:
        self.filling_strategy = FillingStrategy.coerce(self.filling_strategy)


@dataclass
class WestminsterOptions:
    """Options of the Westminster grid search.

    ``wing_n_rows`` and ``cross_n_cols`` are computed automatically when 0.
    ``cozy`` lets parties of the same area share a column (a row for the
    crossbenchers).
    """

    wing_n_rows: int = 0
    cross_n_cols: int = 0
    cozy: bool = True


@dataclass(frozen=True)
class AreaShape:
    n_rows: int
    n_cols: int

    @property
    def capacity(self) -> int:
        return self.n_rows * self.n_cols


@dataclass
class ArcLayout:
    """Seat centres per group on the 2x1 hemicycle canvas."""

    seats: Dict[Group, List[Point]]
    seat_radius: float
    n_rows: int

    @property
    def n_seats(self) -> int:
        return sum(len(points) for points in self.seats.values())


@dataclass
class WestminsterLayout:
    """Grid cells per group per area, relative to each area's top-left corner."""

    seats: Dict[Area, Dict[Group, List[Cell]]]
    shapes: Dict[Area, AreaShape] = field(default_factory=dict)

    @property
    def n_seats(self) -> int:
        return sum(len(cells) for groups in self.seats.values() for cells in groups.values())


__all__ = [
    "Group",
    "Point",
    "Cell",
    "DEFAULT_SPAN_ANGLE",
    "DEFAULT_SEAT_RADIUS_FACTOR",
    "FillingStrategy",
    "Area",
    "AREAS",
    "WINGS",
    "SeatGroup",
    "ArcOptions",
    "WestminsterOptions",
    "AreaShape",
    "ArcLayout",
    "WestminsterLayout",
]

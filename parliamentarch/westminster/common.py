"""Normalisation of the various shapes a Westminster attribution may take."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Mapping, Sequence, Tuple, Union

from ..errors import InvalidInputError
from ..model import AREAS, Area, SeatGroup
from ..validate import ensure_total, validate_group_seats

SeatsPerPartyPerArea = Dict[Area, Dict[Hashable, int]]

AreaEntries = Union[Mapping[Hashable, int], Sequence[Tuple[Hashable, int]], Sequence[SeatGroup]]
WestminsterAttribution = Union[
    Mapping[Union[Area, str], AreaEntries],
    Sequence[SeatGroup],
    Sequence[Tuple[SeatGroup, int]],
]


def _area_entries(entries: AreaEntries) -> Dict[Hashable, int]:
    if isinstance(entries, Mapping):
        return validate_group_seats(entries)
    items = list(entries)
    pairs = []
    for item in items:
        if isinstance(item, SeatGroup):
            pairs.append((item, item.n_seats))
        elif isinstance(item, tuple) and len(item) == 2:
            pairs.append(item)
        else:
            raise InvalidInputError(f"expected a SeatGroup or a (group, seats) pair, got {item!r}")
    return _unique_pairs(pairs)


def _unique_pairs(pairs: Iterable[Tuple[Hashable, int]]) -> Dict[Hashable, int]:
    result: Dict[Hashable, int] = {}
    for group, n_seats in pairs:
        if group in result:
            raise InvalidInputError(f"group {group!r} is listed more than once")
        result[group] = n_seats
    return validate_group_seats(result)


def _area_of(group: object) -> Area:
    area = getattr(group, "area", None)
    if area is None:
        raise InvalidInputError(f"group {group!r} has no area")
    return Area.coerce(area)


def _is_area_key(key: object) -> bool:
    if isinstance(key, Area):
        return True
    return isinstance(key, str) and key.strip().lower() in {area.value for area in AREAS}


def normalize_attribution(attribution: WestminsterAttribution) -> SeatsPerPartyPerArea:
    """Return the seats of each party for each of the four areas.

    Accepted shapes are a mapping from area (member or name) to either a
    ``group -> seats`` mapping, a sequence of ``(group, seats)`` pairs or a
    sequence of :class:`SeatGroup`; or a flat sequence of located
    :class:`SeatGroup` (optionally paired with their number of seats, or as
    the keys of a ``group -> seats`` mapping).
    Missing areas are empty. Party order is kept within each area.
    """

    if isinstance(attribution, Mapping) and all(_is_area_key(key) for key in attribution):
        result: SeatsPerPartyPerArea = {area: {} for area in AREAS}
        for key, entries in attribution.items():
            result[Area.coerce(key)] = _area_entries(entries)
    else:
        pairs = []
        items = attribution.items() if isinstance(attribution, Mapping) else attribution
        for item in items:
            if isinstance(item, SeatGroup):
                pairs.append((item, item.n_seats))
            elif isinstance(item, tuple) and len(item) == 2:
                pairs.append(item)
            else:
                raise InvalidInputError(f"expected a SeatGroup or a (group, seats) pair, got {item!r}")
        result = {
            area: _unique_pairs((group, n) for group, n in pairs if _area_of(group) is area)
            for area in AREAS
        }

    ensure_total(n for groups in result.values() for n in groups.values())
    return result


def seats_per_area(seats: SeatsPerPartyPerArea) -> Dict[Area, int]:
    return {area: sum(seats.get(area, {}).values()) for area in AREAS}


__all__ = [
    "SeatsPerPartyPerArea",
    "WestminsterAttribution",
    "normalize_attribution",
    "seats_per_area",
]

"""Westminster grid search and seat placement.

Disposition, in unit squares:

* the opposition is at the top, the government at the bottom, separated by a
  vertical gap of two squares;
* the speaker sits in a single column at the left of the wings, with no gap;
* the crossbenchers are at the right of the wings, after a one-square gap;
* the speaker and the crossbenchers are vertically centred between the wings.

Both wings get the same number of rows, and all the areas must fit in a
rectangle twice as wide as it is high.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional

from ..errors import InfeasibleLayoutError
from ..logging_utils import apply_debug_logging
from ..model import AREAS, Area, AreaShape, Cell, WestminsterLayout, WestminsterOptions
from ..validate import validate_westminster_options
from .common import SeatsPerPartyPerArea, WestminsterAttribution, normalize_attribution, seats_per_area

logger = logging.getLogger(__name__)

MIN_HALF_WIDTH = 4


@dataclass(frozen=True)
class GridCandidate:
    """One candidate partition of a ``width x height`` rectangle."""

    width: int
    height: int
    wing_rows: int
    wing_cols: int
    cross_rows: int
    cross_cols: int


def _complete(seats: SeatsPerPartyPerArea) -> SeatsPerPartyPerArea:
    return {area: seats.get(area, {}) for area in AREAS}


def _needed_lines(counts: Iterable[int], other_dimension: int) -> int:
    """Number of whole columns (or rows) needed when no two groups share one."""
    counts = [n for n in counts if n > 0]
    if not counts:
        return 0
    if other_dimension <= 0:
        return math.inf  # type: ignore[return-value]
    return sum(math.ceil(n / other_dimension) for n in counts)


def _requested_cross_cols(n_cross: int, requested: int) -> int:
    if n_cross == 0:
        return 0
    return min(requested, n_cross)


def make_candidate(
    width: int,
    seats: SeatsPerPartyPerArea,
    options: WestminsterOptions,
) -> GridCandidate:
    """Derive the shape of every area for a rectangle ``width`` squares wide."""

    totals = seats_per_area(seats)
    n_cross = totals[Area.CROSS]
    height = width // 2

    wing_rows = options.wing_n_rows or height // 2 - 1
    # one column for the speaker
    wing_cols = width - 1
    if n_cross > 0:
        cross_cols = options.cross_n_cols or math.ceil(n_cross / height)
        cross_rows = math.ceil(n_cross / cross_cols)
        # one column for the gap between the wings and the crossbenchers
        wing_cols -= cross_cols + 1
    else:
        cross_rows = cross_cols = 0

    return GridCandidate(width, height, wing_rows, wing_cols, cross_rows, cross_cols)


def does_it_fit(candidate: GridCandidate, seats: SeatsPerPartyPerArea, *, cozy: bool = True) -> bool:
    """Return whether every area of ``seats`` fits in ``candidate``."""

    totals = seats_per_area(seats)
    if (candidate.height < totals[Area.SPEAK]
            or candidate.height < candidate.cross_rows
            or candidate.height < 2 * candidate.wing_rows + 2):
        return False
    if candidate.wing_cols < 0:
        return False
    cross_width = candidate.cross_cols + 1 if candidate.cross_cols > 0 else 0
    if candidate.width < 1 + candidate.wing_cols + cross_width:
        return False

    wing_capacity = candidate.wing_rows * candidate.wing_cols
    if cozy:
        return (totals[Area.OPPOSITION] <= wing_capacity
                and totals[Area.GOVERNMENT] <= wing_capacity
                and totals[Area.CROSS] <= candidate.cross_rows * candidate.cross_cols)

    for wing in (Area.OPPOSITION, Area.GOVERNMENT):
        if _needed_lines(seats[wing].values(), candidate.wing_rows) > candidate.wing_cols:
            return False
    return _needed_lines(seats[Area.CROSS].values(), candidate.cross_cols) <= candidate.cross_rows


def search_bounds(seats: SeatsPerPartyPerArea, options: WestminsterOptions) -> range:
    """Return the candidate widths, in the order they are tried."""

    totals = seats_per_area(seats)
    total = sum(totals.values())
    requested_cross = _requested_cross_cols(totals[Area.CROSS], options.cross_n_cols)
    start = 2 * max(MIN_HALF_WIDTH, totals[Area.SPEAK], requested_cross)
    stop = max(8 * total, start + 1) + 4 * options.wing_n_rows
    return range(start, stop)


def find_grid(
    seats: SeatsPerPartyPerArea,
    options: Optional[WestminsterOptions] = None,
) -> GridCandidate:
    """Find the narrowest grid holding every area; the first fitting width wins."""

    options = options or WestminsterOptions()
    validate_westminster_options(options)
    seats = _complete(seats)

    widths = search_bounds(seats, options)
    for width in widths:
        candidate = make_candidate(width, seats, options)
        if does_it_fit(candidate, seats, cozy=options.cozy):
            logger.debug("Accepted grid %s after %d candidate(s)", candidate, width - widths.start + 1)
            return candidate

    raise InfeasibleLayoutError(
        f"no grid fits {seats_per_area(seats)} with {options} "
        f"(tried widths {widths.start} to {widths.stop - 1})"
    )


def get_area_shapes(
    seats: SeatsPerPartyPerArea,
    options: Optional[WestminsterOptions] = None,
) -> Dict[Area, AreaShape]:
    """Return the number of rows and columns of every area."""

    candidate = find_grid(seats, options)
    return {
        Area.SPEAK: AreaShape(seats_per_area(seats)[Area.SPEAK], 1),
        Area.OPPOSITION: AreaShape(candidate.wing_rows, candidate.wing_cols),
        Area.GOVERNMENT: AreaShape(candidate.wing_rows, candidate.wing_cols),
        Area.CROSS: AreaShape(candidate.cross_rows, candidate.cross_cols),
    }


def _fill_columns(
    parties: Dict[Hashable, int],
    n_rows: int,
    *,
    upwards: bool,
    cozy: bool,
) -> Dict[Hashable, List[Cell]]:
    # column by column, starting from the row next to the gap between the wings
    rows = list(range(n_rows))
    if upwards:
        rows.reverse()
    result: Dict[Hashable, List[Cell]] = {}
    x = y = 0
    for party, n_seats in parties.items():
        cells: List[Cell] = []
        for _ in range(n_seats):
            cells.append((x, rows[y]))
            y += 1
            if y >= n_rows:
                y = 0
                x += 1
        result[party] = cells
        if not cozy and y > 0:
            y = 0
            x += 1
    return result


def _fill_rows(parties: Dict[Hashable, int], n_cols: int, *, cozy: bool) -> Dict[Hashable, List[Cell]]:
    result: Dict[Hashable, List[Cell]] = {}
    x = y = 0
    for party, n_seats in parties.items():
        cells: List[Cell] = []
        for _ in range(n_seats):
            cells.append((x, y))
            x += 1
            if x >= n_cols:
                x = 0
                y += 1
        result[party] = cells
        if not cozy and x > 0:
            x = 0
            y += 1
    return result


def place_seats(
    seats: SeatsPerPartyPerArea,
    shapes: Dict[Area, AreaShape],
    *,
    cozy: bool = True,
) -> Dict[Area, Dict[Hashable, List[Cell]]]:
    """Assign a ``(column, row)`` cell to every seat of every area.

    Cells are relative to the top-left corner of their area. When not cozy,
    each party starts on a fresh column (a fresh row for the crossbenchers),
    leaving the end of the previous one empty.
    """

    seats = _complete(seats)
    speak: Dict[Hashable, List[Cell]] = {}
    speak_y = 0
    for party, n_seats in seats[Area.SPEAK].items():
        speak[party] = [(0, speak_y + i) for i in range(n_seats)]
        speak_y += n_seats

    return {
        Area.SPEAK: speak,
        Area.OPPOSITION: _fill_columns(
            seats[Area.OPPOSITION], shapes[Area.OPPOSITION].n_rows, upwards=True, cozy=cozy),
        Area.GOVERNMENT: _fill_columns(
            seats[Area.GOVERNMENT], shapes[Area.GOVERNMENT].n_rows, upwards=False, cozy=cozy),
        Area.CROSS: _fill_rows(seats[Area.CROSS], shapes[Area.CROSS].n_cols, cozy=cozy),
    }


def get_seat_coordinates_per_area(
    attribution: WestminsterAttribution,
    options: Optional[WestminsterOptions] = None,
) -> WestminsterLayout:
    """Compute the grid shapes and the cell of every seat of ``attribution``."""

    options = options or WestminsterOptions()
    seats = normalize_attribution(attribution)
    shapes = get_area_shapes(seats, options)
    layout = WestminsterLayout(seats=place_seats(seats, shapes, cozy=options.cozy), shapes=shapes)
    logger.info(
        "Laid out %d seat(s): %s",
        layout.n_seats,
        ", ".join(f"{area.value}={shape.n_rows}x{shape.n_cols}" for area, shape in shapes.items()),
    )
    return layout


apply_debug_logging(globals(), logger=logger, quiet=("place_seats",))


__all__ = [
    "GridCandidate",
    "make_candidate",
    "does_it_fit",
    "search_bounds",
    "find_grid",
    "get_area_shapes",
    "place_seats",
    "get_seat_coordinates_per_area",
]

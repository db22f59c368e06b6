"""Hemicycle geometry: row sizing, seat distribution and seat centres.

The diagram lives on a canvas 2 wide and 1 high, the x axis pointing right and
the y axis pointing up, with the centre of the hemicycle at ``(1, 0)``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

import numpy as np

from .dispatch import Attribution, dispatch_seats, group_seats_from_attribution
from .errors import ConfigurationError, InvalidInputError
from .logging_utils import apply_debug_logging
from .model import (
    DEFAULT_SEAT_RADIUS_FACTOR,
    DEFAULT_SPAN_ANGLE,
    ArcLayout,
    ArcOptions,
    FillingStrategy,
    Point,
)
from .validate import ensure_seat_count, validate_arc_options

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_row_thickness(n_rows: int) -> float:
    """Return the thickness of a row, half the distance between two rows.

    Splitting the half-disk into a half-disk of half the radius and the
    half-annulus around it, the innermost row sits on the border between the
    two and the outermost row lies inside the annulus. Along the bottom edge
    that makes ``n_rows - .5`` rows on each side plus a void of the same width
    again, hence ``4 * n_rows - 2`` thicknesses across the radius. A seat
    drawn with this radius touches its neighbours of the adjacent rows.
    """

    return 1 / (4 * n_rows - 2)


def get_rows_from_n_rows(n_rows: int, span_angle: float = DEFAULT_SPAN_ANGLE) -> List[int]:
    """Return the maximal number of seats of each row, from inner to outer."""

    thickness = get_row_thickness(n_rows)
    radian_span_angle = math.pi * span_angle / 180
    row_arc_radii = .5 + 2 * np.arange(n_rows) * thickness
    capacities = np.floor(radian_span_angle * row_arc_radii / (2 * thickness))
    return [int(cap) for cap in capacities]


def get_n_rows_from_n_seats(n_seats: int, span_angle: float = DEFAULT_SPAN_ANGLE) -> int:
    """Return the minimal number of rows able to hold ``n_seats`` seats."""

    validate_arc_options(ArcOptions(span_angle=span_angle))
    n_rows = 1
    while sum(get_rows_from_n_rows(n_rows, span_angle)) < n_seats:
        n_rows += 1
    return n_rows


def _proportional(n_seats: int, capacities: Sequence[int]) -> List[int]:
    # Rounding against the running remainder keeps every row within its
    # capacity; the last row takes whatever is left.
    if not capacities:
        return []
    seats: List[int] = []
    remaining = n_seats
    remaining_capacity = sum(capacities)
    for cap in capacities[:-1]:
        if remaining_capacity <= 0:
            this_row = 0
        else:
            this_row = _round_half_up(remaining * cap / remaining_capacity)
        seats.append(this_row)
        remaining -= this_row
        remaining_capacity -= cap
    seats.append(remaining)
    return seats


def get_seats_per_row(
    n_seats: int,
    n_rows: int,
    filling_strategy: FillingStrategy = FillingStrategy.DEFAULT,
    span_angle: float = DEFAULT_SPAN_ANGLE,
) -> List[int]:
    """Return how many seats each row holds, from inner to outer."""

    filling_strategy = FillingStrategy.coerce(filling_strategy)
    capacities = get_rows_from_n_rows(n_rows, span_angle)
    if sum(capacities) < n_seats:
        raise InvalidInputError(f"{n_rows} row(s) cannot hold {n_seats} seats")

    if filling_strategy is FillingStrategy.DEFAULT:
        return _proportional(n_seats, capacities)

    if filling_strategy is FillingStrategy.EMPTY_INNER:
        starting_row = 0
        while sum(capacities[starting_row + 1:]) >= n_seats and starting_row < n_rows - 1:
            starting_row += 1
        return [0] * starting_row + _proportional(n_seats, capacities[starting_row:])

    if filling_strategy is FillingStrategy.OUTER_PRIORITY:
        seats = [0] * n_rows
        remaining = n_seats
        for r in reversed(range(n_rows)):
            seats[r] = min(capacities[r], remaining)
            remaining -= seats[r]
        return seats

    raise AssertionError(f"unhandled filling strategy {filling_strategy!r}")  # pragma: no cover


def get_seats_centers(
    n_seats: int,
    *,
    min_n_rows: int = 0,
    filling_strategy: FillingStrategy = FillingStrategy.DEFAULT,
    span_angle: float = DEFAULT_SPAN_ANGLE,
) -> Dict[Point, float]:
    """Compute the centres of the seats, each mapped to its angle.

    The angle is taken from the ``(1, 0)`` centre in radians, trigonometric
    direction: close to 0 for the rightmost seats, ``pi/2`` in the middle and
    close to ``pi`` for the leftmost seats.

    ``min_n_rows`` only matters when greater than the number of rows actually
    needed; sparser diagrams go well with the non-default filling strategies.
    ``span_angle`` is the angle in degrees covered by the diagram, from the
    side of the rightmost seats to the side of the leftmost ones.
    """

    options = ArcOptions(min_n_rows=min_n_rows, filling_strategy=filling_strategy, span_angle=span_angle)
    validate_arc_options(options)
    n_seats = ensure_seat_count(n_seats)
    if n_seats == 0:
        return {}

    n_rows = max(options.min_n_rows, get_n_rows_from_n_seats(n_seats, options.span_angle))
    thickness = get_row_thickness(n_rows)
    span_angle_margin = (1 - options.span_angle / 180) * math.pi / 2
    seats_per_row = get_seats_per_row(n_seats, n_rows, options.filling_strategy, options.span_angle)
    logger.debug("Seats per row for %d seat(s) over %d row(s): %s", n_seats, n_rows, seats_per_row)

    positions: Dict[Point, float] = {}
    for r, n_this_row in enumerate(seats_per_row):
        if n_this_row == 0:
            continue
        # radius of the circle going through the centre of each seat of the row
        row_arc_radius = .5 + 2 * r * thickness

        if n_this_row == 1:
            positions[(1.0, row_arc_radius)] = math.pi / 2
            continue

        # keeps the side seats entirely on the canvas, plus the span margin
        angle_margin = math.asin(thickness / row_arc_radius) + span_angle_margin
        angle_step = (math.pi - 2 * angle_margin) / (n_this_row - 1)
        angles = angle_margin + np.arange(n_this_row) * angle_step
        xs = 1 + row_arc_radius * np.cos(angles)
        ys = row_arc_radius * np.sin(angles)
        for x, y, angle in zip(xs.tolist(), ys.tolist(), angles.tolist()):
            positions[(x, y)] = angle

    return positions


def rank_seats(centers: Dict[Point, float]) -> List[Point]:
    """Order seat centres from left to right, i.e. by decreasing angle."""

    return sorted(centers, key=lambda point: -centers[point])


def get_seat_radius(n_rows: int, seat_radius_factor: float = DEFAULT_SEAT_RADIUS_FACTOR) -> float:
    """Return the drawn radius of a seat; a factor of 1 makes seats of adjacent rows touch."""

    if seat_radius_factor <= 0:
        raise ConfigurationError(f"seat_radius_factor must be positive, got {seat_radius_factor}")
    return seat_radius_factor * get_row_thickness(n_rows)


def get_arc_layout(
    attribution: Attribution,
    *,
    seat_radius_factor: float = DEFAULT_SEAT_RADIUS_FACTOR,
    options: Optional[ArcOptions] = None,
) -> ArcLayout:
    """Place and dispatch the seats of ``attribution`` on a hemicycle.

    The groups are laid out from left to right in the order they are given.
    """

    options = options or ArcOptions()
    validate_arc_options(options)
    group_seats = group_seats_from_attribution(attribution)
    n_seats = sum(group_seats.values())

    n_rows = max(options.min_n_rows, get_n_rows_from_n_seats(n_seats, options.span_angle))
    centers = get_seats_centers(
        n_seats,
        min_n_rows=n_rows,
        filling_strategy=options.filling_strategy,
        span_angle=options.span_angle,
    )
    seats = dispatch_seats(group_seats, rank_seats(centers))
    logger.info("Laid out %d seat(s) for %d group(s) on %d row(s)", n_seats, len(group_seats), n_rows)
    return ArcLayout(seats=seats, seat_radius=get_seat_radius(n_rows, seat_radius_factor), n_rows=n_rows)


apply_debug_logging(globals(), logger=logger, quiet=("get_seats_centers", "rank_seats"))


__all__ = [
    "get_row_thickness",
    "get_rows_from_n_rows",
    "get_n_rows_from_n_seats",
    "get_seats_per_row",
    "get_seats_centers",
    "rank_seats",
    "get_seat_radius",
    "get_arc_layout",
]

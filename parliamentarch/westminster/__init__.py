"""Westminster diagrams: two facing wings, a speaker column and crossbenchers."""

from .common import SeatsPerPartyPerArea, WestminsterAttribution, normalize_attribution, seats_per_area
from .geometry import (
    GridCandidate,
    does_it_fit,
    find_grid,
    get_area_shapes,
    get_seat_coordinates_per_area,
    make_candidate,
    place_seats,
    search_bounds,
)

__all__ = [
    "SeatsPerPartyPerArea",
    "WestminsterAttribution",
    "normalize_attribution",
    "seats_per_area",
    "GridCandidate",
    "does_it_fit",
    "find_grid",
    "get_area_shapes",
    "get_seat_coordinates_per_area",
    "make_candidate",
    "place_seats",
    "search_bounds",
]

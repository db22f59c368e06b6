from __future__ import annotations

import pytest

from parliamentarch.errors import ConfigurationError, InfeasibleLayoutError, InvalidInputError
from parliamentarch.model import Area, AreaShape, SeatGroup, WestminsterOptions
from parliamentarch.westminster import (
    GridCandidate,
    find_grid,
    get_area_shapes,
    get_seat_coordinates_per_area,
    normalize_attribution,
    seats_per_area,
)
from parliamentarch.westminster import geometry


def _seats(speak=None, opposition=None, government=None, cross=None):
    return {
        Area.SPEAK: dict(speak or {}),
        Area.OPPOSITION: dict(opposition or {}),
        Area.GOVERNMENT: dict(government or {}),
        Area.CROSS: dict(cross or {}),
    }


def test_first_fitting_width_is_kept():
    seats = _seats(speak={"s": 1}, opposition={"a": 10}, government={"b": 12})

    grid = find_grid(seats)

    assert (grid.width, grid.height) == (12, 6)
    assert get_area_shapes(seats) == {
        Area.SPEAK: AreaShape(1, 1),
        Area.OPPOSITION: AreaShape(2, 11),
        Area.GOVERNMENT: AreaShape(2, 11),
        Area.CROSS: AreaShape(0, 0),
    }


def test_wings_grow_towards_the_gap():
    layout = get_seat_coordinates_per_area(_seats(speak={"s": 1}, opposition={"a": 10}, government={"b": 12}))

    assert layout.seats[Area.SPEAK] == {"s": [(0, 0)]}
    assert layout.seats[Area.OPPOSITION]["a"][:4] == [(0, 1), (0, 0), (1, 1), (1, 0)]
    assert layout.seats[Area.GOVERNMENT]["b"][:4] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_crossbenchers_fill_rows():
    seats = _seats(opposition={"a": 3}, government={"b": 3}, cross={"c": 5})

    layout = get_seat_coordinates_per_area(seats)

    assert layout.shapes[Area.CROSS] == AreaShape(3, 2)
    assert layout.shapes[Area.OPPOSITION] == AreaShape(1, 4)
    assert layout.seats[Area.CROSS]["c"] == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]


def test_not_cozy_starts_each_party_on_a_new_column():
    seats = _seats(opposition={"a": 3, "b": 3}, government={"c": 2})

    cozy = get_seat_coordinates_per_area(seats, WestminsterOptions(wing_n_rows=2))
    spaced = get_seat_coordinates_per_area(seats, WestminsterOptions(wing_n_rows=2, cozy=False))

    assert cozy.seats[Area.OPPOSITION]["b"] == [(1, 0), (2, 1), (2, 0)]
    assert spaced.seats[Area.OPPOSITION]["a"] == [(0, 1), (0, 0), (1, 1)]
    assert spaced.seats[Area.OPPOSITION]["b"] == [(2, 1), (2, 0), (3, 1)]
    assert spaced.seats[Area.GOVERNMENT]["c"] == [(0, 0), (0, 1)]


def test_not_cozy_crossbenchers_start_new_rows():
    seats = _seats(cross={"c": 3, "d": 2})

    layout = get_seat_coordinates_per_area(seats, WestminsterOptions(cross_n_cols=2, cozy=False))

    assert layout.shapes[Area.CROSS] == AreaShape(3, 2)
    assert layout.seats[Area.CROSS] == {"c": [(0, 0), (1, 0), (0, 1)], "d": [(0, 2), (1, 2)]}


def test_requested_wing_rows_are_honoured():
    seats = _seats(opposition={"a": 20}, government={"b": 20})

    shapes = get_area_shapes(seats, WestminsterOptions(wing_n_rows=5))

    assert shapes[Area.OPPOSITION].n_rows == 5
    assert shapes[Area.GOVERNMENT].n_rows == 5


def test_requested_cross_columns_are_honoured():
    seats = _seats(opposition={"a": 20}, government={"b": 20}, cross={"c": 12})

    shapes = get_area_shapes(seats, WestminsterOptions(cross_n_cols=3))

    assert shapes[Area.CROSS] == AreaShape(4, 3)


@pytest.mark.parametrize(
    "seats, options, expected",
    [
        (
            _seats(opposition={"a": 10}, government={"b": 10}, cross={"c": 2}),
            WestminsterOptions(cross_n_cols=5),
            GridCandidate(width=12, height=6, wing_rows=2, wing_cols=5, cross_rows=1, cross_cols=5),
        ),
        (
            _seats(cross={"c": 3, "d": 3}),
            WestminsterOptions(),
            GridCandidate(width=8, height=4, wing_rows=1, wing_cols=4, cross_rows=3, cross_cols=2),
        ),
        (
            _seats(cross={"c": 3, "d": 3}),
            WestminsterOptions(cozy=False),
            GridCandidate(width=12, height=6, wing_rows=2, wing_cols=9, cross_rows=6, cross_cols=1),
        ),
        (
            _seats(cross={"c": 3, "d": 2}),
            WestminsterOptions(cross_n_cols=2, cozy=False),
            GridCandidate(width=8, height=4, wing_rows=1, wing_cols=4, cross_rows=3, cross_cols=2),
        ),
    ],
)
def test_accepted_grid(seats, options, expected):
    assert find_grid(seats, options) == expected


def test_wide_requested_crossbench_keeps_its_columns():
    seats = _seats(opposition={"a": 10}, government={"b": 10}, cross={"c": 2})

    layout = get_seat_coordinates_per_area(seats, WestminsterOptions(cross_n_cols=5))

    assert layout.shapes[Area.CROSS] == AreaShape(1, 5)
    assert layout.seats[Area.CROSS] == {"c": [(0, 0), (1, 0)]}


def test_conflicting_crossbench_request_is_infeasible():
    seats = _seats(cross={"c": 3, "d": 3})

    with pytest.raises(InfeasibleLayoutError):
        find_grid(seats, WestminsterOptions(cross_n_cols=2, cozy=False))
    assert find_grid(seats, WestminsterOptions(cross_n_cols=2)).cross_rows == 3

ATTRIBUTIONS = [
    _seats(),
    _seats(speak={"s": 1}),
    _seats(speak={"s": 3}, opposition={"a": 1}, government={"b": 1}),
    _seats(opposition={"a": 250, "b": 30}, government={"c": 300, "d": 20}, cross={"e": 7, "f": 3}),
    _seats(speak={"s": 1}, opposition={"a": 5, "b": 7, "c": 1}, government={"d": 13}, cross={"e": 40}),
    _seats(opposition={"a": 650}),
    _seats(cross={"a": 9, "b": 9, "c": 2}),
]


@pytest.mark.parametrize("cozy", [True, False])
@pytest.mark.parametrize("seats", ATTRIBUTIONS)
def test_accepted_grid_holds_every_area(seats, cozy):
    options = WestminsterOptions(cozy=cozy)
    totals = seats_per_area(seats)

    grid = find_grid(seats, options)

    assert totals[Area.SPEAK] <= grid.height
    assert grid.wing_rows * 2 + 2 <= grid.height
    assert grid.cross_rows <= grid.height
    assert totals[Area.OPPOSITION] <= grid.wing_rows * grid.wing_cols
    assert totals[Area.GOVERNMENT] <= grid.wing_rows * grid.wing_cols
    assert totals[Area.CROSS] <= grid.cross_rows * grid.cross_cols

    layout = get_seat_coordinates_per_area(seats, options)
    assert layout.n_seats == sum(totals.values())
    for area, groups in layout.seats.items():
        shape = layout.shapes[area]
        cells = [cell for party_cells in groups.values() for cell in party_cells]
        assert len(cells) == len(set(cells))
        assert [len(c) for c in groups.values()] == list(seats[area].values())
        for col, row in cells:
            assert 0 <= col < shape.n_cols
            assert 0 <= row < shape.n_rows


def test_layout_is_idempotent():
    seats = ATTRIBUTIONS[4]

    assert get_seat_coordinates_per_area(seats) == get_seat_coordinates_per_area(seats)


def test_exhausted_search_is_fatal(monkeypatch):
    monkeypatch.setattr(geometry, "search_bounds", lambda seats, options: range(8, 10))

    with pytest.raises(InfeasibleLayoutError):
        find_grid(_seats(opposition={"a": 500}))


@pytest.mark.parametrize(
    "options",
    [
        WestminsterOptions(wing_n_rows=-1),
        WestminsterOptions(cross_n_cols=-2),
        WestminsterOptions(cozy="yes"),
    ],
)
def test_invalid_options_are_rejected(options):
    with pytest.raises(ConfigurationError):
        find_grid(_seats(opposition={"a": 3}), options)


def test_normalize_located_seat_groups():
    speaker = SeatGroup("#000000", 1, area="speak")
    tories = SeatGroup("#0087dc", 5, area=Area.OPPOSITION)
    labour = SeatGroup("#e4003b", 8, area=Area.GOVERNMENT)

    seats = normalize_attribution([speaker, labour, tories])

    assert seats == {
        Area.SPEAK: {speaker: 1},
        Area.OPPOSITION: {tories: 5},
        Area.GOVERNMENT: {labour: 8},
        Area.CROSS: {},
    }
    assert normalize_attribution([(speaker, 1), (tories, 2)])[Area.OPPOSITION] == {tories: 2}
    assert normalize_attribution({speaker: 1, labour: 3})[Area.GOVERNMENT] == {labour: 3}


def test_normalize_area_keyed_attribution():
    group = SeatGroup("#fdbb30", 4)

    seats = normalize_attribution({"opposition": [("x", 2), ("y", 3)], Area.CROSS: [group], "speak": {"s": 1}})

    assert seats[Area.OPPOSITION] == {"x": 2, "y": 3}
    assert seats[Area.CROSS] == {group: 4}
    assert seats[Area.SPEAK] == {"s": 1}
    assert seats[Area.GOVERNMENT] == {}


def test_normalize_rejects_groups_without_area():
    with pytest.raises(InvalidInputError):
        normalize_attribution([SeatGroup("#123456", 2)])


def test_normalize_rejects_bad_counts():
    with pytest.raises(InvalidInputError):
        normalize_attribution({"government": {"a": -3}})

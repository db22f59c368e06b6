"""Example pipeline: lay out a Westminster chamber with forced party columns."""

from parliamentarch import Area, SeatGroup, WestminsterOptions, get_seat_coordinates_per_area, get_westminster_svg

PARTIES = [
    SeatGroup("#000000", 1, id="speaker", area=Area.SPEAK),
    SeatGroup("#0087dc", 121, id="conservatives", area=Area.OPPOSITION),
    SeatGroup("#fdbb30", 72, id="lib-dems", area=Area.OPPOSITION),
    SeatGroup("#e4003b", 411, id="labour", area=Area.GOVERNMENT),
    SeatGroup("#fdf38e", 9, id="snp", area=Area.CROSS),
    SeatGroup("#999999", 14, id="others", area=Area.CROSS),
]


def main() -> None:
    layout = get_seat_coordinates_per_area(PARTIES, WestminsterOptions(cozy=False))

    for area, shape in layout.shapes.items():
        print(f"{area.value}: {shape.n_rows} row(s) x {shape.n_cols} column(s)")
    for party in PARTIES:
        cells = layout.seats[party.area][party]
        print(f"{party.id}: {len(cells)} seats, columns {cells[0][0]}..{cells[-1][0]}")

    print(get_westminster_svg(layout, rounding_radius=0.2)[:200] + "...")


if __name__ == "__main__":
    main()

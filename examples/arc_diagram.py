"""Example pipeline: lay out a hemicycle and print the seats of each party."""

from parliamentarch import ArcOptions, FillingStrategy, SeatGroup, get_arc_layout, get_arc_svg

PARTIES = [
    SeatGroup("#e4032e", 71, id="left", data="Left bloc"),
    SeatGroup("#f4a7bb", 146, id="centre-left"),
    SeatGroup("#ffd600", 168, id="centre"),
    SeatGroup("#0066cc", 62, id="right"),
    SeatGroup("#0d378a", 130, id="far-right"),
]


def main() -> None:
    options = ArcOptions(filling_strategy=FillingStrategy.DEFAULT)
    layout = get_arc_layout(PARTIES, options=options)

    print(f"Rows: {layout.n_rows}")
    print(f"Seat radius: {layout.seat_radius:.6f}")
    for party in PARTIES:
        first_x, first_y = layout.seats[party][0]
        print(f"{party.id}: {len(layout.seats[party])} seats, first at ({first_x:.6f}, {first_y:.6f})")

    print(get_arc_svg(layout)[:200] + "...")


if __name__ == "__main__":
    main()

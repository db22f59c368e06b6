import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from parliamentarch import (
    ParliamentArchError,
    SeatGroup,
    arc_options_from_mapping,
    get_arc_layout,
    get_arc_svg,
    get_seat_coordinates_per_area,
    get_westminster_svg,
    westminster_options_from_mapping,
)
from parliamentarch.errors import InvalidInputError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_groups(entries: List[Dict[str, Any]]) -> List[SeatGroup]:
    groups = []
    for idx, entry in enumerate(entries):
        if "color" not in entry:
            raise InvalidInputError(f"group #{idx} is missing the required 'color'")
        groups.append(
            SeatGroup(
                color=entry["color"],
                n_seats=entry.get("seats", 1),
                id=entry.get("id"),
                data=entry.get("data"),
                area=entry.get("area"),
            )
        )
    return groups


def _label(group: SeatGroup, idx: int) -> str:
    return group.id or f"{group.color} (#{idx})"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out and draw parliament diagrams")
    parser.add_argument("path", help="Path to a JSON file with 'groups' and optional 'options'")
    parser.add_argument(
        "--kind",
        choices=["arc", "westminster"],
        default="arc",
        help="Diagram family (default: arc)",
    )
    parser.add_argument(
        "--seat-radius-factor",
        type=float,
        default=0.8,
        help="Drawn seat radius relative to the row thickness (arc only, default: 0.8)",
    )
    parser.add_argument(
        "--output",
        help="Write the SVG document to the given path",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading attribution from %s", args.path)
    with open(args.path, encoding="utf-8") as fin:
        payload = json.load(fin)

    try:
        groups = _load_groups(payload.get("groups", []))
        raw_options = payload.get("options", {})
        if args.kind == "arc":
            options = arc_options_from_mapping(raw_options)
            layout = get_arc_layout(groups, seat_radius_factor=args.seat_radius_factor, options=options)
            svg = get_arc_svg(layout)
            print(f"Rows: {layout.n_rows}")
            print(f"Seat radius: {layout.seat_radius:.6f}")
            print("Seats:")
            for idx, group in enumerate(groups):
                print(f"  {_label(group, idx)}: {len(layout.seats[group])}")
        else:
            options = westminster_options_from_mapping(raw_options)
            layout = get_seat_coordinates_per_area(groups, options)
            svg = get_westminster_svg(layout)
            print("Areas:")
            for area, shape in layout.shapes.items():
                print(f"  {area.value}: {shape.n_rows} row(s) x {shape.n_cols} column(s)")
            print("Seats:")
            for idx, group in enumerate(groups):
                print(f"  {_label(group, idx)}: {len(layout.seats[group.area][group])}")
    except ParliamentArchError as exc:
        logger.error("Layout failed: %s", exc)
        raise SystemExit(1)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        output_path.write_text(svg, encoding="utf-8")
        print(f"SVG document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])

"""SVG rendering of computed layouts."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Hashable, Mapping, Optional, Tuple

from ..arc import get_arc_layout
from ..dispatch import Attribution
from ..model import DEFAULT_SEAT_RADIUS_FACTOR, Area, ArcLayout, ArcOptions, WestminsterLayout, WestminsterOptions
from ..westminster import WestminsterAttribution, get_seat_coordinates_per_area
from .utils import Margins, format_number, group_color, normalize_margins

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)

DEFAULT_CANVAS_SIZE = 175.0
DEFAULT_MARGINS = 5.0
DEFAULT_CELL_SIZE = 10.0
DEFAULT_SPACING = 0.1
# gap between the two wings, in squares
WING_GAP = 2


def _tag(name: str) -> str:
    return f"{{{SVG_NS}}}{name}"


def _svg_root(width: float, height: float) -> ET.Element:
    return ET.Element(
        _tag("svg"),
        {
            "version": "1.1",
            "width": format_number(width),
            "height": format_number(height),
        },
    )


class _GroupIds:
    """Hands out ``group-N`` ids to the groups which have none."""

    def __init__(self) -> None:
        self._fallback = 0

    def __call__(self, group: Hashable) -> str:
        explicit = getattr(group, "id", None)
        if explicit:
            return explicit
        value = f"group-{self._fallback}"
        self._fallback += 1
        return value


def _group_element(
    parent: ET.Element,
    group: Hashable,
    ids: _GroupIds,
    colors: Optional[Mapping[Hashable, str]],
) -> ET.Element:
    element = ET.SubElement(parent, _tag("g"), {"id": ids(group), "style": f"fill: {group_color(group, colors)};"})
    data = getattr(group, "data", None)
    if data:
        ET.SubElement(element, _tag("title")).text = data
    return element


def _serialize(root: ET.Element) -> str:
    return ET.tostring(root, encoding="unicode")


def get_arc_svg(
    layout: ArcLayout,
    *,
    canvas_size: float = DEFAULT_CANVAS_SIZE,
    margins: Margins = DEFAULT_MARGINS,
    colors: Optional[Mapping[Hashable, str]] = None,
) -> str:
    """Render a hemicycle layout as an SVG document.

    The 2x1 layout canvas is scaled to ``2 * canvas_size`` by ``canvas_size``
    and the y axis is flipped so that the hemicycle opens downwards.
    """

    left, top, right, bottom = normalize_margins(margins)
    root = _svg_root(left + 2 * canvas_size + right, top + canvas_size + bottom)
    radius = format_number(layout.seat_radius * canvas_size)
    ids = _GroupIds()

    for group, centers in layout.seats.items():
        group_element = _group_element(root, group, ids, colors)
        for x, y in centers:
            ET.SubElement(
                group_element,
                _tag("circle"),
                {
                    "cx": format_number(left + canvas_size * x),
                    "cy": format_number(top + canvas_size * (1 - y)),
                    "r": radius,
                },
            )

    logger.debug("Rendered %d seat(s) as circles", layout.n_seats)
    return _serialize(root)


def get_westminster_grid_origins(layout: WestminsterLayout) -> Tuple[Dict[Area, Tuple[float, float]], int, float]:
    """Place each area on the whole diagram, in squares.

    Returns the top-left corner of every area, the total number of columns and
    the total height. The speaker and the crossbenchers are vertically centred
    on the gap between the wings.
    """

    shapes = layout.shapes
    n_speak = sum(len(cells) for cells in layout.seats.get(Area.SPEAK, {}).values())
    wing_rows = shapes[Area.OPPOSITION].n_rows
    wing_cols = shapes[Area.OPPOSITION].n_cols
    cross_rows = shapes[Area.CROSS].n_rows
    cross_cols = shapes[Area.CROSS].n_cols

    left_offset = 1 if n_speak > 0 else 0
    total_cols = left_offset + wing_cols + (cross_cols + 1 if cross_cols > 0 else 0)
    total_rows = max(2 * wing_rows + WING_GAP, shapes[Area.SPEAK].n_rows, cross_rows)
    middle = total_rows / 2

    origins = {
        Area.SPEAK: (0.0, middle - shapes[Area.SPEAK].n_rows / 2),
        Area.OPPOSITION: (float(left_offset), middle - WING_GAP / 2 - wing_rows),
        Area.GOVERNMENT: (float(left_offset), middle + WING_GAP / 2),
        Area.CROSS: (float(left_offset + wing_cols + 1), middle - cross_rows / 2),
    }
    return origins, total_cols, total_rows


def get_westminster_svg(
    layout: WestminsterLayout,
    *,
    cell_size: float = DEFAULT_CELL_SIZE,
    spacing: float = DEFAULT_SPACING,
    rounding_radius: float = 0.0,
    margins: Margins = DEFAULT_MARGINS,
    colors: Optional[Mapping[Hashable, str]] = None,
) -> str:
    """Render a Westminster layout as an SVG document of rounded squares.

    ``spacing`` is the fraction of a square left empty between two seats and
    ``rounding_radius`` the corner radius relative to a seat, 0.5 making
    circles.
    """

    left, top, right, bottom = normalize_margins(margins)
    origins, total_cols, total_rows = get_westminster_grid_origins(layout)
    root = _svg_root(left + cell_size * total_cols + right, top + cell_size * total_rows + bottom)
    diagram = ET.SubElement(root, _tag("g"), {"id": "diagram"})

    side = cell_size * (1 - spacing)
    corner = format_number(min(0.5, rounding_radius) * side)
    ids = _GroupIds()

    for area, groups in layout.seats.items():
        origin_x, origin_y = origins[area]
        area_element = ET.SubElement(diagram, _tag("g"), {"id": f"{area.value}-benches"})
        for group, cells in groups.items():
            group_element = _group_element(area_element, group, ids, colors)
            for col, row in cells:
                ET.SubElement(
                    group_element,
                    _tag("rect"),
                    {
                        "x": format_number(left + cell_size * (origin_x + col + spacing / 2)),
                        "y": format_number(top + cell_size * (origin_y + row + spacing / 2)),
                        "width": format_number(side),
                        "height": format_number(side),
                        "rx": corner,
                        "ry": corner,
                    },
                )

    logger.debug("Rendered %d seat(s) on a %dx%s grid", layout.n_seats, total_cols, format_number(total_rows))
    return _serialize(root)


def get_svg_from_attribution(
    attribution: Attribution,
    *,
    seat_radius_factor: float = DEFAULT_SEAT_RADIUS_FACTOR,
    options: Optional[ArcOptions] = None,
    canvas_size: float = DEFAULT_CANVAS_SIZE,
    margins: Margins = DEFAULT_MARGINS,
    colors: Optional[Mapping[Hashable, str]] = None,
) -> str:
    layout = get_arc_layout(attribution, seat_radius_factor=seat_radius_factor, options=options)
    return get_arc_svg(layout, canvas_size=canvas_size, margins=margins, colors=colors)


def get_westminster_svg_from_attribution(
    attribution: WestminsterAttribution,
    *,
    options: Optional[WestminsterOptions] = None,
    cell_size: float = DEFAULT_CELL_SIZE,
    spacing: float = DEFAULT_SPACING,
    rounding_radius: float = 0.0,
    margins: Margins = DEFAULT_MARGINS,
    colors: Optional[Mapping[Hashable, str]] = None,
) -> str:
    layout = get_seat_coordinates_per_area(attribution, options)
    return get_westminster_svg(
        layout,
        cell_size=cell_size,
        spacing=spacing,
        rounding_radius=rounding_radius,
        margins=margins,
        colors=colors,
    )


__all__ = [
    "SVG_NS",
    "get_arc_svg",
    "get_westminster_grid_origins",
    "get_westminster_svg",
    "get_svg_from_attribution",
    "get_westminster_svg_from_attribution",
]

"""Layout → SVG rendering helpers."""

from .generator import (
    SVG_NS,
    get_arc_svg,
    get_svg_from_attribution,
    get_westminster_grid_origins,
    get_westminster_svg,
    get_westminster_svg_from_attribution,
)

__all__ = [
    "SVG_NS",
    "get_arc_svg",
    "get_svg_from_attribution",
    "get_westminster_grid_origins",
    "get_westminster_svg",
    "get_westminster_svg_from_attribution",
]

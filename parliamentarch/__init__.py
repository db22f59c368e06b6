from .errors import (
    ParliamentArchError,
    ConfigurationError,
    InvalidInputError,
    InfeasibleLayoutError,
    DispatchMismatchError,
    NotEnoughSlotsError,
    TooManySlotsError,
)
from .model import (
    Area,
    AreaShape,
    ArcLayout,
    ArcOptions,
    FillingStrategy,
    SeatGroup,
    WestminsterLayout,
    WestminsterOptions,
)
from .dispatch import dispatch_seats, group_seats_from_attribution
from .arc import (
    get_row_thickness,
    get_rows_from_n_rows,
    get_n_rows_from_n_seats,
    get_seats_per_row,
    get_seats_centers,
    rank_seats,
    get_seat_radius,
    get_arc_layout,
)
from .westminster import get_area_shapes, get_seat_coordinates_per_area, normalize_attribution
from .config import arc_options_from_mapping, westminster_options_from_mapping
from .svg import (
    get_arc_svg,
    get_svg_from_attribution,
    get_westminster_svg,
    get_westminster_svg_from_attribution,
)

__all__ = [
    'ParliamentArchError',
    'ConfigurationError',
    'InvalidInputError',
    'InfeasibleLayoutError',
    'DispatchMismatchError',
    'NotEnoughSlotsError',
    'TooManySlotsError',
    'Area',
    'AreaShape',
    'ArcLayout',
    'ArcOptions',
    'FillingStrategy',
    'SeatGroup',
    'WestminsterLayout',
    'WestminsterOptions',
    'dispatch_seats',
    'group_seats_from_attribution',
    'get_row_thickness',
    'get_rows_from_n_rows',
    'get_n_rows_from_n_seats',
    'get_seats_per_row',
    'get_seats_centers',
    'rank_seats',
    'get_seat_radius',
    'get_arc_layout',
    'get_area_shapes',
    'get_seat_coordinates_per_area',
    'normalize_attribution',
    'arc_options_from_mapping',
    'westminster_options_from_mapping',
    'get_arc_svg',
    'get_svg_from_attribution',
    'get_westminster_svg',
    'get_westminster_svg_from_attribution',
]

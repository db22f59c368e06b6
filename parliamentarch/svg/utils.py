import math
from numbers import Real
from typing import Hashable, Mapping, Optional, Sequence, Tuple, Union

from ..errors import ConfigurationError, InvalidInputError

Margins = Union[float, Sequence[float]]


def format_number(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError('Cannot format non-finite float for SVG output')
    formatted = f'{value:.4f}'.rstrip('0').rstrip('.')
    if formatted in ('', '-0'):
        return '0'
    return formatted


def normalize_margins(margins: Margins) -> Tuple[float, float, float, float]:
    """Return ``(left, top, right, bottom)`` margins.

    A single number applies to every side, a pair is ``(horizontal, vertical)``.
    """
    if isinstance(margins, Real):
        return (margins, margins, margins, margins)
    values = tuple(margins)
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 4:
        return values  # type: ignore[return-value]
    raise ConfigurationError(f'margins must be a number, a pair or a quadruple, got {margins!r}')


def group_color(group: Hashable, colors: Optional[Mapping[Hashable, str]] = None) -> str:
    if colors is not None and group in colors:
        return colors[group]
    color = getattr(group, 'color', None)
    if not color:
        raise InvalidInputError(f'no color for group {group!r}')
    return color

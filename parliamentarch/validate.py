import math
import numbers
from typing import Dict, Hashable, Iterable, Mapping

from .errors import ConfigurationError, InvalidInputError
from .model import ArcOptions, WestminsterOptions

MAX_SAFE_INTEGER = 2**53 - 1


def ensure_seat_count(value: object, what: str = "seat count") -> int:
    """Return ``value`` as an ``int`` or raise :class:`InvalidInputError`."""
    if isinstance(value, bool):
        raise InvalidInputError(f'{what} must be an integer, got {value!r}')
    if isinstance(value, numbers.Integral):
        count = int(value)
    elif isinstance(value, numbers.Real):
        if not math.isfinite(value) or not float(value).is_integer():
            raise InvalidInputError(f'{what} must be a finite integer, got {value!r}')
        count = int(value)
    else:
        raise InvalidInputError(f'{what} must be an integer, got {value!r}')
    if count < 0:
        raise InvalidInputError(f'{what} must be non-negative, got {count}')
    if count > MAX_SAFE_INTEGER:
        raise InvalidInputError(f'{what} is too large: {count}')
    return count


def ensure_total(counts: Iterable[int]) -> int:
    total = sum(counts)
    if total > MAX_SAFE_INTEGER:
        raise InvalidInputError(f'total number of seats is too large: {total}')
    return total


def validate_group_seats(group_seats: Mapping[Hashable, object]) -> Dict[Hashable, int]:
    """Return an ordered copy of ``group_seats`` with validated ``int`` counts."""
    counts = {
        group: ensure_seat_count(n, f'seat count of {group!r}')
        for group, n in group_seats.items()
    }
    ensure_total(counts.values())
    return counts


def _ensure_dimension(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f'{name} must be an integer, got {value!r}')
    if value < 0:
        raise ConfigurationError(f'{name} must be non-negative, got {value}')


def validate_arc_options(options: ArcOptions) -> None:
    _ensure_dimension(options.min_n_rows, 'min_n_rows')
    span = options.span_angle
    if isinstance(span, bool) or not isinstance(span, numbers.Real) or not math.isfinite(span):
        raise ConfigurationError(f'span_angle must be a number of degrees, got {span!r}')
    if span > 180:
        raise ConfigurationError(f'span_angle above 180 degrees is not supported, got {span}')
    if span <= 0:
        raise ConfigurationError(f'span_angle must be positive, got {span}')


def validate_westminster_options(options: WestminsterOptions) -> None:
    _ensure_dimension(options.wing_n_rows, 'wing_n_rows')
    _ensure_dimension(options.cross_n_cols, 'cross_n_cols')
    if not isinstance(options.cozy, bool):
        raise ConfigurationError(f'cozy must be boolean, got {options.cozy!r}')

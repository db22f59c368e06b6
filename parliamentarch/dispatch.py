"""Assignment of ranked slots to groups."""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, List, Mapping, Sequence, TypeVar, Union

from .errors import InvalidInputError, NotEnoughSlotsError, TooManySlotsError
from .logging_utils import apply_debug_logging
from .model import SeatGroup
from .validate import validate_group_seats

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=Hashable)
S = TypeVar("S")

Attribution = Union[Mapping[Hashable, int], Sequence[SeatGroup]]


def group_seats_from_attribution(attribution: Attribution) -> Dict[Hashable, int]:
    """Return an ordered ``group -> count`` mapping.

    ``attribution`` is either such a mapping already, or a sequence of
    :class:`SeatGroup` whose ``n_seats`` give the counts.
    """

    if isinstance(attribution, Mapping):
        return validate_group_seats(attribution)
    groups = list(attribution)
    if len(set(groups)) != len(groups):
        raise InvalidInputError("the same group is listed more than once")
    return validate_group_seats({group: group.n_seats for group in groups})


def dispatch_seats(group_seats: Mapping[G, int], seats: Iterable[S]) -> Dict[G, List[S]]:
    """Split ``seats`` into consecutive chunks, one per group, in mapping order.

    Groups are typically ordered from left to right, and so are the seats. The
    iterable must hold exactly as many seats as the counts add up to.
    """

    counts = validate_group_seats(group_seats)
    iterator = iter(seats)
    result: Dict[G, List[S]] = {}
    for group, n_seats in counts.items():
        chunk: List[S] = []
        for _ in range(n_seats):
            try:
                chunk.append(next(iterator))
            except StopIteration:
                raise NotEnoughSlotsError(
                    f"not enough seats: ran out while filling {group!r} ({len(chunk)} of {n_seats})"
                ) from None
        result[group] = chunk  # type: ignore[index]

    leftover = sum(1 for _ in iterator)
    if leftover:
        raise TooManySlotsError(f"too many seats: {leftover} left after all groups were filled")

    logger.debug("Dispatched %d seat(s) among %d group(s)", sum(counts.values()), len(counts))
    return result


apply_debug_logging(globals(), logger=logger)


__all__ = ["Attribution", "dispatch_seats", "group_seats_from_attribution"]

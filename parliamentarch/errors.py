"""Exception hierarchy shared by the layout engines."""

from __future__ import annotations


class ParliamentArchError(Exception):
    """Base class for every error raised by :mod:`parliamentarch`."""


class ConfigurationError(ParliamentArchError, ValueError):
    """Raised when an option value is out of range or not recognised."""


class InvalidInputError(ParliamentArchError, ValueError):
    """Raised when seat counts are not usable non-negative integers."""


class InfeasibleLayoutError(ParliamentArchError, RuntimeError):
    """Raised when the Westminster grid search finds no fitting shape."""


class DispatchMismatchError(ParliamentArchError, ValueError):
    """Raised when the number of slots differs from the declared seat total."""


class NotEnoughSlotsError(DispatchMismatchError):
    pass


class TooManySlotsError(DispatchMismatchError):
    pass


__all__ = [
    "ParliamentArchError",
    "ConfigurationError",
    "InvalidInputError",
    "InfeasibleLayoutError",
    "DispatchMismatchError",
    "NotEnoughSlotsError",
    "TooManySlotsError",
]

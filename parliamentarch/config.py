"""Flat option records → option dataclasses."""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from .errors import ConfigurationError
from .model import ArcOptions, WestminsterOptions
from .validate import validate_arc_options, validate_westminster_options

T = TypeVar("T", ArcOptions, WestminsterOptions)

ARC_OPTION_KEYS: Dict[str, str] = {
    "minNRows": "min_n_rows",
    "fillingStrategy": "filling_strategy",
    "spanAngle": "span_angle",
}

WESTMINSTER_OPTION_KEYS: Dict[str, str] = {
    "wingRowCount": "wing_n_rows",
    "wingNRows": "wing_n_rows",
    "crossbenchColumnCount": "cross_n_cols",
    "crossNCols": "cross_n_cols",
    "cozy": "cozy",
}


def _options_from_mapping(cls: Type[T], aliases: Mapping[str, str], values: Optional[Mapping[str, Any]]) -> T:
    known = {f.name for f in fields(cls)}
    kwargs: Dict[str, Any] = {}
    for key, value in (values or {}).items():
        name = aliases.get(key, key)
        if name not in known:
            raise ConfigurationError(f"unknown {cls.__name__} option {key!r}")
        if name in kwargs:
            raise ConfigurationError(f"option {name!r} given more than once")
        kwargs[name] = value
    return cls(**kwargs)


def arc_options_from_mapping(values: Optional[Mapping[str, Any]] = None) -> ArcOptions:
    """Build :class:`ArcOptions` from camelCase or snake_case keys."""

    options = _options_from_mapping(ArcOptions, ARC_OPTION_KEYS, values)
    validate_arc_options(options)
    return options


def westminster_options_from_mapping(values: Optional[Mapping[str, Any]] = None) -> WestminsterOptions:
    """Build :class:`WestminsterOptions` from camelCase or snake_case keys."""

    options = _options_from_mapping(WestminsterOptions, WESTMINSTER_OPTION_KEYS, values)
    validate_westminster_options(options)
    return options


__all__ = [
    "ARC_OPTION_KEYS",
    "WESTMINSTER_OPTION_KEYS",
    "arc_options_from_mapping",
    "westminster_options_from_mapping",
]

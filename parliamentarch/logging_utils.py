from __future__ import annotations

import inspect
import logging
import reprlib
import time
from functools import wraps
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8
_repr.maxset = 8

_MAX_ITEMS = 6
_MAX_LENGTH = 300


def _summarize_array(value: np.ndarray) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
    if value.size == 0:
        return parts[0]
    if value.size <= _MAX_ITEMS:
        parts.append(f"values={_repr.repr(value.tolist())}")
    elif np.issubdtype(value.dtype, np.number):
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def safe_repr(value: Any) -> str:
    """Short, bounded representation of ``value`` for DEBUG records.

    Seat maps can hold thousands of coordinates, so containers are cut after a
    few items and reported with their length.
    """

    if isinstance(value, np.ndarray):
        return _summarize_array(value)

    if isinstance(value, Mapping):
        items = []
        for idx, (key, val) in enumerate(value.items()):
            if idx >= _MAX_ITEMS:
                items.append(f"...(+{len(value) - _MAX_ITEMS})")
                break
            items.append(f"{safe_repr(key)}: {safe_repr(val)}")
        return "{" + ", ".join(items) + "}"

    if isinstance(value, (list, tuple)) and len(value) > _MAX_ITEMS:
        head = ", ".join(safe_repr(item) for item in value[:_MAX_ITEMS])
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{head}, ...(len={len(value)}){close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > _MAX_LENGTH:
        return rendered[:_MAX_LENGTH] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{key}={safe_repr(val)}" for key, val in kwargs.items()) + "}")
    return ", ".join(parts) or "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator recording calls of the wrapped function at DEBUG.

    The exit record carries the elapsed time, and the returned value unless
    ``log_result`` is false. Exceptions are recorded by type and re-raised.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", label, _format_arguments(args, kwargs))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s: %s", label, type(exc).__name__, exc)
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000
            if log_result:
                logger.debug("Exiting %s after %.3f ms -> %s", label, elapsed_ms, safe_repr(result))
            else:
                logger.debug("Exiting %s after %.3f ms", label, elapsed_ms)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    quiet: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with :func:`debug_log_call`.

    Functions named in ``quiet`` are logged without their returned value.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or ())
    quiet_set: Set[str] = set(quiet or ())

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name, log_result=name not in quiet_set)(value)


__all__ = ["safe_repr", "debug_log_call", "apply_debug_logging"]

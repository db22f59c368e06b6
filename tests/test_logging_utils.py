import logging

import numpy as np
import pytest

from parliamentarch import get_arc_layout
from parliamentarch.logging_utils import apply_debug_logging, debug_log_call, safe_repr


def test_safe_repr_summarizes_arrays():
    small = safe_repr(np.array([1, 2, 3]))
    assert small.startswith("ndarray(shape=(3,)")
    assert small.endswith("values=[1, 2, 3]")
    summary = safe_repr(np.linspace(0.0, 1.0, 50))
    assert "shape=(50,)" in summary
    assert "min=0" in summary
    assert "max=1" in summary


def test_safe_repr_truncates_containers():
    rendered = safe_repr(list(range(100)))
    assert rendered.endswith("...(len=100)]")

    rendered = safe_repr({i: i for i in range(10)})
    assert "...(+4)" in rendered

    rendered = safe_repr("x" * 1000)
    assert len(rendered) < 400


def test_debug_log_call_records_entry_and_exit(caplog):
    logger = logging.getLogger("parliamentarch.tests")

    @debug_log_call(logger)
    def double(value):
        return 2 * value

    with caplog.at_level(logging.DEBUG, logger="parliamentarch.tests"):
        assert double(21) == 42

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "args=[21]" in message for message in messages)
    assert any(message.endswith("-> 42") for message in messages)


def test_debug_log_call_is_silent_above_debug(caplog):
    logger = logging.getLogger("parliamentarch.tests.quiet")

    @debug_log_call(logger)
    def identity(value):
        return value

    with caplog.at_level(logging.INFO, logger="parliamentarch.tests.quiet"):
        identity(1)

    assert not caplog.records


def test_apply_debug_logging_wraps_public_functions_once():
    namespace = {"__name__": "fake_module"}

    def visible():
        return 1

    def _hidden():
        return 2

    visible.__module__ = "fake_module"
    _hidden.__module__ = "fake_module"
    namespace.update(visible=visible, _hidden=_hidden)

    apply_debug_logging(namespace)
    wrapped = namespace["visible"]
    apply_debug_logging(namespace)

    assert namespace["visible"] is wrapped
    assert getattr(wrapped, "_debug_logging_wrapped", False)
    assert namespace["_hidden"] is _hidden


def test_engine_calls_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="parliamentarch"):
        get_arc_layout({"a": 2, "b": 1})

    messages = [record.getMessage() for record in caplog.records]
    assert any("Entering get_seats_centers" in message for message in messages)
    assert any("Laid out 3 seat(s)" in message for message in messages)


def test_debug_log_call_records_exceptions(caplog):
    logger = logging.getLogger("parliamentarch.tests.failing")

    @debug_log_call(logger, name="explode")
    def explode():
        raise KeyError("boom")

    with caplog.at_level(logging.DEBUG, logger="parliamentarch.tests.failing"):
        with pytest.raises(KeyError):
            explode()

    assert any(record.getMessage().startswith("explode raised KeyError") for record in caplog.records)


def test_quiet_functions_omit_their_result(caplog):
    with caplog.at_level(logging.DEBUG, logger="parliamentarch"):
        get_arc_layout({"a": 2})

    exits = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Exiting get_seats_centers")]
    assert exits
    assert all(" ms" in message and "->" not in message for message in exits)

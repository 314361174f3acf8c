import logging

import pytest

from scopeval.config import get_log_level, setup_logging
from scopeval.errors import BindingError, FrozenEnvironmentError, UnboundSymbolError
from scopeval.types.environment import Environment
from scopeval.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


def test_define_and_lookup_through_chain():
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer=outer)
    inner.define(y, 2)
    assert inner.lookup(x) == 1
    assert inner.lookup(y) == 2
    assert inner.find(x) is outer
    assert outer.find(y) is None
    with pytest.raises(UnboundSymbolError):
        outer.lookup(y)


def test_define_requires_symbol():
    with pytest.raises(BindingError):
        Environment().define("x", 1)


def test_frozen_frame_rejects_definitions():
    core = Environment()
    core.define(x, 1)
    core.freeze()
    with pytest.raises(FrozenEnvironmentError):
        core.define(y, 2)
    with pytest.raises(FrozenEnvironmentError):
        core.update({y: 2})
    # Child frames stay writable
    child = Environment(outer=core)
    child.define(x, 10)
    assert child.lookup(x) == 10
    assert core.lookup(x) == 1


def test_global_frame_stops_at_frozen_core():
    core = Environment().freeze()
    per_call = Environment(outer=core)
    local = Environment(outer=Environment(outer=per_call))
    assert local.global_frame() is per_call
    assert per_call.global_frame() is per_call
    standalone = Environment()
    assert Environment(outer=standalone).global_frame() is standalone


def test_str_and_repr():
    core = Environment()
    core.define(x, 1)
    core.freeze()
    frame = Environment(outer=core)
    frame.define(y, 2)
    assert str(frame) == "{y: 2} -> ..."
    assert str(core) == "<core: 1 bindings>"
    assert repr(frame) == "<Environment chain: {y: 2} -> <core: 1 bindings>>"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.delenv("SCOPEVAL_LOG_LEVEL", raising=False)
    assert get_log_level() == "WARNING"
    monkeypatch.setenv("SCOPEVAL_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_setup_logging_to_file(tmp_path, monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    log_file = tmp_path / "logs" / "scopeval.log"
    setup_logging("info", str(log_file))
    assert calls["level"] == logging.INFO
    assert calls["filename"] == str(log_file)
    assert log_file.parent.is_dir()


def test_setup_logging_defaults_to_stderr(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setenv("SCOPEVAL_LOG_LEVEL", "error")
    setup_logging()
    assert calls["level"] == logging.ERROR
    assert "filename" not in calls

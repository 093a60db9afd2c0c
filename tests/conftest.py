"""Pytest configuration and shared fixtures for monadkit tests."""

import logging

import pytest

from monadkit import IDENTITY, STRING_MONOID, maybe_t, reader_t, result_t, writer_t
from monadkit import _config
from monadkit._logging import add_log_hook, clear_log_hooks


@pytest.fixture
def mt():
    """MaybeT factory over the identity monad."""
    return maybe_t(IDENTITY)


@pytest.fixture
def rt():
    """ResultT factory over the identity monad."""
    return result_t(IDENTITY)


@pytest.fixture
def rdt():
    """ReaderT factory over the identity monad."""
    return reader_t(IDENTITY)


@pytest.fixture
def wt():
    """WriterT factory over the identity monad with string logs."""
    return writer_t(IDENTITY, STRING_MONOID)


@pytest.fixture
def sample_env():
    """Environment used by ReaderT tests."""
    return {'x': 2, 'y': 3, 'name': 'ada'}


@pytest.fixture
def tripwire():
    """A continuation that records every call, for short-circuit checks."""

    class Tripwire:
        def __init__(self):
            self.calls = []

        def __call__(self, value):
            self.calls.append(value)
            raise AssertionError(f'continuation should not run, got {value!r}')

        @property
        def fired(self):
            return bool(self.calls)

    return Tripwire()


@pytest.fixture
def captured_events(caplog):
    """Collect monadkit log events through a hook, with DEBUG enabled."""
    events = []
    caplog.set_level(logging.DEBUG, logger='monadkit')
    add_log_hook(events.append)
    yield events
    clear_log_hooks()


@pytest.fixture
def reset_config():
    """Restore the global toolkit config after a test that calls init()."""
    saved = _config._config
    yield
    _config._config = saved

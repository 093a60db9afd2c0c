"""Tests for toolkit configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

import monadkit
from monadkit import ToolkitConfig, get_config, init
from monadkit import _config
from monadkit._config import _detect_json_logs, _detect_log_level


@pytest.fixture
def logging_calls(monkeypatch):
    """Record configure_logging calls made by init() instead of touching the root logger."""
    calls = []
    monkeypatch.setattr(_config, 'configure_logging', lambda level, *, json_output: calls.append((level, json_output)))
    return calls


class TestToolkitConfig:
    """Tests for the ToolkitConfig dataclass."""

    def test_default_values(self) -> None:
        config = ToolkitConfig()
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = ToolkitConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_env_value_uppercased(self) -> None:
        with patch.dict(os.environ, {'MONADKIT_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_unset_is_none(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_blank_is_none(self) -> None:
        with patch.dict(os.environ, {'MONADKIT_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None


class TestDetectJsonLogs:
    """Tests for _detect_json_logs()."""

    def test_default_json(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_json_logs() is True

    def test_console(self) -> None:
        with patch.dict(os.environ, {'MONADKIT_LOG_FORMAT': 'Console'}):
            assert _detect_json_logs() is False

    def test_unknown_warns_and_falls_back(self, caplog) -> None:
        with patch.dict(os.environ, {'MONADKIT_LOG_FORMAT': 'yaml'}), caplog.at_level(logging.WARNING):
            assert _detect_json_logs() is True
        assert "Unknown MONADKIT_LOG_FORMAT value 'yaml'" in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self, reset_config) -> None:
        _config._config = None
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_explicit_values(self, reset_config, logging_calls) -> None:
        config = init(log_level='DEBUG', json_logs=False)
        assert config == ToolkitConfig(log_level='DEBUG', json_logs=False)
        assert get_config() is config
        assert logging_calls == [('DEBUG', False)]

    def test_env_values(self, reset_config, logging_calls) -> None:
        with patch.dict(os.environ, {'MONADKIT_LOG_LEVEL': 'info', 'MONADKIT_LOG_FORMAT': 'console'}):
            config = init()
        assert config == ToolkitConfig(log_level='INFO', json_logs=False)
        assert logging_calls == [('INFO', False)]

    def test_no_level_stays_silent(self, reset_config, logging_calls) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config.log_level is None
        assert logging_calls == []

    def test_exported_from_package(self) -> None:
        assert monadkit.init is init
        assert monadkit.get_config is get_config

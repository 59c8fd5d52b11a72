"""Tests for library configuration and logging."""

import json
import logging

import pytest
import structlog
from maybe_result import LibraryConfig, get_config, init, result
from maybe_result._config import reset


def _boom():
    raise ValueError('boom')


class TestConfigDefaults:
    """Tests for the default configuration."""

    def test_defaults(self):
        """Without init or environment, logging is off and Exception is caught."""
        config = get_config()
        assert config == LibraryConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.catch == (Exception,)

    def test_get_config_is_stable(self):
        """get_config returns the same object until reset."""
        assert get_config() is get_config()

    def test_config_is_frozen(self):
        """LibraryConfig is immutable."""
        with pytest.raises(AttributeError):
            get_config().log_level = 'DEBUG'  # type: ignore[misc]


class TestConfigEnvironment:
    """Tests for environment variable configuration."""

    def test_log_level_from_env(self, monkeypatch):
        """MAYBE_RESULT_LOG_LEVEL enables logging."""
        monkeypatch.setenv('MAYBE_RESULT_LOG_LEVEL', 'info')
        reset()
        assert get_config().log_level == 'INFO'
        assert logging.getLogger('maybe_result').level == logging.INFO

    def test_unknown_log_level_ignored(self, monkeypatch):
        """An unknown level leaves logging off."""
        monkeypatch.setenv('MAYBE_RESULT_LOG_LEVEL', 'chatty')
        reset()
        assert get_config().log_level is None

    @pytest.mark.parametrize('raw', ['0', 'false', 'No', 'off'])
    def test_json_logs_from_env(self, monkeypatch, raw):
        """MAYBE_RESULT_JSON_LOGS switches to console output."""
        monkeypatch.setenv('MAYBE_RESULT_JSON_LOGS', raw)
        reset()
        assert get_config().json_logs is False


class TestInit:
    """Tests for init()."""

    def test_init_returns_config(self):
        """init stores and returns the new configuration."""
        config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert get_config() is config

    def test_init_catch_changes_wrap_default(self):
        """The configured catch tuple is used by result.wrap."""
        init(catch=(KeyError,))
        with pytest.raises(ValueError):
            result.wrap(_boom)

        def missing():
            return {}['k']

        assert isinstance(result.wrap(missing).error, KeyError)

    def test_explicit_catch_overrides_config(self):
        """catch= on wrap wins over the configuration."""
        init(catch=(KeyError,))
        assert isinstance(result.wrap(_boom, catch=(ValueError,)).error, ValueError)


    def test_init_rejects_unknown_level(self):
        """An unknown explicit level raises ValueError and leaves no config."""
        with pytest.raises(ValueError, match='chatty'):
            init(log_level='chatty')
        assert get_config().log_level is None
        assert not logging.getLogger('maybe_result').handlers


class TestLogging:
    """Tests for structured logging of captured faults."""

    def test_silent_by_default(self, capsys):
        """Nothing is logged unless a level is configured."""
        result.wrap(_boom)
        captured = capsys.readouterr()
        assert captured.err == ''
        assert captured.out == ''

    def test_wrap_logs_captured_fault(self, capsys):
        """With DEBUG enabled, wrap emits a JSON event per captured fault."""
        init(log_level='DEBUG', json_logs=True)
        result.wrap(_boom)

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event['event'] == 'result.wrap.captured'
        assert event['error_type'] == 'ValueError'
        assert event['level'] == 'debug'

    def test_info_level_hides_debug_events(self, capsys):
        """Debug events are filtered at INFO."""
        init(log_level='INFO')
        result.wrap(_boom)
        assert capsys.readouterr().err == ''

    def test_host_structlog_config_untouched(self, capsys):
        """Enabling logging leaves the application's structlog setup alone."""
        processors = [structlog.processors.KeyValueRenderer()]
        structlog.configure(processors=processors)
        try:
            init(log_level='DEBUG')
            assert structlog.get_config()['processors'] == processors

            result.wrap(_boom)
            event = json.loads(capsys.readouterr().err.strip())
            assert event['event'] == 'result.wrap.captured'
        finally:
            structlog.reset_defaults()

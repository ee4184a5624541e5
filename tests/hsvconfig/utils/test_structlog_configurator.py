"""Tests for the structlog configurator module."""

import logging
from unittest.mock import Mock, patch

import pytest
import structlog

from hsvconfig.config.settings import LoggingConfig
from hsvconfig.utils.structlog_configurator import (
    _add_static_context,
    _configure_processors,
    _use_json,
    configure_structlog,
)


@pytest.fixture(autouse=True)
def isolated_root_logger():
    """Give each test its own root handler list and reset structlog afterwards."""
    root_logger = logging.getLogger()
    level = root_logger.level
    with patch.object(root_logger, "handlers", []):
        yield root_logger
    root_logger.setLevel(level)
    structlog.reset_defaults()


class TestAddStaticContext:
    """Test the _add_static_context processor."""

    def test_adds_static_fields_to_event_dict(self):
        """Should add static fields to all log events."""
        processor = _add_static_context({"service": "test", "version": "1.0.0"})
        event_dict = {"event": "test_event", "level": "info"}

        result = processor(Mock(spec=structlog.BoundLogger), "info", event_dict)

        assert result["service"] == "test"
        assert result["version"] == "1.0.0"
        assert result["event"] == "test_event"

    def test_empty_extra_fields(self):
        processor = _add_static_context({})

        result = processor(Mock(spec=structlog.BoundLogger), "info", {"event": "test"})

        assert result == {"event": "test"}


class TestConfigureProcessors:
    def test_includes_caller_when_requested(self):
        processors = _configure_processors(LoggingConfig(include_caller=True))

        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)

    def test_no_caller_by_default(self):
        processors = _configure_processors(LoggingConfig())

        assert not any(
            isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors
        )


class TestUseJson:
    def test_explicit_setting_wins(self):
        assert _use_json(LoggingConfig(json_logs=True)) is True
        assert _use_json(LoggingConfig(json_logs=False)) is False

    def test_auto_detects_terminal(self):
        with patch("hsvconfig.utils.structlog_configurator.sys.stdout") as stdout:
            stdout.isatty.return_value = True
            assert _use_json(LoggingConfig()) is False

            stdout.isatty.return_value = False
            assert _use_json(LoggingConfig()) is True


class TestConfigureStructlog:
    def test_installs_single_stdout_handler(self):
        configure_structlog(LoggingConfig(level="DEBUG", json_logs=True))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_unknown_level_falls_back_to_info(self):
        configure_structlog(LoggingConfig(level="chatty", json_logs=False))

        assert logging.getLogger().level == logging.INFO


"""Structlog-based logging configuration for hsvconfig.

Library modules log through the standard ``logging`` module; this routes those
records through structlog rendering, as JSON or human-readable console output.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

from hsvconfig import __version__
from hsvconfig.config.settings import LoggingConfig


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _use_json(config: LoggingConfig) -> bool:
    """JSON output when configured, otherwise only when not on a terminal."""
    if config.json_logs is not None:
        return config.json_logs
    return not sys.stdout.isatty()


def _configure_processors(config: LoggingConfig) -> list:
    """Build the shared structlog processor chain."""
    extra_fields = {
        "service": "hsvconfig",
        "version": __version__,
        **config.extra_fields,  # Allow config to override/add fields
    }

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    return processors


def _configure_handlers(config: LoggingConfig, processors: list) -> None:
    """Install a single stdout handler on the root logger."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if _use_json(config)
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def configure_structlog(config: LoggingConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: Logging settings
    """
    processors = _configure_processors(config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config, processors)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        log_level=config.level,
        json_output=_use_json(config),
    )


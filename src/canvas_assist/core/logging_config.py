"""
Structured Logging Configuration
structlog on top of the stdlib ``canvas_assist`` logger.
"""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from .config import Settings, get_settings

PACKAGE_LOGGER = "canvas_assist"


def _handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    return handler


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure logging from ``Settings.log_level`` and ``Settings.json_logs``.

    Only the package logger is touched, so a host application keeps its own
    root configuration. Calling again replaces the previous handler.

    Args:
        settings: Settings to read, defaults to the cached process settings
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(_handler(settings.json_logs))
    package_logger.setLevel(level)
    package_logger.propagate = False

    renderer = structlog.processors.JSONRenderer() if settings.json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


class LogContext:
    """Bind fields (e.g. ``component_id``) to every log line in scope."""

    def __init__(self, **fields: Any):
        self.fields = fields

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.fields)
        return self

    def __exit__(self, *exc: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.fields)

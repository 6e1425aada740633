"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    RequestValidator,
    clean_command,
    truncate_markup,
    MAX_COMMAND_LENGTH,
    MAX_MARKUP_LENGTH,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    extract_json,
    safe_json_dumps,
    JSONParseError,
    validate_json_depth,
)
from .tracing import init_tracer, get_tracer, trace_operation, trace_operation_async


def create_container(settings: Settings | None = None, metrics=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings, metrics)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "RequestValidator",
    "clean_command",
    "truncate_markup",
    "MAX_COMMAND_LENGTH",
    "MAX_MARKUP_LENGTH",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_depth",
    # Tracing
    "init_tracer",
    "get_tracer",
    "trace_operation",
    "trace_operation_async",
    # DI
    "create_container",
]

"""Input validation with strong typing."""

from typing import Any

from pydantic import BaseModel, ConfigDict


# Validation limits
MAX_COMMAND_LENGTH = 2_000
MAX_MARKUP_LENGTH = 8_000


class ValidationError(Exception):
    """Validation failed."""

    pass


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True  # Immutable by default
    )


def clean_command(command: Any, max_length: int = MAX_COMMAND_LENGTH) -> str:
    """
    Normalise a free-text command.

    Args:
        command: Raw command text
        max_length: Maximum allowed length after stripping

    Returns:
        Stripped command

    Raises:
        ValidationError: If the command is not a non-empty string within limits
    """
    if not isinstance(command, str):
        raise ValidationError(f"Command must be a string, got {type(command).__name__}")

    stripped = command.strip()
    if not stripped:
        raise ValidationError("Command cannot be empty")
    if len(stripped) > max_length:
        raise ValidationError(f"Command length {len(stripped)} exceeds maximum {max_length}")
    return stripped


def truncate_markup(markup: str | None, max_length: int = MAX_MARKUP_LENGTH) -> str | None:
    """Bound markup size before it reaches a prompt."""
    if markup is None or len(markup) <= max_length:
        return markup
    return markup[:max_length]

"""Command interpretation data models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from canvas_assist.core import RequestValidator
from canvas_assist.sync import ComponentSnapshot

ChangeSet = dict[str, Any]

DEFAULT_REASONING = "AI processed your request"
DEFAULT_CONFIDENCE = 0.8
DEFAULT_SUGGESTIONS = ("Try more specific commands",)


class CommandAction(str, Enum):
    """Kind of mutation a command performs."""

    STYLE_CHANGE = "style_change"
    CONTENT_UPDATE = "content_update"
    VISIBILITY_TOGGLE = "visibility_toggle"
    LAYOUT_MODIFICATION = "layout_modification"


class ResultSource(str, Enum):
    """Which pipeline branch produced a result."""

    MODEL = "model"
    MODEL_DEGRADED = "model_degraded"
    HEURISTIC = "heuristic"


class CommandResult(BaseModel):
    """Outcome of interpreting one command."""

    success: bool
    action: CommandAction = CommandAction.STYLE_CHANGE
    changes: ChangeSet = Field(default_factory=dict)
    reasoning: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    suggestions: list[str] = Field(default_factory=list)
    error: str | None = None
    source: ResultSource = Field(default=ResultSource.HEURISTIC, exclude=True)


class PageContext(BaseModel):
    """Canvas-wide context included in the prompt."""

    device: str = "desktop"
    theme: str = "modern"
    total_components: int = Field(default=5, ge=0)


class CommandRequest(RequestValidator):
    """Validated command against one component snapshot."""

    command: str = Field(min_length=1)
    snapshot: ComponentSnapshot
    page: PageContext = Field(default_factory=PageContext)

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Ensure command is non-empty after stripping."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Command cannot be empty")
        return stripped


class ModelReply(BaseModel):
    """
    JSON object returned by the model.

    Missing, null or empty optional values take their defaults.
    """

    success: bool = True
    action: CommandAction = CommandAction.STYLE_CHANGE
    changes: ChangeSet = Field(default_factory=dict)
    reasoning: str = DEFAULT_REASONING
    confidence: float = Field(default=DEFAULT_CONFIDENCE, ge=0.0, le=1.0)
    suggestions: list[str] = Field(default_factory=lambda: list(DEFAULT_SUGGESTIONS))
    error: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_empty(cls, data: Any) -> Any:
        """Treat null and empty values as unset."""
        if not isinstance(data, dict):
            return data
        return {k: v for k, v in data.items() if v is not None and v != "" and v != []}

    def to_result(self) -> CommandResult:
        """Convert to a command result."""
        return CommandResult(
            success=self.success,
            action=self.action,
            changes=self.changes,
            reasoning=self.reasoning,
            confidence=self.confidence,
            suggestions=self.suggestions,
            error=self.error,
            source=ResultSource.MODEL,
        )

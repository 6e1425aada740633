"""Command interpretation: context, model path and heuristic fallback."""

from .models import (
    ChangeSet,
    CommandAction,
    CommandRequest,
    CommandResult,
    ModelReply,
    PageContext,
    ResultSource,
)
from .context import ContextBuilder, NO_STYLES
from .heuristics import infer, infer_changes
from .interpreter import CommandInterpreter, DEGRADED_CONFIDENCE
from .suggestions import suggestions_for

__all__ = [
    "ChangeSet",
    "CommandAction",
    "CommandRequest",
    "CommandResult",
    "ModelReply",
    "PageContext",
    "ResultSource",
    "ContextBuilder",
    "NO_STYLES",
    "infer",
    "infer_changes",
    "CommandInterpreter",
    "DEGRADED_CONFIDENCE",
    "suggestions_for",
]

"""Field synchronisation and command interpretation for a visual page editor."""

from .core import Settings, get_settings, configure_logging, create_container
from .fields import FieldDescriptor, FieldRegistry, FieldType
from .sync import CanvasComponent, Component, ComponentSnapshot, StateSynchronizer, Trait
from .interpreter import CommandInterpreter, CommandResult, PageContext, suggestions_for
from .session import CommandInFlightError, CommandOutcome, EditorSession

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "create_container",
    "FieldDescriptor",
    "FieldRegistry",
    "FieldType",
    "CanvasComponent",
    "Component",
    "ComponentSnapshot",
    "StateSynchronizer",
    "Trait",
    "CommandInterpreter",
    "CommandResult",
    "PageContext",
    "suggestions_for",
    "CommandInFlightError",
    "CommandOutcome",
    "EditorSession",
]

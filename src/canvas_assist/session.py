"""
Editor Session
Tracks the selected component and routes form edits and commands to it.
"""

from dataclasses import dataclass, field
from typing import Any

from canvas_assist.core import get_logger
from canvas_assist.fields import FieldRegistry, ResolvedFieldSet
from canvas_assist.interpreter import CommandInterpreter, CommandResult, PageContext
from canvas_assist.sync import CanvasComponent, ComponentSnapshot, StateSynchronizer

logger = get_logger(__name__)


class SessionError(Exception):
    """Editor session misuse."""

    pass


class NoSelectionError(SessionError):
    """No component is selected."""

    pass


class CommandInFlightError(SessionError):
    """A command is already awaiting its result."""

    pass


@dataclass(frozen=True)
class CommandOutcome:
    """Result of a submitted command and what was written back."""

    result: CommandResult
    component_id: str
    applied: dict[str, Any] = field(default_factory=dict)
    discarded: bool = False


class EditorSession:
    """
    Single-selection editing session.

    One command at a time; a result that arrives after the selection moved
    to another component is discarded instead of applied.
    """

    def __init__(
        self,
        interpreter: CommandInterpreter,
        synchronizer: StateSynchronizer,
        registry: FieldRegistry,
    ) -> None:
        self.interpreter = interpreter
        self.synchronizer = synchronizer
        self.registry = registry
        self._selected: CanvasComponent | None = None
        self._pending_id: str | None = None

    @property
    def selected(self) -> CanvasComponent | None:
        return self._selected

    @property
    def busy(self) -> bool:
        """True while a command is awaiting its result."""
        return self._pending_id is not None

    def select(self, component: CanvasComponent) -> ComponentSnapshot:
        """Select a component and return a fresh snapshot of it."""
        self._selected = component
        snapshot = self.synchronizer.snapshot(component)
        logger.info("component_selected", component_id=snapshot.component_id, type=snapshot.component_type)
        return snapshot

    def deselect(self) -> None:
        self._selected = None
        logger.info("component_deselected")

    def snapshot(self) -> ComponentSnapshot:
        return self.synchronizer.snapshot(self._require_selection())

    def fields(self) -> ResolvedFieldSet:
        """Editable fields of the selected component."""
        snapshot = self.snapshot()
        return self.registry.resolve(snapshot.component_type, snapshot.smart_object_id)

    def values(self) -> dict[str, Any]:
        """Current value of every editable field."""
        snapshot = self.snapshot()
        fields = self.registry.resolve(snapshot.component_type, snapshot.smart_object_id)
        return self.synchronizer.extract_values(snapshot, fields)

    def edit_field(self, field_name: str, value: Any) -> None:
        """Write one form edit into the selected component."""
        self.synchronizer.apply_change(self._require_selection(), field_name, value)

    async def submit_command(self, command: str, page: PageContext | None = None) -> CommandOutcome:
        """
        Interpret a command against the selected component and apply it.

        Raises:
            NoSelectionError: Nothing is selected
            CommandInFlightError: Another command has not finished yet
        """
        component = self._require_selection()
        if self._pending_id is not None:
            raise CommandInFlightError(f"Command already running for {self._pending_id}")

        snapshot = self.synchronizer.snapshot(component)
        origin_id = snapshot.component_id
        self._pending_id = origin_id
        try:
            result = await self.interpreter.interpret(command, snapshot, page)
        finally:
            self._pending_id = None

        current = self._selected
        if current is None or current.get_id() != origin_id:
            logger.warning("stale_result_discarded", component_id=origin_id)
            return CommandOutcome(result=result, component_id=origin_id, discarded=True)

        applied: dict[str, Any] = {}
        if result.success and result.changes:
            applied = self.synchronizer.apply_changes(current, result.changes)

        return CommandOutcome(result=result, component_id=origin_id, applied=applied)

    def _require_selection(self) -> CanvasComponent:
        if self._selected is None:
            raise NoSelectionError("No component selected")
        return self._selected

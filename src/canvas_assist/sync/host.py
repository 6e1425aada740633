"""Canvas host contract consumed by the synchronizer."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TraitLike(Protocol):
    """Named configuration slot of a component."""

    name: str
    value: Any


@runtime_checkable
class CanvasComponent(Protocol):
    """Selected element as exposed by the canvas editor."""

    def get_id(self) -> str:
        """Stable component identity."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        """Read a component property ('type', 'tagName', 'attributes', 'traits', 'content')."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Write a component property."""
        ...

    def get_style(self) -> dict[str, Any]:
        """Current inline style."""
        ...

    def add_style(self, style: dict[str, Any]) -> None:
        """Merge properties into the style."""
        ...

    def remove_style(self, prop: str) -> None:
        """Drop one style property."""
        ...

    def trigger(self, event: str) -> None:
        """Emit an editor event."""
        ...

    def parent(self) -> "CanvasComponent | None":
        """Immediate parent, if any."""
        ...

    def to_html(self) -> str | None:
        """Outer markup, None when no view exists."""
        ...

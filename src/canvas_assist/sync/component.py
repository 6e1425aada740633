"""In-memory canvas component for headless editing."""

import html
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .values import kebab_case

VOID_TAGS = frozenset({"img", "br", "hr", "input"})


@dataclass
class Trait:
    """Named configuration slot."""

    name: str
    value: Any = None


class Component:
    """
    Minimal implementation of the canvas component contract.

    Holds the dual trait/attribute store plus inline style, and records
    emitted events so callers can observe notifications.
    """

    def __init__(
        self,
        type: str = "default",
        tag_name: str = "div",
        component_id: str | None = None,
        attributes: dict[str, Any] | None = None,
        traits: list[Trait] | None = None,
        style: dict[str, Any] | None = None,
        content: str = "",
        parent: "Component | None" = None,
    ) -> None:
        self._id = component_id or f"c{uuid.uuid4().hex[:8]}"
        self._props: dict[str, Any] = {
            "type": type,
            "tagName": tag_name,
            "attributes": dict(attributes or {}),
            "traits": list(traits or []),
            "content": content,
        }
        self._style: dict[str, Any] = dict(style or {})
        self._parent = parent
        self._listeners: dict[str, list[Callable[..., None]]] = {}
        self.events: list[str] = []
        self.render_count = 0

    def get_id(self) -> str:
        return self._id

    def get(self, key: str, default: Any = None) -> Any:
        return self._props.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._props[key] = value
        self.trigger(f"change:{key}")

    def get_trait(self, name: str) -> Trait | None:
        """First trait with a matching name."""
        return next((t for t in self._props["traits"] if t.name == name), None)

    def get_style(self) -> dict[str, Any]:
        return dict(self._style)

    def add_style(self, style: dict[str, Any]) -> None:
        self._style.update(style)
        self.trigger("change:style")

    def remove_style(self, prop: str) -> None:
        self._style.pop(prop, None)
        self.trigger("change:style")

    def on(self, event: str, callback: Callable[..., None]) -> None:
        """Register an event listener."""
        self._listeners.setdefault(event, []).append(callback)

    def trigger(self, event: str) -> None:
        self.events.append(event)
        for callback in self._listeners.get(event, []):
            callback(self)

    def render(self) -> None:
        """Re-render the (virtual) view."""
        self.render_count += 1

    def parent(self) -> "Component | None":
        return self._parent

    def to_html(self) -> str | None:
        tag = self._props["tagName"] or "div"
        parts = [tag, f'id="{html.escape(self._id)}"']

        for key, value in self._props["attributes"].items():
            if value is None or key == "id":
                continue
            parts.append(f'{key}="{html.escape(str(value))}"')

        if self._style:
            css = "; ".join(f"{kebab_case(k)}: {v}" for k, v in self._style.items())
            parts.append(f'style="{html.escape(css)}"')

        opening = f"<{' '.join(parts)}>"
        if tag.lower() in VOID_TAGS:
            return opening
        return f"{opening}{html.escape(self._props['content'] or '')}</{tag}>"

    def __repr__(self) -> str:
        return f"Component(id={self._id!r}, type={self._props['type']!r})"

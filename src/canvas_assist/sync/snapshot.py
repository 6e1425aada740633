"""Read-only component snapshots."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .host import CanvasComponent

SMART_OBJECT_ATTRIBUTES = ("data-smart-object-id", "data-smart-object")


class ParentContext(BaseModel):
    """Immediate parent of the selected element."""

    model_config = ConfigDict(frozen=True)

    type: str
    style: dict[str, Any] = Field(default_factory=dict)


class ComponentSnapshot(BaseModel):
    """
    Point-in-time view of a component.

    Built fresh on every selection and command; never cached across
    selection changes.
    """

    model_config = ConfigDict(frozen=True)

    component_id: str
    component_type: str
    tag_name: str = "div"
    smart_object_id: str | None = None
    content: str = ""
    traits: dict[str, Any] = Field(default_factory=dict)
    attributes: dict[str, Any] = Field(default_factory=dict)
    computed_style: dict[str, Any] = Field(default_factory=dict)
    parent: ParentContext | None = None
    markup: str | None = None

    @classmethod
    def from_component(cls, component: CanvasComponent) -> "ComponentSnapshot":
        """Capture the current state of a host component."""
        attributes = dict(component.get("attributes") or {})
        tag_name = component.get("tagName") or "div"

        traits: dict[str, Any] = {}
        for trait in component.get("traits") or []:
            # First trait wins on duplicate names, matching lookup order
            traits.setdefault(trait.name, trait.value)

        smart_object_id = next(
            (attributes[key] for key in SMART_OBJECT_ATTRIBUTES if attributes.get(key)), None
        )

        parent = component.parent()
        parent_context = None
        if parent is not None:
            parent_context = ParentContext(
                type=parent.get("tagName") or parent.get("type") or "div",
                style=dict(parent.get_style() or {}),
            )

        return cls(
            component_id=component.get_id(),
            component_type=component.get("type") or tag_name,
            tag_name=tag_name,
            smart_object_id=smart_object_id,
            content=component.get("content") or "",
            traits=traits,
            attributes=attributes,
            computed_style=dict(component.get_style() or {}),
            parent=parent_context,
            markup=component.to_html(),
        )

    @property
    def is_button_like(self) -> bool:
        """Button elements or components typed as buttons."""
        return "button" in (self.component_type.lower(), self.tag_name.lower())

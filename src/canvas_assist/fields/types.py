"""Field descriptor models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldType(str, Enum):
    """Editable field widget types."""

    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    COLOR = "color"
    IMAGE = "image"


class FieldOption(BaseModel):
    """A single choice of a select field."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class FieldDescriptor(BaseModel):
    """Static metadata describing one editable property."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    type: FieldType
    name: str = Field(..., min_length=1)
    label: str
    group: str | None = Field(default=None, description="Semantic group, 'general' when unset")
    options: tuple[FieldOption, ...] | None = None
    min: float | None = None
    max: float | None = None
    step: float | None = None
    placeholder: str | None = None
    icon: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Accept the legacy 'image-asset' spelling."""
        if v == "image-asset":
            return FieldType.IMAGE
        return v


class SettingGroup(BaseModel):
    """Display metadata for a field group."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    icon: str = "config"


def field(
    type: str,
    name: str,
    label: str,
    group: str | None = None,
    options: list[tuple[str, str]] | None = None,
    **extra: Any,
) -> FieldDescriptor:
    """Shorthand constructor used by the built-in tables."""
    return FieldDescriptor(
        type=type,
        name=name,
        label=label,
        group=group,
        options=tuple(FieldOption(value=v, label=l) for v, l in options) if options else None,
        **extra,
    )

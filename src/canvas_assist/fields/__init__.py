"""Field registry: editable field descriptors per component."""

from .types import FieldDescriptor, FieldOption, FieldType, SettingGroup, field
from .registry import (
    FieldRegistry,
    RegistryError,
    ResolvedFieldSet,
    SETTING_GROUPS,
    STYLE_GROUPS,
    GENERAL_GROUP,
    group_by_group,
    group_info,
    resolve_style_subset,
    resolve_settings_subset,
)

__all__ = [
    "FieldDescriptor",
    "FieldOption",
    "FieldType",
    "SettingGroup",
    "field",
    "FieldRegistry",
    "RegistryError",
    "ResolvedFieldSet",
    "SETTING_GROUPS",
    "STYLE_GROUPS",
    "GENERAL_GROUP",
    "group_by_group",
    "group_info",
    "resolve_style_subset",
    "resolve_settings_subset",
]

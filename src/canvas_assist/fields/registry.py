"""
Field Registry
Resolves the editable fields of a component from immutable lookup tables.
"""

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from canvas_assist.core import get_logger
from .types import FieldDescriptor, SettingGroup
from .basic import BASIC_FIELDS
from .content import CONTENT_FIELDS
from .ecommerce import ECOMMERCE_FIELDS

logger = get_logger(__name__)

DEFAULT_KEY = "default"
GENERAL_GROUP = "general"

# Groups rendered by the styles panel; everything else belongs to settings
STYLE_GROUPS: tuple[str, ...] = ("style", "dimensions", "layout", "appearance")

ResolvedFieldSet = tuple[FieldDescriptor, ...]


SETTING_GROUPS: Mapping[str, SettingGroup] = MappingProxyType({
    key: SettingGroup(key=key, name=name, icon=icon)
    for key, name, icon in [
        ("content", "Content", "text"),
        ("media", "Media", "image"),
        ("layout", "Layout", "layout"),
        ("style", "Style", "style"),
        ("typography", "Typography", "text"),
        ("configuration", "Configuration", "config"),
        ("display", "Display", "display"),
        ("features", "Features", "features"),
        ("dimensions", "Dimensions", "ruler"),
        ("attributes", "Attributes", "tag"),
        ("product", "Product", "product"),
        ("rating", "Rating", "rating"),
        ("badge", "Badge", "badge"),
        ("cta", "Call to Action", "cta"),
        ("navigation", "Navigation", "navigation"),
        ("animation", "Animation", "animation"),
        ("playback", "Playback", "playback"),
    ]
})


class RegistryError(Exception):
    """Registry tables are inconsistent."""

    pass


def group_info(key: str) -> SettingGroup:
    """Display metadata for a group, synthesised for unknown keys."""
    return SETTING_GROUPS.get(key) or SettingGroup(key=key, name=key, icon="config")


def group_by_group(fields: Iterable[FieldDescriptor]) -> dict[str, list[FieldDescriptor]]:
    """
    Group fields by their group, preserving order.

    Groups appear in first-seen order and fields keep their relative order
    inside each group. Fields without a group land in 'general'.
    """
    grouped: dict[str, list[FieldDescriptor]] = {}
    for descriptor in fields:
        grouped.setdefault(descriptor.group or GENERAL_GROUP, []).append(descriptor)
    return grouped


def resolve_style_subset(
    fields: Iterable[FieldDescriptor],
    filter_groups: Sequence[str] = STYLE_GROUPS,
) -> ResolvedFieldSet:
    """Keep only fields whose group is in the allow-list."""
    allowed = set(filter_groups)
    return tuple(f for f in fields if (f.group or "") in allowed)


def resolve_settings_subset(
    fields: Iterable[FieldDescriptor],
    style_groups: Sequence[str] = STYLE_GROUPS,
) -> ResolvedFieldSet:
    """Complement of the style subset: fields shown on the settings tab."""
    excluded = set(style_groups)
    return tuple(f for f in fields if (f.group or "") not in excluded)


def default_tables() -> dict[str, Sequence[FieldDescriptor]]:
    """Built-in tables merged with later tables winning on key collision."""
    return {**ECOMMERCE_FIELDS, **CONTENT_FIELDS, **BASIC_FIELDS}


class FieldRegistry:
    """
    Immutable lookup from component type or smart object id to fields.

    Tables are copied and frozen at construction; the registry never changes
    afterwards, so concurrent readers need no synchronisation.
    """

    def __init__(self, tables: Mapping[str, Sequence[FieldDescriptor]] | None = None) -> None:
        source = default_tables() if tables is None else tables
        frozen: dict[str, ResolvedFieldSet] = {}

        for key, fields in source.items():
            fields = tuple(fields)
            names = [f.name for f in fields]
            duplicates = sorted({n for n in names if names.count(n) > 1})
            if duplicates:
                raise RegistryError(f"Duplicate field names in '{key}': {', '.join(duplicates)}")
            frozen[key] = fields

        self._tables: Mapping[str, ResolvedFieldSet] = MappingProxyType(frozen)
        logger.debug("registry_loaded", entries=len(frozen))

    def __contains__(self, key: str) -> bool:
        return key in self._tables

    def keys(self) -> list[str]:
        """Registered component types and smart object ids."""
        return list(self._tables.keys())

    def resolve(self, component_type: str | None, smart_object_id: str | None = None) -> ResolvedFieldSet:
        """
        Resolve the fields for a component.

        A registered smart object id wins outright; otherwise the component
        type is used; otherwise the generic default set.

        Args:
            component_type: Raw component type (tag or editor type)
            smart_object_id: Stable semantic id of a smart object

        Returns:
            Ordered, immutable field set
        """
        if smart_object_id and smart_object_id in self._tables:
            return self._tables[smart_object_id]

        if component_type and component_type in self._tables:
            return self._tables[component_type]

        return self._tables.get(DEFAULT_KEY, ())

    def resolve_grouped(
        self, component_type: str | None, smart_object_id: str | None = None
    ) -> dict[str, list[FieldDescriptor]]:
        """Resolve and group in one step."""
        return group_by_group(self.resolve(component_type, smart_object_id))


__all__ = [
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
    "default_tables",
]

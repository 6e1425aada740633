"""State synchronisation between a component's traits and attributes."""

from .host import CanvasComponent, TraitLike
from .component import Component, Trait
from .snapshot import ComponentSnapshot, ParentContext
from .values import kebab_case, attribute_keys, canonical_attribute, parse_float
from .synchronizer import StateSynchronizer, coerce_value, resolve_raw_value

__all__ = [
    "CanvasComponent",
    "TraitLike",
    "Component",
    "Trait",
    "ComponentSnapshot",
    "ParentContext",
    "kebab_case",
    "attribute_keys",
    "canonical_attribute",
    "parse_float",
    "StateSynchronizer",
    "coerce_value",
    "resolve_raw_value",
]

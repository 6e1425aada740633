"""Static command suggestions per component type."""

from types import MappingProxyType

DEFAULT_SUGGESTIONS = ("Make this blue", "Center this element", "Add a border")

SUGGESTIONS = MappingProxyType(
    {
        "button": ("Make this blue", "Add hover effect", "Make it larger"),
        "h1": ("Make this larger", "Center this heading", "Change color to blue"),
        "p": ("Center this text", "Make text larger", "Change color to gray"),
        "div": ("Add a border", "Add background color", "Center the content"),
    }
)


def suggestions_for(component_type: str | None) -> list[str]:
    """Example commands for a component type."""
    return list(SUGGESTIONS.get(component_type or "", DEFAULT_SUGGESTIONS))

"""Value helpers shared by the synchronizer and the interpreter."""

import re
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"([A-Z])")
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CSS_LENGTH = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))\s*(px|em|rem|%|pt|vw|vh)?\s*$")


def kebab_case(name: str) -> str:
    """backgroundColor -> background-color."""
    return _CAMEL_BOUNDARY.sub(r"-\1", name).lower()


def attribute_keys(name: str) -> tuple[str, str, str]:
    """Attribute keys tried, in order, when no trait holds a field."""
    return (f"data-{kebab_case(name)}", f"data-{name}", name)


def canonical_attribute(name: str) -> str:
    """Attribute key written for a field."""
    return f"data-{kebab_case(name)}"


def parse_float(raw: Any) -> float | None:
    """Parse the leading number of a string, None when there is none."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        return None
    match = _LEADING_NUMBER.match(raw)
    return float(match.group(1)) if match else None


def split_length(raw: Any) -> tuple[float, str] | None:
    """Split a CSS length into (number, unit); unitless numbers are px."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw), "px"
    if not isinstance(raw, str):
        return None
    match = _CSS_LENGTH.match(raw)
    if not match:
        return None
    return float(match.group(1)), match.group(2) or "px"


def format_length(value: float, unit: str = "px") -> str:
    """20.0 -> '20px'; up to four decimals, 1.625 -> '1.625px'."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return f"{text}{unit}"

"""Fast JSON extraction and encoding for model responses."""

from typing import Any
import json

import msgspec
import orjson

MAX_JSON_DEPTH = 20


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def extract_json_boundaries(text: str) -> tuple[str, int, int] | None:
    """
    Extract JSON string and boundaries from text.

    Args:
        text: Text potentially containing JSON

    Returns:
        (extracted_text, start, end) or None if not found
    """
    working_text = text

    # Remove markdown code blocks
    if "```" in working_text:
        if "```json" in working_text:
            start_marker = working_text.find("```json") + 7
        else:
            start_marker = working_text.find("```") + 3

        end_marker = working_text.find("```", start_marker)
        if end_marker != -1:
            working_text = working_text[start_marker:end_marker].strip()

    # Greedy: first "{" to last "}"
    start = working_text.find("{")
    end = working_text.rfind("}")

    if start == -1 or end == -1 or end < start:
        return None

    return (working_text, start, end + 1)


def extract_json(text: str, max_depth: int = MAX_JSON_DEPTH) -> dict[str, Any]:
    """
    Extract and parse the JSON object embedded in model output.

    Args:
        text: Text containing JSON
        max_depth: Maximum allowed nesting depth

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If no object is found or it does not parse
    """
    boundaries = extract_json_boundaries(text.strip())
    if boundaries is None:
        raise JSONParseError("No JSON object found in text")

    extracted_text, start, end = boundaries
    json_str = extracted_text[start:end]

    # Try msgspec first (fastest)
    try:
        result = msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError:
        # msgspec is strict about a few inputs stdlib accepts (NaN etc)
        try:
            result = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")

    validate_json_depth(result, max_depth)
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    return json.dumps(obj, indent=indent if indent > 0 else None, default=str)


def validate_json_depth(obj: Any, max_depth: int = MAX_JSON_DEPTH, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent stack overflow.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)

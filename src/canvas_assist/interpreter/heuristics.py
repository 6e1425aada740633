"""
Heuristic Inference
Deterministic keyword rules used whenever the model path is unavailable.
"""

from canvas_assist.sync import ComponentSnapshot
from canvas_assist.sync.values import format_length, split_length
from .models import ChangeSet, CommandAction, CommandResult, ResultSource

BLUE = "#3b82f6"
RED = "#ef4444"
GREEN = "#10b981"

DEFAULT_FONT_SIZE = "16px"
GROW_FACTOR = 1.25
SHRINK_FACTOR = 0.8

NEUTRAL_CHANGES: ChangeSet = {
    "transition": "all 0.3s ease",
    "boxShadow": "0 2px 4px rgba(0, 0, 0, 0.1)",
}


def _result(
    changes: ChangeSet, reasoning: str, confidence: float, suggestions: list[str]
) -> CommandResult:
    return CommandResult(
        success=True,
        action=CommandAction.STYLE_CHANGE,
        changes=changes,
        reasoning=reasoning,
        confidence=confidence,
        suggestions=suggestions,
        source=ResultSource.HEURISTIC,
    )


def _has_background(style: dict) -> bool:
    background = style.get("backgroundColor")
    return bool(background) and background != "transparent"


def _scaled_font_size(style: dict, factor: float) -> tuple[str, str]:
    current = style.get("fontSize") or DEFAULT_FONT_SIZE
    parsed = split_length(current) or split_length(DEFAULT_FONT_SIZE)
    number, unit = parsed
    return str(current), format_length(number * factor, unit)


def _blue(snapshot: ComponentSnapshot) -> CommandResult:
    style = snapshot.computed_style
    target = "backgroundColor" if snapshot.is_button_like and _has_background(style) else "color"
    label = "background" if target == "backgroundColor" else "text color"
    return _result(
        {target: BLUE},
        f"Applied blue {label} based on element type and current styles",
        0.95,
        [
            'Try "make text blue"' if target == "backgroundColor" else 'Try "make background blue"',
            'Use "darker blue" for emphasis',
        ],
    )


def _red(snapshot: ComponentSnapshot) -> CommandResult:
    return _result(
        {"color": RED},
        "Applied red text color",
        0.9,
        ['Try "add a red border" for an outline', 'Use "make this blue" to switch back'],
    )


def _center(snapshot: ComponentSnapshot) -> CommandResult:
    current = snapshot.computed_style.get("textAlign") or "left"
    if current == "center":
        return _result(
            {},
            "Element is already centered",
            1.0,
            ['Try "align left" to change', 'Use "center the entire element" for different centering'],
        )
    return _result(
        {"textAlign": "center"},
        f"Changed text alignment from {current} to center",
        0.94,
        ['Try "align left" or "align right" to adjust'],
    )


def _larger(snapshot: ComponentSnapshot) -> CommandResult:
    current, new_size = _scaled_font_size(snapshot.computed_style, GROW_FACTOR)
    return _result(
        {"fontSize": new_size},
        f"Increased font size from {current} to {new_size}",
        0.88,
        ['Try "smaller" to reduce size', 'Use "much larger" for bigger increase'],
    )


def _smaller(snapshot: ComponentSnapshot) -> CommandResult:
    current, new_size = _scaled_font_size(snapshot.computed_style, SHRINK_FACTOR)
    return _result(
        {"fontSize": new_size},
        f"Decreased font size from {current} to {new_size}",
        0.88,
        ['Try "larger" to increase size', 'Use "much smaller" for bigger decrease'],
    )


def _border(snapshot: ComponentSnapshot, command: str) -> CommandResult:
    style = snapshot.computed_style
    color = RED if "red" in command else GREEN if "green" in command else BLUE
    verb = "Updated" if style.get("border") or style.get("borderWidth") else "Added"
    return _result(
        {"border": f"2px solid {color}", "borderRadius": "4px"},
        f"{verb} border with {color} color and rounded corners",
        0.89,
        ['Try "thick border" for 3px width', 'Use "remove border" to clear'],
    )


def _neutral(snapshot: ComponentSnapshot) -> CommandResult:
    styles = ", ".join(snapshot.computed_style) or "default browser styles"
    return _result(
        dict(NEUTRAL_CHANGES),
        f"Applied subtle enhancements to {snapshot.component_type} with current styles: {styles}",
        0.7,
        [
            'Try "make this blue" for color changes',
            'Use "center this text" for alignment',
            'Say "add a border" for styling',
        ],
    )


def infer(command: str, snapshot: ComponentSnapshot) -> CommandResult:
    """
    Map command keywords to a change set.

    Rules are tried in a fixed order and the first match wins. The result
    is always successful, and its changes are empty only when the element
    is already in the requested state.
    """
    text = command.lower()

    match text:
        case s if "blue" in s:
            return _blue(snapshot)
        case s if "red" in s:
            return _red(snapshot)
        case s if "center" in s:
            return _center(snapshot)
        case s if "large" in s or "bigger" in s:
            return _larger(snapshot)
        case s if "smaller" in s:
            return _smaller(snapshot)
        case s if "border" in s:
            return _border(snapshot, s)
        case _:
            return _neutral(snapshot)


def infer_changes(command: str, snapshot: ComponentSnapshot) -> ChangeSet:
    """Changes the heuristic rules would make for a command."""
    return infer(command, snapshot).changes

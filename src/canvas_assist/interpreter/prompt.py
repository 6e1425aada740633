"""
Command Interpretation Prompts
Scope statement and response contract sent to the model.
"""

# ============================================================================
# Scope
# ============================================================================

SCOPE_STATEMENT = """SCOPE: Modify only the selected element. Full context provided for understanding, not modification.

ALLOWED:
- Add/modify/remove CSS properties within selected element
- Change content and text
- Reorganize child elements if requested
- Add/remove CSS classes (except gjs-* classes)
- Override existing styles when needed

FORBIDDEN:
- Modify elements outside selected component
- Change gjs-* classes or element root ID
- Modify parent/sibling elements

RULES:
- Remove conflicting CSS properties
- Make minimal necessary changes
- Prioritize user intent over existing styles"""


# ============================================================================
# Response contract
# ============================================================================

RESPONSE_FORMAT = """RESPONSE (JSON only):
{
  "success": boolean,
  "action": "style_change"|"content_update"|"layout_modification"|"visibility_toggle",
  "changes": {
    // CSS properties: add/modify/remove (null to remove)
    // Examples: "color": "#3b82f6", "margin": null
  },
  "reasoning": "Brief explanation",
  "confidence": 0.0-1.0,
  "suggestions": ["suggestion1", "suggestion2"]
}"""


COMMAND_PROMPT_TEMPLATE = """You are an AI web design assistant for a visual page editor.

CONTEXT:
Device: {device} | Theme: {theme} | Components: {total_components}

ELEMENT:
{element}

STYLES:
{styles}

TARGET: {component_type} (ID: {component_id})
CONTENT: "{content}"
COMMAND: "{command}"

{scope}

TASK: Analyze and modify only the selected element to fulfill the user's request.

{response_format}"""


def get_command_prompt(
    *,
    command: str,
    element: str,
    styles: str,
    component_type: str,
    component_id: str,
    content: str,
    device: str = "desktop",
    theme: str = "modern",
    total_components: int = 5,
) -> str:
    """Render the full prompt for one command."""
    return COMMAND_PROMPT_TEMPLATE.format(
        device=device,
        theme=theme,
        total_components=total_components,
        element=element,
        styles=styles,
        component_type=component_type,
        component_id=component_id,
        content=content,
        command=command,
        scope=SCOPE_STATEMENT,
        response_format=RESPONSE_FORMAT,
    )

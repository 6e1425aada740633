"""
Context Builder
Bounded textual context for a command against one element.
"""

import re

from canvas_assist.core import get_logger, safe_json_dumps, truncate_markup, MAX_MARKUP_LENGTH
from canvas_assist.sync import ComponentSnapshot
from .models import CommandRequest
from .prompt import get_command_prompt

logger = get_logger(__name__)

NO_STYLES = "No styles (browser defaults)"
VOID_TAGS = frozenset({"img", "br", "hr", "input"})

# Editor bookkeeping attributes (data-gjs-type="..." and friends)
_BOOKKEEPING_ATTR = re.compile(r'data-gjs[^=\s]*="[^"]*"')
_WHITESPACE = re.compile(r"\s+")


class ContextBuilder:
    """Builds the prompt context for the command interpreter."""

    def __init__(self, max_markup_length: int = MAX_MARKUP_LENGTH) -> None:
        self.max_markup_length = max_markup_length

    def css_context(self, snapshot: ComponentSnapshot) -> str:
        """Current style sorted by property name."""
        styles = snapshot.computed_style
        if not styles:
            return NO_STYLES

        entries = "; ".join(f"{prop}: {value}" for prop, value in sorted(styles.items()))
        return f"Current: {{{entries}}}"

    def html_context(self, snapshot: ComponentSnapshot) -> str:
        """Sanitised outer markup, or a synthesised stand-in when there is none."""
        if snapshot.markup:
            clean = _BOOKKEEPING_ATTR.sub("", snapshot.markup)
            clean = _WHITESPACE.sub(" ", clean).strip()
            text = f"HTML: {truncate_markup(clean, self.max_markup_length)}"
        else:
            text = f"HTML: {self.synthesize_markup(snapshot)}"

        if snapshot.parent is not None:
            text += f"\nParent: <{snapshot.parent.type}> {safe_json_dumps(snapshot.parent.style)}"
        return text

    @staticmethod
    def synthesize_markup(snapshot: ComponentSnapshot) -> str:
        """Tag, id, selection class and content of an element without a view."""
        tag = snapshot.tag_name or snapshot.component_type
        markup = f"<{tag}"

        if snapshot.component_id and snapshot.component_id != "undefined":
            markup += f' id="{snapshot.component_id}"'

        markup += ' class="gjs-selected">'

        if tag.lower() not in VOID_TAGS:
            markup += snapshot.content or "Element content"
            markup += f"</{tag}>"

        return markup

    def build(self, request: CommandRequest) -> str:
        """Full prompt for a validated request."""
        snapshot = request.snapshot
        prompt = get_command_prompt(
            command=request.command,
            element=self.html_context(snapshot),
            styles=self.css_context(snapshot),
            component_type=snapshot.tag_name or snapshot.component_type,
            component_id=snapshot.component_id,
            content=snapshot.content,
            device=request.page.device,
            theme=request.page.theme,
            total_components=request.page.total_components,
        )
        logger.debug("context_built", component_id=snapshot.component_id, prompt_length=len(prompt))
        return prompt

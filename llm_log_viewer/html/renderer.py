"""HTML renderers for chat conversations."""

from dataclasses import dataclass
from typing import Optional

from markupsafe import Markup

from ..models import AssistantRole, Conversation, OtherRole, SystemRole, Turn, UserRole
from ..renderer import Renderer
from ..timings import log_timing
from .utils import (
    escape_html,
    get_template_environment,
    get_theme,
    render_fenced_text,
    render_markdown,
)

DEFAULT_TITLE = "Chat Export"


@dataclass
class TemplateRow:
    """One turn, prepared for the transcript template."""

    css_class: str
    avatar: Markup
    badge: Optional[Markup]
    content: Markup
    avatar_first: bool


class HtmlRenderer(Renderer):
    """Self-contained HTML page with chat bubbles.

    Each text block is fence-sanitized and converted line by line:
    plain lines are escaped, fenced blocks become ``<pre><code>``.
    """

    white_space = "pre-wrap"

    def __init__(self, theme: str = "dark"):
        super().__init__()
        self.theme = get_theme(theme)

    # -------------------------------------------------------------------------
    # Per-role presentation
    # -------------------------------------------------------------------------

    def avatar_UserRole(self, role: UserRole) -> str:  # noqa: ARG002
        return "U"

    def avatar_AssistantRole(self, role: AssistantRole) -> str:  # noqa: ARG002
        return "A"

    def avatar_SystemRole(self, role: SystemRole) -> str:  # noqa: ARG002
        return "S"

    def avatar_OtherRole(self, role: OtherRole) -> str:  # noqa: ARG002
        return "?"

    def format_text(self, text: str) -> str:
        """Convert one block of chat text to HTML."""
        return render_fenced_text(text)

    def _row(self, turn: Turn) -> TemplateRow:
        is_user = isinstance(turn.role, UserRole)
        # Known roles are identified by avatar and side; others get a badge
        show_badge = isinstance(turn.role, (SystemRole, OtherRole))
        return TemplateRow(
            css_class="user" if is_user else "assist",
            avatar=Markup(escape_html(self._dispatch_role("avatar", turn.role, "?"))),
            badge=Markup(escape_html(self.role_label(turn.role))) if show_badge else None,
            content=Markup(self.format_text(turn.content)),
            avatar_first=not is_user,
        )

    def generate(
        self, conversation: Conversation, title: Optional[str] = None
    ) -> str:
        """Generate a complete HTML document."""
        with log_timing(lambda: f"Render {len(conversation.turns)} turns"):
            system = None
            if conversation.system is not None:
                system = Markup(self.format_text(conversation.system))
            rows = [self._row(turn) for turn in conversation.turns]

        with log_timing("Template rendering"):
            template = get_template_environment().get_template("transcript.html")
            html_output = template.render(
                title=title or DEFAULT_TITLE,
                theme=self.theme,
                white_space=self.white_space,
                system=system,
                rows=rows,
            )
        return html_output


class PreviewRenderer(HtmlRenderer):
    """HTML page whose bubbles are rendered as Markdown.

    Stands in for an interactive viewer: text is sanitized and then
    handed to a CommonMark renderer instead of the line converter.
    """

    white_space = "normal"

    def format_text(self, text: str) -> str:
        return render_markdown(text)

"""Markdown renderer for chat conversations."""

from typing import Optional

from ..models import Conversation, Turn
from ..renderer import Renderer


class MarkdownRenderer(Renderer):
    """Markdown renderer.

    Content is emitted raw, without fence sanitizing: the output is meant
    for Markdown-aware consumers that cope with unbalanced fences.
    """

    def _system_section(self, system: str) -> str:
        return f"# System\n{system}\n\n---\n\n"

    def turn_snippet(self, turn: Turn) -> str:
        """Markdown for a single turn, as copied from its chat bubble."""
        # Two trailing spaces force a hard line break after the label
        return f"**{self.role_label(turn.role)}**  \n{turn.content}\n"

    def _turn(self, turn: Turn) -> str:
        return self.turn_snippet(turn) + "\n"

    def generate(
        self, conversation: Conversation, title: Optional[str] = None
    ) -> str:
        """Generate a Markdown document. ``title`` is not used."""
        parts: list[str] = []
        if conversation.system is not None:
            parts.append(self._system_section(conversation.system))
        parts.extend(self._turn(turn) for turn in conversation.turns)
        return "".join(parts)

"""Holder for the conversation currently shown by a viewer.

A load either succeeds and replaces the current conversation as a whole,
or raises LoadError and leaves the previous one in place.
"""

from pathlib import Path
from typing import Optional

from .converter import load_from_bytes, load_from_path
from .markdown import MarkdownRenderer
from .models import Conversation
from .renderer import get_renderer

# Name shown for buffers that did not come from a file path
DROPPED_SOURCE_NAME = "(dropped)"


class ViewerState:
    """Caller-owned "current conversation" slot plus display settings."""

    def __init__(self, theme_dark: bool = True):
        self.theme_dark = theme_dark
        self.conversation: Optional[Conversation] = None

    @property
    def theme(self) -> str:
        return "dark" if self.theme_dark else "light"

    @property
    def source_name(self) -> Optional[str]:
        return self.conversation.source_name if self.conversation else None

    @property
    def warnings(self) -> list[str]:
        return self.conversation.warnings if self.conversation else []

    def set_loaded(self, conversation: Conversation) -> None:
        self.conversation = conversation

    def load_path(self, path: Path) -> Conversation:
        """Load a file (opened or dropped) and make it current."""
        conversation = load_from_path(path)
        self.set_loaded(conversation)
        return conversation

    def load_bytes(
        self, data: bytes, source_name: str = DROPPED_SOURCE_NAME
    ) -> Conversation:
        """Load an in-memory buffer and make it current."""
        conversation = load_from_bytes(data, source_name)
        self.set_loaded(conversation)
        return conversation

    def dismiss_warnings(self) -> None:
        if self.conversation is not None:
            self.conversation.reset_warnings()

    def toggle_theme(self) -> None:
        self.theme_dark = not self.theme_dark

    def clear(self) -> None:
        self.conversation = None

    def export(self, format: str) -> Optional[str]:
        """Render the current conversation, or None if nothing is loaded."""
        if self.conversation is None:
            return None
        return get_renderer(format, self.theme).generate(self.conversation)

    def turn_snippet(self, index: int) -> Optional[str]:
        """Markdown text of one turn of the current conversation."""
        if self.conversation is None:
            return None
        return MarkdownRenderer().turn_snippet(self.conversation.turns[index])

#!/usr/bin/env python3
"""Tests for the Markdown exporter and renderer role labels."""

import pytest

from llm_log_viewer.factories import create_conversation
from llm_log_viewer.markdown.renderer import MarkdownRenderer
from llm_log_viewer.models import (
    AssistantRole,
    Conversation,
    OtherRole,
    RawRecord,
    SystemRole,
    Turn,
    UserRole,
)
from llm_log_viewer.renderer import get_file_extension, get_renderer


@pytest.fixture
def renderer():
    """Create a MarkdownRenderer instance for testing."""
    return MarkdownRenderer()


class TestRoleLabel:
    def test_known_roles(self, renderer):
        assert renderer.role_label(UserRole()) == "User"
        assert renderer.role_label(AssistantRole()) == "Assistant"
        assert renderer.role_label(SystemRole()) == "System"

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("tool", "Tool"),
            ("TOOL", "Tool"),
            ("function_call", "Function_call"),
            ("System (extra)", "System (extra)"),
            ("", ""),
        ],
    )
    def test_other_roles_are_title_cased(self, renderer, label, expected):
        assert renderer.role_label(OtherRole(label)) == expected


class TestMarkdownRenderer:
    def test_end_to_end_example(self, renderer, sample_records):
        conversation = create_conversation(
            [RawRecord.model_validate(r) for r in sample_records]
        )
        md = renderer.generate(conversation)
        assert md.startswith(
            "# System\nBe terse.\n\n---\n\n**User**  \nHi\n\n**Assistant**  \nHello!\n\n"
        )

    def test_no_system_section(self, renderer):
        conversation = Conversation(turns=(Turn(UserRole(), "Hi"),))
        assert renderer.generate(conversation) == "**User**  \nHi\n\n"

    def test_empty_conversation(self, renderer):
        assert renderer.generate(Conversation()) == ""

    def test_other_role_label(self, renderer):
        conversation = Conversation(turns=(Turn(OtherRole("TOOL"), "result"),))
        assert renderer.generate(conversation) == "**Tool**  \nresult\n\n"

    def test_content_is_not_sanitized(self, renderer):
        """Markdown output keeps stray fences as written."""
        conversation = Conversation(
            system="```python\nprint(1)",
            turns=(Turn(AssistantRole(), "``` code block."),),
        )
        md = renderer.generate(conversation)
        assert "# System\n```python\nprint(1)\n\n---\n\n" in md
        assert "**Assistant**  \n``` code block.\n\n" in md
        assert "\u200b" not in md

    def test_turn_snippet(self, renderer):
        assert renderer.turn_snippet(Turn(UserRole(), "Hi")) == "**User**  \nHi\n"

    def test_turn_snippet_other_role(self, renderer):
        snippet = renderer.turn_snippet(Turn(OtherRole("System (extra)"), "``` x"))
        assert snippet == "**System (extra)**  \n``` x\n"

    def test_document_is_snippets_plus_blank_lines(self, renderer):
        turns = (Turn(UserRole(), "a"), Turn(AssistantRole(), "b"))
        md = renderer.generate(Conversation(turns=turns))
        assert md == "".join(renderer.turn_snippet(t) + "\n" for t in turns)


class TestGetRenderer:
    @pytest.mark.parametrize("fmt", ["md", "markdown"])
    def test_markdown_aliases(self, fmt):
        assert isinstance(get_renderer(fmt), MarkdownRenderer)

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported format: pdf"):
            get_renderer("pdf")

    @pytest.mark.parametrize(
        "fmt,ext", [("md", "md"), ("markdown", "md"), ("html", "html"), ("preview", "html")]
    )
    def test_file_extension(self, fmt, ext):
        assert get_file_extension(fmt) == ext

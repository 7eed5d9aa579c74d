#!/usr/bin/env python3
"""Tests for HTML escaping, fence conversion and the HTML renderers."""

import pytest

from llm_log_viewer.converter import load_from_path
from llm_log_viewer.html import (
    HtmlRenderer,
    PreviewRenderer,
    escape_html,
    get_theme,
    render_fenced_text,
    render_markdown,
    text_to_html_with_fences,
)
from llm_log_viewer.models import (
    AssistantRole,
    Conversation,
    OtherRole,
    Turn,
    UserRole,
)


class TestEscapeHtml:
    def test_escaped_characters(self):
        assert escape_html('&<>"\\') == "&amp;&lt;&gt;&quot;&#92;"

    def test_other_characters_untouched(self):
        text = "it's fine: é ✓ `code` \u200b"
        assert escape_html(text) == text

    def test_no_double_escape_of_output(self):
        assert escape_html("&amp;") == "&amp;amp;"


class TestTextToHtmlWithFences:
    def test_plain_lines_keep_newlines(self):
        assert text_to_html_with_fences("a < b\nc") == "a &lt; b\nc\n"

    def test_fence_with_language(self):
        html = text_to_html_with_fences("```python\nif a < b:\n    pass\n```")
        assert html == (
            '<pre><code class="language-python">if a &lt; b:\n    pass</code></pre>\n'
        )

    def test_fence_without_language(self):
        assert text_to_html_with_fences("```\nx\n```") == "<pre><code>x</code></pre>\n"

    def test_unterminated_fence_is_closed(self):
        html = text_to_html_with_fences("```python\nprint(1)")
        assert html == '<pre><code class="language-python">print(1)</code></pre>\n'

    def test_text_around_fence(self):
        html = text_to_html_with_fences("before\n```sh\nls\n```\nafter")
        assert html == "before\n<pre><code class=\"language-sh\">ls</code></pre>\nafter\n"

    def test_empty_fence(self):
        assert text_to_html_with_fences("```\n```") == "<pre><code></code></pre>\n"


class TestRenderFencedText:
    def test_unterminated_fence_example(self):
        html = render_fenced_text("```python\nprint(1)")
        assert '<pre><code class="language-python">print(1)</code></pre>' in html

    def test_stray_fence_stays_text(self):
        html = render_fenced_text("``` code block.\nnext line")
        assert "<pre>" not in html
        assert html == "``\u200b` code block.\nnext line\n"


class TestHtmlRenderer:
    def test_document_structure(self):
        conversation = Conversation(
            system="Be terse.",
            turns=(Turn(UserRole(), "Hi"), Turn(AssistantRole(), "Hello!")),
        )
        html = HtmlRenderer().generate(conversation)
        assert html.startswith("<!DOCTYPE html>")
        assert html.endswith("</div></body></html>\n")
        assert "<title>Chat Export</title>" in html
        assert '<div class="container">' in html
        assert (
            '<div class="system">\n<div class="role">System</div>\n'
            '<div class="content">Be terse.\n</div>\n</div>\n'
        ) in html

    def test_user_row_puts_bubble_first(self):
        html = HtmlRenderer().generate(Conversation(turns=(Turn(UserRole(), "Hi"),)))
        assert (
            '<div class="row user">\n<div class="bubble">\n'
            '<div class="content">Hi\n</div>\n</div>\n'
            '<div class="avatar">U</div>\n</div>\n'
        ) in html

    def test_assistant_row_puts_avatar_first(self):
        html = HtmlRenderer().generate(
            Conversation(turns=(Turn(AssistantRole(), "Hello!"),))
        )
        assert (
            '<div class="row assist">\n<div class="avatar">A</div>\n'
            '<div class="bubble">\n<div class="content">Hello!\n</div>\n</div>\n</div>\n'
        ) in html

    def test_other_role_has_badge(self):
        html = HtmlRenderer().generate(
            Conversation(turns=(Turn(OtherRole("TOOL"), "result"),))
        )
        assert (
            '<div class="row assist">\n<div class="avatar">?</div>\n'
            '<div class="bubble">\n<div class="role">Tool</div>\n'
        ) in html

    def test_known_roles_have_no_badge(self):
        html = HtmlRenderer().generate(
            Conversation(turns=(Turn(UserRole(), "a"), Turn(AssistantRole(), "b")))
        )
        assert '<div class="role">' not in html

    def test_content_is_escaped(self):
        html = HtmlRenderer().generate(
            Conversation(turns=(Turn(UserRole(), '<script>alert("x")</script>'),))
        )
        assert "<script>" not in html
        assert "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;" in html

    def test_title_is_escaped(self):
        html = HtmlRenderer().generate(Conversation(), title="a <b> title")
        assert "<title>a &lt;b&gt; title</title>" in html

    def test_themes_only_change_colours(self):
        conversation = Conversation(
            system="s", turns=(Turn(UserRole(), "u"), Turn(OtherRole("x"), "o"))
        )
        dark = HtmlRenderer("dark").generate(conversation)
        light = HtmlRenderer("light").generate(conversation)
        assert get_theme("dark").bg_user in dark
        assert get_theme("light").bg_user in light
        assert dark != light
        assert dark.split("</style>")[1] == light.split("</style>")[1]

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            HtmlRenderer("sepia")

    def test_fixture_file(self, test_data_dir):
        conversation = load_from_path(test_data_dir / "fences.jsonl")
        html = HtmlRenderer().generate(conversation)
        assert "Here is the ``` code block. Please check it.\n" in html
        assert (
            'Sure:\n<pre><code class="language-python">print(1)</code></pre>\n'
        ) in html
        assert "Thanks &lt;b&gt;&amp;&lt;/b&gt; bye" in html


class TestPreviewRenderer:
    def test_markdown_is_rendered(self):
        html = PreviewRenderer().generate(
            Conversation(turns=(Turn(AssistantRole(), "Some **bold** text"),))
        )
        assert "<strong>bold</strong>" in html
        assert "white-space:normal" in html

    def test_stray_fence_does_not_swallow_following_text(self):
        html = render_markdown("``` oops, not a fence\n**bold**")
        assert "<strong>bold</strong>" in html
        assert "<pre>" not in html

    def test_unterminated_fence_is_closed(self):
        html = render_markdown("```python\nprint(1)")
        assert 'class="language-python"' in html
        assert "</code></pre>" in html

    def test_raw_html_is_escaped(self):
        html = render_markdown("Thanks <b>&</b> bye")
        assert "<b>" not in html
        assert "&lt;b&gt;" in html

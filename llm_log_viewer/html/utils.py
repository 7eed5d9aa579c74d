"""HTML-specific rendering utilities.

This module contains the text-to-HTML transforms used by the exporters:
- HTML escaping
- Fence-aware conversion of sanitized chat text into escaped HTML with
  ``<pre><code>`` blocks
- Markdown rendering through mistune for the preview page
- Theme colour tokens and the Jinja2 template environment
"""

import functools
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import mistune
from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..fences import FenceKind, classify_lines, sanitize_chat_markdown
from ..utils import split_lines


# -- HTML Utilities -----------------------------------------------------------

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "\\": "&#92;",
    }
)


def escape_html(text: str) -> str:
    """Escape ``& < > " \\`` and leave every other character alone."""
    return text.translate(_HTML_ESCAPES)


def _code_open_tag(lang: Optional[str]) -> str:
    if lang:
        return f'<pre><code class="language-{escape_html(lang)}">'
    return "<pre><code>"


def text_to_html_with_fences(text: str) -> str:
    """Convert sanitized chat text into HTML.

    Lines outside a fence are escaped and newline-terminated (the
    stylesheet uses ``white-space: pre-wrap``). Each fenced block becomes
    a ``<pre><code>`` element, with a ``language-X`` class when the
    opening fence carried a tag. An unterminated block is closed at the
    end of the text.
    """
    parts: list[str] = []
    open_tag = ""
    code_lines: list[str] = []
    for token in classify_lines(split_lines(text)):
        if token.kind == FenceKind.FENCE_OPEN:
            open_tag = _code_open_tag(token.lang)
            code_lines = []
        elif token.kind == FenceKind.FENCE_CLOSE:
            code = "\n".join(code_lines)
            parts.append(f"{open_tag}{code}</code></pre>\n")
        elif token.kind == FenceKind.CODE:
            code_lines.append(escape_html(token.line))
        else:
            parts.append(escape_html(token.line) + "\n")
    return "".join(parts)


def render_fenced_text(text: str) -> str:
    """Sanitize chat text, then convert it with ``text_to_html_with_fences``."""
    return text_to_html_with_fences(sanitize_chat_markdown(text))


@functools.lru_cache(maxsize=1)
def _get_markdown_renderer() -> mistune.Markdown:
    """Get cached Mistune markdown renderer."""
    return mistune.create_markdown(
        plugins=[
            "strikethrough",
            "table",
            "url",
            "task_lists",
        ],
        escape=True,  # Chat text is untrusted, never pass raw HTML through
        hard_wrap=True,
    )


def render_markdown(text: str) -> str:
    """Render chat text as Markdown after sanitizing its code fences."""
    renderer = _get_markdown_renderer()
    return str(renderer(sanitize_chat_markdown(text)))


# -- Themes -------------------------------------------------------------------


@dataclass(frozen=True)
class Theme:
    """CSS colour tokens. Themes never change page structure."""

    bg_body: str
    fg_body: str
    bg_assist: str
    bg_user: str
    avatar_user_bg: str
    avatar_assist_bg: str
    avatar_user_fg: str
    avatar_assist_fg: str


THEMES: dict[str, Theme] = {
    "dark": Theme(
        bg_body="#121212",
        fg_body="#eaeaea",
        bg_assist="#2d2d2d",
        bg_user="#14503c",
        avatar_user_bg="#30c878",
        avatar_assist_bg="#646464",
        avatar_user_fg="#ffffff",
        avatar_assist_fg="#ffffff",
    ),
    "light": Theme(
        bg_body="#ffffff",
        fg_body="#222222",
        bg_assist="#f6f6f6",
        bg_user="#dbf7e6",
        avatar_user_bg="#10a37f",
        avatar_assist_bg="#c8c8c8",
        avatar_user_fg="#ffffff",
        avatar_assist_fg="#000000",
    ),
}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None


# -- Template Environment -----------------------------------------------------


@functools.lru_cache(maxsize=1)
def get_template_environment() -> Environment:
    """Get cached Jinja2 template environment for HTML rendering.

    Block tags swallow their own line so the template layout maps
    one-to-one onto the emitted lines.
    """
    templates_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

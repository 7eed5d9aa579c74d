"""HTML-specific rendering package.

Re-exports the text transforms and renderers.
"""

from .utils import (
    THEMES,
    Theme,
    escape_html,
    get_template_environment,
    get_theme,
    render_fenced_text,
    render_markdown,
    text_to_html_with_fences,
)
from .renderer import (
    DEFAULT_TITLE,
    HtmlRenderer,
    PreviewRenderer,
)

__all__ = [
    # utils
    "THEMES",
    "Theme",
    "escape_html",
    "get_template_environment",
    "get_theme",
    "render_fenced_text",
    "render_markdown",
    "text_to_html_with_fences",
    # renderers
    "DEFAULT_TITLE",
    "HtmlRenderer",
    "PreviewRenderer",
]

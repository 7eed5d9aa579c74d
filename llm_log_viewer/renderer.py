#!/usr/bin/env python3
"""Format-neutral renderer base class and renderer lookup."""

from typing import Any, Optional

from .models import AssistantRole, Conversation, OtherRole, Role, SystemRole, UserRole
from .utils import title_case


class Renderer:
    """Base class for conversation renderers.

    Subclasses implement format-specific output (Markdown, HTML, ...).

    Per-role behaviour uses a method-based dispatcher: ``_dispatch_role``
    looks up ``{prefix}_{RoleClass}`` (e.g. ``title_OtherRole``) along
    the role's MRO, so subclasses add or override single role cases.
    """

    def _dispatch_role(self, prefix: str, role: Role, default: Any = None) -> Any:
        """Dispatch to {prefix}_{ClassName} method based on role type."""
        for cls in type(role).__mro__:
            if cls is object:
                break
            if method := getattr(self, f"{prefix}_{cls.__name__}", None):
                return method(role)
        return default

    def role_label(self, role: Role) -> str:
        """Display label for a role, e.g. "User" or "Tool"."""
        return self._dispatch_role("title", role, default="")

    # -------------------------------------------------------------------------
    # Title Methods
    # -------------------------------------------------------------------------

    def title_SystemRole(self, role: SystemRole) -> str:  # noqa: ARG002
        return "System"

    def title_UserRole(self, role: UserRole) -> str:  # noqa: ARG002
        return "User"

    def title_AssistantRole(self, role: AssistantRole) -> str:  # noqa: ARG002
        return "Assistant"

    def title_OtherRole(self, role: OtherRole) -> str:
        return title_case(role.label)

    # -------------------------------------------------------------------------
    # Rendering Entry Points
    # -------------------------------------------------------------------------

    def generate(
        self, conversation: Conversation, title: Optional[str] = None
    ) -> Optional[str]:
        """Generate output for a conversation.

        Returns None by default; subclasses override to return formatted output.
        """
        return None


def get_file_extension(format: str) -> str:
    """Get the file extension for a format.

    Normalizes 'markdown' to 'md'; the preview page is HTML.
    """
    if format in ("md", "markdown"):
        return "md"
    if format == "preview":
        return "html"
    return format


def get_renderer(format: str, theme: str = "dark") -> Renderer:
    """Get a renderer instance for the specified format.

    Args:
        format: "md"/"markdown", "html" or "preview"
        theme: Colour theme for the HTML formats

    Raises:
        ValueError: If the format is not supported.
    """
    if format in ("md", "markdown"):
        from .markdown.renderer import MarkdownRenderer

        return MarkdownRenderer()
    if format == "html":
        from .html.renderer import HtmlRenderer

        return HtmlRenderer(theme)
    if format == "preview":
        from .html.renderer import PreviewRenderer

        return PreviewRenderer(theme)
    raise ValueError(f"Unsupported format: {format}")

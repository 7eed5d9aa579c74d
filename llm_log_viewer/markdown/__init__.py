"""Markdown export."""

from .renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]

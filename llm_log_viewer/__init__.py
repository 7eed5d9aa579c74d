"""Load chat transcripts into a render-safe conversation model and export them."""

from .converter import convert_to, load_from_bytes, load_from_path
from .fences import sanitize_chat_markdown
from .models import (
    AssistantRole,
    Conversation,
    LoadError,
    OtherRole,
    RawRecord,
    Role,
    SystemRole,
    Turn,
    UserRole,
)
from .renderer import get_renderer
from .state import ViewerState

__all__ = [
    "AssistantRole",
    "Conversation",
    "LoadError",
    "OtherRole",
    "RawRecord",
    "Role",
    "SystemRole",
    "Turn",
    "UserRole",
    "ViewerState",
    "convert_to",
    "get_renderer",
    "load_from_bytes",
    "load_from_path",
    "sanitize_chat_markdown",
]

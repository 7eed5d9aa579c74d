"""Factory modules for creating typed objects from raw data."""

from .role_factory import (
    # Role creation
    ROLE_CREATORS,
    create_role,
    is_system_role,
)
from .conversation_factory import (
    # Content normalization
    normalize_content,
    trim_chat_whitespace,
    # Conversation creation
    create_conversation,
)

__all__ = [
    # Role creation
    "ROLE_CREATORS",
    "create_role",
    "is_system_role",
    # Content normalization
    "normalize_content",
    "trim_chat_whitespace",
    # Conversation creation
    "create_conversation",
]

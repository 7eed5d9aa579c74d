"""Factory for building a Conversation from parsed RawRecords.

The normalizer is total: any sequence of RawRecord produces a
Conversation. It trims content, substitutes a placeholder for empty
content, canonicalizes roles and fills the single system slot.
"""

from typing import Iterable, Optional

from ..models import (
    EMPTY_PLACEHOLDER,
    EXTRA_SYSTEM_LABEL,
    Conversation,
    OtherRole,
    RawRecord,
    Turn,
)
from .role_factory import create_role, is_system_role


# =============================================================================
# Content Normalization
# =============================================================================


def trim_chat_whitespace(content: str) -> str:
    """Strip trailing whitespace and leading blank lines.

    Leading spaces and tabs are kept since they may be code indentation.
    """
    return content.rstrip(" \t\n\r").lstrip("\n\r")


def normalize_content(content: str) -> str:
    cleaned = trim_chat_whitespace(content)
    if not cleaned.strip():
        return EMPTY_PLACEHOLDER
    return cleaned


# =============================================================================
# Conversation Creation
# =============================================================================


def create_conversation(
    records: Iterable[RawRecord],
    warnings: Iterable[str] = (),
    source_name: Optional[str] = None,
) -> Conversation:
    """Normalize records into a Conversation.

    The first system record becomes ``Conversation.system``. Later system
    records are demoted to turns labelled "System (extra)" so none is lost.

    Args:
        records: Parsed records in transcript order
        warnings: Parse-stage warnings to carry onto the result
        source_name: Display name of the input, if any

    Returns:
        Conversation with turns in the same order as ``records``
    """
    system: Optional[str] = None
    turns: list[Turn] = []
    for record in records:
        content = normalize_content(record.content)
        role = create_role(record.role)
        if is_system_role(role):
            if system is None:
                system = content
                continue
            role = OtherRole(EXTRA_SYSTEM_LABEL)
        turns.append(Turn(role=role, content=content))
    return Conversation(
        system=system,
        turns=tuple(turns),
        warnings=list(warnings),
        source_name=source_name,
    )

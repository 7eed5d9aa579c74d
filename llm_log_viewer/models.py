"""Models for chat transcript records and the normalized conversation.

RawRecord is the pydantic model for one decoded JSON object. Everything
downstream of normalization (roles, turns, the conversation itself) is a
plain dataclass, so renderers never see unvalidated input.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

EMPTY_PLACEHOLDER = "(empty)"
EXTRA_SYSTEM_LABEL = "System (extra)"


class LoadError(Exception):
    """Fatal load failure. The message is shown to the user as-is."""


class RawRecord(BaseModel):
    """One transcript record exactly as decoded from JSON."""

    model_config = ConfigDict(strict=True)

    role: str
    content: str


# =============================================================================
# Roles
# =============================================================================
# Role is a tagged union. OtherRole keeps the original role string so
# unknown transcript formats are displayed rather than rejected.


@dataclass(frozen=True)
class SystemRole:
    pass


@dataclass(frozen=True)
class UserRole:
    pass


@dataclass(frozen=True)
class AssistantRole:
    pass


@dataclass(frozen=True)
class OtherRole:
    label: str  # Original, un-lowercased role string


Role = Union[SystemRole, UserRole, AssistantRole, OtherRole]


# =============================================================================
# Conversation
# =============================================================================


@dataclass(frozen=True)
class Turn:
    """One message in the conversation body."""

    role: Role
    content: str  # Never empty after normalization


@dataclass(frozen=True)
class Conversation:
    """Result of one load: optional system preamble plus ordered turns.

    Fields cannot be reassigned. Only the ``warnings`` list changes after
    construction; it accumulates display-only messages and is cleared
    through ``reset_warnings``.
    """

    system: Optional[str] = None
    turns: tuple[Turn, ...] = ()
    warnings: list[str] = field(default_factory=list)
    source_name: Optional[str] = None

    def reset_warnings(self) -> None:
        self.warnings.clear()

    @property
    def is_empty(self) -> bool:
        return self.system is None and not self.turns

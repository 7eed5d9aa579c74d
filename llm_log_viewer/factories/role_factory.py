"""Factory for creating Role values from raw role strings.

Matching is case-insensitive. Unrecognised roles are kept as OtherRole
with their original spelling instead of being rejected.
"""

from ..models import AssistantRole, OtherRole, Role, SystemRole, UserRole


# =============================================================================
# Role Registry
# =============================================================================

# Maps lower-cased role strings to their Role classes
ROLE_CREATORS: dict[str, type[SystemRole | UserRole | AssistantRole]] = {
    "system": SystemRole,
    "user": UserRole,
    "assistant": AssistantRole,
}


def create_role(raw_role: str) -> Role:
    """Create a Role from the role string of a RawRecord.

    Args:
        raw_role: Role string as found in the transcript (any casing)

    Returns:
        The matching Role, or OtherRole carrying ``raw_role`` unchanged
    """
    if creator := ROLE_CREATORS.get(raw_role.lower()):
        return creator()
    return OtherRole(raw_role)


def is_system_role(role: Role) -> bool:
    return isinstance(role, SystemRole)

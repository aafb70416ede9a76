"""
Access levels and invite states shared by every list-scoped module.
"""

from enum import Enum


class AccessLevel(str, Enum):
    """Hierarchical access level granted by a share (admin > edit > view)."""

    VIEW = "view"
    EDIT = "edit"
    ADMIN = "admin"


class InviteStatus(str, Enum):
    """Lifecycle of a share row."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


# Share levels that satisfy each required level.
ALLOWED_LEVELS: dict[AccessLevel, frozenset[AccessLevel]] = {
    AccessLevel.VIEW: frozenset({AccessLevel.VIEW, AccessLevel.EDIT, AccessLevel.ADMIN}),
    AccessLevel.EDIT: frozenset({AccessLevel.EDIT, AccessLevel.ADMIN}),
    AccessLevel.ADMIN: frozenset({AccessLevel.ADMIN}),
}

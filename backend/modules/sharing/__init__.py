"""
Sharing module.

Grants other users view/edit/admin access to a list through invites.

Public API:
- ISharingService: Interface for share operations
- ListShare, ShareWithUser, PendingInvite: share views
- ShareRepository: list_shares table access
"""

from .interfaces import ISharingService
from .models import (
    ListShare,
    ShareWithUser,
    PendingInvite,
    ShareListRequest,
    RespondToInviteRequest,
)
from .repository import ShareRepository
from .exceptions import InviteNotFoundError

__all__ = [
    # Interface
    "ISharingService",
    # Models
    "ListShare",
    "ShareWithUser",
    "PendingInvite",
    "ShareListRequest",
    "RespondToInviteRequest",
    # Repository
    "ShareRepository",
    # Exceptions
    "InviteNotFoundError",
]

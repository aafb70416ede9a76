"""
Sharing module interface.
"""

from typing import Literal, Protocol, Optional, runtime_checkable

from modules.access.models import AccessLevel
from .models import ListShare, PendingInvite, ShareWithUser


@runtime_checkable
class ISharingService(Protocol):
    """Interface for the share and invite workflow."""

    async def share_list(
        self,
        user_id: Optional[str],
        list_id: str,
        user_email: str,
        access_level: AccessLevel,
    ) -> ListShare:
        """
        Invite a user (by email) to a list. Requires admin access.

        Re-sharing with the same user overwrites the level and resets
        the share to pending.

        Raises:
            ListNotFoundError: If the list doesn't exist
            ListAccessDeniedError: If the caller is not an admin
            UserNotFoundError: If no user has that email
        """
        ...

    async def get_list_shares(self, user_id: Optional[str], list_id: str) -> list[ShareWithUser]:
        """
        All shares of a list with target user info. Requires admin access;
        returns an empty list otherwise.
        """
        ...

    async def get_pending_invites(self, user_id: Optional[str]) -> list[PendingInvite]:
        """Pending shares addressed to the caller, with list and inviter."""
        ...

    async def respond_to_invite(
        self,
        user_id: Optional[str],
        list_id: str,
        response: Literal["accepted", "declined"],
    ) -> None:
        """
        Accept (status flips to accepted) or decline (row deleted).

        Raises:
            InviteNotFoundError: If the caller has no pending share on the list
        """
        ...

    async def remove_share(
        self,
        user_id: Optional[str],
        list_id: str,
        target_user_id: str,
    ) -> None:
        """Revoke a user's share. Requires admin access; no-op when absent."""
        ...

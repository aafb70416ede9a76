"""
Sharing & invite workflow.

Share rows move through pending -> accepted; declining deletes the row.
Only admins (the owner, or an accepted admin share) may grant, list or
revoke shares.
"""

import logging
from typing import Literal, Optional

from modules.access import AccessControlEvaluator, AccessLevel, InviteStatus, require_authenticated
from modules.auth.exceptions import UserNotFoundError
from modules.auth.models import UserRecord
from modules.auth.repository import UserRepository
from modules.lists.exceptions import ListNotFoundError
from modules.lists.models import ShoppingList
from modules.lists.repository import ListRepository
from shared.models import UserSummary

from .exceptions import InviteNotFoundError
from .interfaces import ISharingService
from .models import ListShare, PendingInvite, ShareWithUser
from .repository import ShareRepository

logger = logging.getLogger(__name__)


class SharingService(ISharingService):
    """Sharing service with Supabase backend."""

    def __init__(
        self,
        shares: ShareRepository,
        lists: ListRepository,
        users: UserRepository,
        access: AccessControlEvaluator,
    ):
        self._shares = shares
        self._lists = lists
        self._users = users
        self._access = access

    async def share_list(
        self,
        user_id: Optional[str],
        list_id: str,
        user_email: str,
        access_level: AccessLevel,
    ) -> ListShare:
        user_id = require_authenticated(user_id)
        shopping_list = self._get_list(list_id)
        self._access.require(user_id, shopping_list, AccessLevel.ADMIN)

        target = self._users.get_by_email(user_email)
        if target is None:
            raise UserNotFoundError(user_email)

        existing = self._shares.get_for_target(list_id, target.id)
        if existing:
            self._shares.reinvite(existing.id, access_level)
            logger.info(f"Share {existing.id} on list {list_id} re-sent at {access_level.value}")
            return existing.model_copy(
                update={"access_level": access_level, "invite_status": InviteStatus.PENDING}
            )

        return self._shares.create({
            "list_id": list_id,
            "shared_with_user_id": target.id,
            "shared_by_user_id": user_id,
            "access_level": access_level.value,
            "invite_status": InviteStatus.PENDING.value,
        })

    async def get_list_shares(self, user_id: Optional[str], list_id: str) -> list[ShareWithUser]:
        if not user_id:
            return []
        shopping_list = self._lists.get_by_id(list_id)
        if shopping_list is None:
            return []
        if not self._access.authorize(user_id, shopping_list, AccessLevel.ADMIN):
            return []

        shares = self._shares.list_for_list(list_id)
        users = self._users.get_many([share.shared_with_user_id for share in shares])
        return [
            ShareWithUser(
                **share.model_dump(),
                user=self._summary(users.get(share.shared_with_user_id)),
            )
            for share in shares
        ]

    async def get_pending_invites(self, user_id: Optional[str]) -> list[PendingInvite]:
        if not user_id:
            return []

        pending = self._shares.list_for_user(user_id, status=InviteStatus.PENDING)
        lists = self._lists.get_many([share.list_id for share in pending])
        inviters = self._users.get_many([share.shared_by_user_id for share in pending])
        return [
            PendingInvite(
                **share.model_dump(),
                list=lists.get(share.list_id),
                shared_by=self._summary(inviters.get(share.shared_by_user_id)),
            )
            for share in pending
        ]

    async def respond_to_invite(
        self,
        user_id: Optional[str],
        list_id: str,
        response: Literal["accepted", "declined"],
    ) -> None:
        user_id = require_authenticated(user_id)
        share = self._shares.get_for_target(list_id, user_id, status=InviteStatus.PENDING)
        if share is None:
            raise InviteNotFoundError(list_id, user_id)

        if response == InviteStatus.DECLINED.value:
            self._shares.delete(share.id)
        else:
            self._shares.set_status(share.id, InviteStatus.ACCEPTED)
        logger.info(f"User {user_id} {response} invite to list {list_id}")

    async def remove_share(
        self,
        user_id: Optional[str],
        list_id: str,
        target_user_id: str,
    ) -> None:
        user_id = require_authenticated(user_id)
        shopping_list = self._get_list(list_id)
        self._access.require(user_id, shopping_list, AccessLevel.ADMIN)

        share = self._shares.get_for_target(list_id, target_user_id)
        if share:
            self._shares.delete(share.id)

    def _get_list(self, list_id: str) -> ShoppingList:
        shopping_list = self._lists.get_by_id(list_id)
        if shopping_list is None:
            raise ListNotFoundError(list_id)
        return shopping_list

    @staticmethod
    def _summary(user: Optional[UserRecord]) -> Optional[UserSummary]:
        return UserSummary(id=user.id, email=user.email) if user else None

"""
Notification fan-out and inbox.

For a triggering event on a list, one unread notification goes to every
accepted collaborator other than the actor, plus one to the owner when the
owner is not the actor. Inserts are independent; a failure part-way leaves
the earlier notifications delivered.
"""

import logging
from typing import Optional

from modules.access import InviteStatus, require_authenticated
from modules.auth.repository import UserRepository
from modules.lists.repository import ListRepository
from modules.sharing.repository import ShareRepository

from .exceptions import NotificationNotFoundError
from .interfaces import INotificationService
from .models import NewNotification, Notification, NotificationType
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

LIST_UPDATED_TITLE = "Lista atualizada"
ITEM_ADDED_TITLE = "Item adicionado"


def list_updated_message(actor_email: str, list_title: str) -> str:
    return f'{actor_email} atualizou a lista "{list_title}"'


def item_added_message(actor_email: str, item_name: str, list_title: str) -> str:
    return f'{actor_email} adicionou "{item_name}" à lista "{list_title}"'


class NotificationService(INotificationService):
    """Notification service with Supabase backend."""

    def __init__(
        self,
        notifications: NotificationRepository,
        lists: ListRepository,
        shares: ShareRepository,
        users: UserRepository,
        limit: int = 50,
    ):
        self._notifications = notifications
        self._lists = lists
        self._shares = shares
        self._users = users
        self._limit = limit

    # -------------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------------

    async def notify_list_updated(self, list_id: str, actor_id: str) -> int:
        shopping_list = self._lists.get_by_id(list_id)
        actor = self._users.get_by_id(actor_id)
        if shopping_list is None or actor is None:
            return 0

        return self._fan_out(
            list_id=list_id,
            owner_id=shopping_list.owner_id,
            actor_id=actor_id,
            kind=NotificationType.LIST_UPDATED,
            title=LIST_UPDATED_TITLE,
            message=list_updated_message(actor.email or "", shopping_list.title),
        )

    async def notify_item_added(self, list_id: str, item_name: str, actor_id: str) -> int:
        shopping_list = self._lists.get_by_id(list_id)
        actor = self._users.get_by_id(actor_id)
        if shopping_list is None or actor is None:
            return 0

        return self._fan_out(
            list_id=list_id,
            owner_id=shopping_list.owner_id,
            actor_id=actor_id,
            kind=NotificationType.ITEM_ADDED,
            title=ITEM_ADDED_TITLE,
            message=item_added_message(actor.email or "", item_name, shopping_list.title),
        )

    def _fan_out(
        self,
        list_id: str,
        owner_id: str,
        actor_id: str,
        kind: NotificationType,
        title: str,
        message: str,
    ) -> int:
        recipients = [
            share.shared_with_user_id
            for share in self._shares.list_for_list(list_id, status=InviteStatus.ACCEPTED)
            if share.shared_with_user_id != actor_id
        ]
        if owner_id != actor_id:
            recipients.append(owner_id)

        for recipient in recipients:
            self._notifications.create(NewNotification(
                user_id=recipient,
                type=kind,
                title=title,
                message=message,
                related_list_id=list_id,
                from_user_id=actor_id,
            ))

        logger.debug(f"{kind.value} on list {list_id}: notified {len(recipients)} user(s)")
        return len(recipients)

    # -------------------------------------------------------------------------
    # Inbox
    # -------------------------------------------------------------------------

    async def get_user_notifications(self, user_id: Optional[str]) -> list[Notification]:
        if not user_id:
            return []
        return self._notifications.list_for_user(user_id, self._limit)

    async def mark_as_read(self, user_id: Optional[str], notification_id: str) -> None:
        user_id = require_authenticated(user_id)
        notification = self._notifications.get_by_id(notification_id)
        if notification is None or notification.user_id != user_id:
            raise NotificationNotFoundError(notification_id)
        self._notifications.mark_read(notification_id)

    async def mark_all_as_read(self, user_id: Optional[str]) -> int:
        user_id = require_authenticated(user_id)
        return self._notifications.mark_all_read(user_id)

"""
Notifications module interface.

The fan-out methods are not exposed over HTTP; the list service schedules
them as deferred tasks after the triggering mutation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Notification


@runtime_checkable
class INotificationService(Protocol):
    """Interface for notification delivery and inbox operations."""

    async def notify_list_updated(self, list_id: str, actor_id: str) -> int:
        """
        Fan out a list_updated notification to every collaborator except the actor.

        Returns:
            Number of notifications inserted
        """
        ...

    async def notify_item_added(self, list_id: str, item_name: str, actor_id: str) -> int:
        """
        Fan out an item_added notification to every collaborator except the actor.

        Returns:
            Number of notifications inserted
        """
        ...

    async def get_user_notifications(self, user_id: Optional[str]) -> list[Notification]:
        """Latest notifications for the caller, newest first (empty when anonymous)."""
        ...

    async def mark_as_read(self, user_id: Optional[str], notification_id: str) -> None:
        """
        Mark one of the caller's notifications read.

        Raises:
            NotificationNotFoundError: If missing or addressed to another user
        """
        ...

    async def mark_all_as_read(self, user_id: Optional[str]) -> int:
        """Mark every unread notification of the caller read."""
        ...

"""
Notification repository for the notifications table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import NewNotification, Notification, NotificationType


class NotificationRepository(BaseRepository[Notification]):
    """Repository for notification rows."""

    def create(self, notification: NewNotification) -> Notification:
        data = {**notification.model_dump(mode="json"), "is_read": False}
        result = self._db.table("notifications").insert(data).execute()
        return self._map_to_notification(result.data[0])

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        result = self._db.table("notifications").select("*").eq("id", notification_id).execute()
        row = self._first(result)
        return self._map_to_notification(row) if row else None

    def list_for_user(self, user_id: str, limit: int) -> list[Notification]:
        """Most recent notifications first."""
        result = (
            self._db.table("notifications")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_notification(row) for row in result.data]

    def mark_read(self, notification_id: str) -> None:
        self._db.table("notifications").update({"is_read": True}).eq("id", notification_id).execute()

    def mark_all_read(self, user_id: str) -> int:
        """Flag every unread notification of user_id. Returns the number of rows changed."""
        result = (
            self._db.table("notifications")
            .update({"is_read": True})
            .eq("user_id", user_id)
            .eq("is_read", False)
            .execute()
        )
        return len(result.data or [])

    def _map_to_notification(self, data: dict[str, Any]) -> Notification:
        """Map database row to Notification model."""
        related = data.get("related_list_id")
        sender = data.get("from_user_id")
        return Notification(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            type=NotificationType(data["type"]),
            title=data["title"],
            message=data["message"],
            is_read=data.get("is_read", False),
            related_list_id=str(related) if related else None,
            from_user_id=str(sender) if sender else None,
            created_at=data.get("created_at"),
        )

"""
Share repository for the list_shares table.

The table carries a unique (list_id, shared_with_user_id) constraint, so
there is at most one row per list and target user.
"""

from typing import Any, Optional

from modules.access.models import AccessLevel, InviteStatus
from shared.repository import BaseRepository
from .models import ListShare


class ShareRepository(BaseRepository[ListShare]):
    """Repository for share rows. No authorization checks happen here."""

    def create(self, data: dict[str, Any]) -> ListShare:
        result = self._db.table("list_shares").insert(data).execute()
        return self._map_to_share(result.data[0])

    def get_for_target(
        self,
        list_id: str,
        user_id: str,
        status: Optional[InviteStatus] = None,
    ) -> Optional[ListShare]:
        """The share of list_id held by user_id, optionally filtered by status."""
        query = (
            self._db.table("list_shares")
            .select("*")
            .eq("list_id", list_id)
            .eq("shared_with_user_id", user_id)
        )
        if status:
            query = query.eq("invite_status", status.value)
        row = self._first(query.limit(1).execute())
        return self._map_to_share(row) if row else None

    def list_for_list(
        self,
        list_id: str,
        status: Optional[InviteStatus] = None,
    ) -> list[ListShare]:
        query = self._db.table("list_shares").select("*").eq("list_id", list_id)
        if status:
            query = query.eq("invite_status", status.value)
        result = query.execute()
        return [self._map_to_share(row) for row in result.data]

    def list_for_user(
        self,
        user_id: str,
        status: Optional[InviteStatus] = None,
    ) -> list[ListShare]:
        """Shares addressed to user_id."""
        query = self._db.table("list_shares").select("*").eq("shared_with_user_id", user_id)
        if status:
            query = query.eq("invite_status", status.value)
        result = query.execute()
        return [self._map_to_share(row) for row in result.data]

    def reinvite(self, share_id: str, access_level: AccessLevel) -> None:
        """Overwrite the level and send the share back to pending."""
        data = {
            "access_level": access_level.value,
            "invite_status": InviteStatus.PENDING.value,
        }
        self._db.table("list_shares").update(data).eq("id", share_id).execute()

    def set_status(self, share_id: str, status: InviteStatus) -> None:
        self._db.table("list_shares").update(
            {"invite_status": status.value}
        ).eq("id", share_id).execute()

    def delete(self, share_id: str) -> None:
        self._db.table("list_shares").delete().eq("id", share_id).execute()

    def delete_for_list(self, list_id: str) -> None:
        self._db.table("list_shares").delete().eq("list_id", list_id).execute()

    def _map_to_share(self, data: dict[str, Any]) -> ListShare:
        """Map database row to ListShare model."""
        return ListShare(
            id=str(data["id"]),
            list_id=str(data["list_id"]),
            shared_with_user_id=str(data["shared_with_user_id"]),
            shared_by_user_id=str(data["shared_by_user_id"]),
            access_level=AccessLevel(data["access_level"]),
            invite_status=InviteStatus(data["invite_status"]),
        )

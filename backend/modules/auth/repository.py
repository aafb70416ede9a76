"""
User directory repository.

Reads the `users` table, a public mirror of Supabase's auth.users kept in
sync by a database trigger (see migrations/001_initial_schema.sql).
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """Lookup of users by id or email."""

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._db.table("users").select("id, email").eq("id", user_id).execute()
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Exact-match email lookup; returns the first match."""
        result = (
            self._db.table("users")
            .select("id, email")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def get_many(self, user_ids: list[str]) -> dict[str, UserRecord]:
        """Load several users at once, keyed by id. Unknown ids are omitted."""
        if not user_ids:
            return {}
        result = (
            self._db.table("users")
            .select("id, email")
            .in_("id", sorted(set(user_ids)))
            .execute()
        )
        return {str(row["id"]): self._map_to_user(row) for row in result.data}

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        return UserRecord(id=str(data["id"]), email=data.get("email"))

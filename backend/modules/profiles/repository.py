"""
User profile repository for the user_profiles table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserProfile


class ProfileRepository(BaseRepository[UserProfile]):
    """Repository for user profiles."""

    def get_by_user(self, user_id: str) -> Optional[UserProfile]:
        result = (
            self._db.table("user_profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return self._map_to_profile(row) if row else None

    def create(self, data: dict[str, Any]) -> UserProfile:
        result = self._db.table("user_profiles").insert(data).execute()
        return self._map_to_profile(result.data[0])

    def update(self, profile_id: str, patch: dict[str, Any]) -> None:
        self._db.table("user_profiles").update(patch).eq("id", profile_id).execute()

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            name=data.get("name") or "",
            profile_photo=data.get("profile_photo"),
            dietary_preferences=data.get("dietary_preferences") or [],
            theme=data.get("theme") or "light",
        )

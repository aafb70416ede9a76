"""
Suggestion stat repository for the ai_suggestions table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import SuggestionStat


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally.

    PostgREST reads `*` as `%` in like patterns, so a literal `*` is matched
    as a single-character wildcard instead.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")


class SuggestionStatRepository(BaseRepository[SuggestionStat]):
    """Repository for per-user item frequency stats."""

    def get(self, user_id: str, item_name: str) -> Optional[SuggestionStat]:
        """Stat for (user, item_name); the name must match exactly."""
        result = (
            self._db.table("ai_suggestions")
            .select("*")
            .eq("user_id", user_id)
            .eq("item_name", item_name)
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return self._map_to_stat(row) if row else None

    def create(self, user_id: str, item_name: str, category: str) -> SuggestionStat:
        data = {
            "user_id": user_id,
            "item_name": item_name,
            "category": category,
            "frequency": 1,
            "last_suggested": self._now(),
        }
        result = self._db.table("ai_suggestions").insert(data).execute()
        return self._map_to_stat(result.data[0])

    def increment(self, stat: SuggestionStat, category: str) -> None:
        """Bump the counter and refresh last_suggested and category."""
        data = {
            "frequency": stat.frequency + 1,
            "last_suggested": self._now(),
            "category": category,
        }
        self._db.table("ai_suggestions").update(data).eq("id", stat.id).execute()

    def search(self, user_id: str, query: str, limit: int) -> list[SuggestionStat]:
        """Stats whose name contains query (case-insensitive), most frequent first."""
        result = (
            self._db.table("ai_suggestions")
            .select("*")
            .eq("user_id", user_id)
            .gte("frequency", 1)
            .ilike("item_name", f"%{escape_like(query)}%")
            .order("frequency", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_stat(row) for row in result.data]

    def top_for_user(self, user_id: str, limit: int) -> list[SuggestionStat]:
        """The user's most frequent items."""
        result = (
            self._db.table("ai_suggestions")
            .select("*")
            .eq("user_id", user_id)
            .order("frequency", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_stat(row) for row in result.data]

    def _map_to_stat(self, data: dict[str, Any]) -> SuggestionStat:
        """Map database row to SuggestionStat model."""
        return SuggestionStat(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            item_name=data["item_name"],
            category=data.get("category") or "Outros",
            frequency=int(data.get("frequency", 0)),
            last_suggested=data.get("last_suggested"),
            context=data.get("context"),
        )

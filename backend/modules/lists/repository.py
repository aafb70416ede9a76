"""
Lists repository for database access.

Encapsulates all Supabase queries and data mapping for:
- shopping_lists
- list_items

Note: These repositories do NOT perform authorization checks.
The service layer is responsible for calling the access evaluator.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import ListItem, ShoppingList


class ListRepository(BaseRepository[ShoppingList]):
    """Repository for the shopping_lists table."""

    def create(self, data: dict[str, Any]) -> ShoppingList:
        """
        Insert a list.

        Args:
            data: Column values (title, owner_id, ...)

        Returns:
            The created list with generated ID and timestamps.
        """
        result = self._db.table("shopping_lists").insert(data).execute()
        return self._map_to_list(result.data[0])

    def get_by_id(self, list_id: str) -> Optional[ShoppingList]:
        result = self._db.table("shopping_lists").select("*").eq("id", list_id).execute()
        row = self._first(result)
        return self._map_to_list(row) if row else None

    def get_many(self, list_ids: list[str]) -> dict[str, ShoppingList]:
        """Load several lists keyed by id. Missing ids are omitted."""
        if not list_ids:
            return {}
        result = (
            self._db.table("shopping_lists")
            .select("*")
            .in_("id", sorted(set(list_ids)))
            .execute()
        )
        return {str(row["id"]): self._map_to_list(row) for row in result.data}

    def list_by_owner(self, owner_id: str) -> list[ShoppingList]:
        result = (
            self._db.table("shopping_lists")
            .select("*")
            .eq("owner_id", owner_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_list(row) for row in result.data]

    def update(self, list_id: str, patch: dict[str, Any]) -> None:
        """Write only the given columns."""
        self._db.table("shopping_lists").update(patch).eq("id", list_id).execute()

    def delete(self, list_id: str) -> None:
        self._db.table("shopping_lists").delete().eq("id", list_id).execute()

    def _map_to_list(self, data: dict[str, Any]) -> ShoppingList:
        """Map database row to ShoppingList model."""
        return ShoppingList(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description"),
            category=data.get("category"),
            color=data.get("color"),
            owner_id=str(data["owner_id"]),
            is_template=data.get("is_template", False),
            created_at=data.get("created_at"),
        )


class ItemRepository(BaseRepository[ListItem]):
    """Repository for the list_items table."""

    def create(self, data: dict[str, Any]) -> ListItem:
        result = self._db.table("list_items").insert(data).execute()
        return self._map_to_item(result.data[0])

    def get_by_id(self, item_id: str) -> Optional[ListItem]:
        result = self._db.table("list_items").select("*").eq("id", item_id).execute()
        row = self._first(result)
        return self._map_to_item(row) if row else None

    def list_for_list(self, list_id: str) -> list[ListItem]:
        """Items of a list by position; ties fall back to insertion order."""
        result = (
            self._db.table("list_items")
            .select("*")
            .eq("list_id", list_id)
            .order("order")
            .order("created_at")
            .execute()
        )
        return [self._map_to_item(row) for row in result.data]

    def max_order(self, list_id: str) -> Optional[int]:
        """Highest order value in the list, or None when it has no items."""
        result = (
            self._db.table("list_items")
            .select("order")
            .eq("list_id", list_id)
            .order("order", desc=True)
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return int(row["order"]) if row else None

    def update(self, item_id: str, patch: dict[str, Any]) -> None:
        self._db.table("list_items").update(patch).eq("id", item_id).execute()

    def update_order(self, list_id: str, item_id: str, order: int) -> None:
        """Move one item; rows outside list_id are never touched."""
        (
            self._db.table("list_items")
            .update({"order": order})
            .eq("id", item_id)
            .eq("list_id", list_id)
            .execute()
        )

    def delete(self, item_id: str) -> None:
        self._db.table("list_items").delete().eq("id", item_id).execute()

    def delete_for_list(self, list_id: str) -> None:
        """Remove every item of a list."""
        self._db.table("list_items").delete().eq("list_id", list_id).execute()

    def _map_to_item(self, data: dict[str, Any]) -> ListItem:
        """Map database row to ListItem model."""
        return ListItem(
            id=str(data["id"]),
            list_id=str(data["list_id"]),
            name=data["name"],
            quantity=data.get("quantity"),
            notes=data.get("notes"),
            category=data.get("category"),
            is_completed=data.get("is_completed", False),
            added_by=str(data["added_by"]),
            order=int(data["order"]),
            created_at=data.get("created_at"),
        )

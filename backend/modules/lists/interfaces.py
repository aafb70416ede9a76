"""
Lists module interface.

The API layer depends on IListService for every list and item operation.
Side effects (fan-out, frequency tracking) are handed to the TaskDispatcher
passed by the caller.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.tasks import TaskDispatcher
from .models import (
    AddItemRequest,
    CreateListRequest,
    ItemOrder,
    ListItem,
    ListWithAccess,
    ShoppingList,
    UpdateItemRequest,
    UpdateListRequest,
)


@runtime_checkable
class IListService(Protocol):
    """Interface for list and item operations."""

    async def list_lists(self, user_id: Optional[str]) -> list[ListWithAccess]:
        """
        Lists the user owns followed by lists shared with them (accepted only).

        Returns an empty list when user_id is None.
        """
        ...

    async def create_list(self, user_id: Optional[str], request: CreateListRequest) -> ShoppingList:
        """
        Create a list owned by the caller.

        Raises:
            NotAuthenticatedError: If user_id is None
        """
        ...

    async def update_list(
        self,
        user_id: Optional[str],
        list_id: str,
        request: UpdateListRequest,
        tasks: TaskDispatcher,
    ) -> ShoppingList:
        """
        Patch list fields (edit access) and schedule the list_updated fan-out.

        Raises:
            ListNotFoundError: If the list doesn't exist
            ListAccessDeniedError: If the caller lacks edit access
        """
        ...

    async def delete_list(self, user_id: Optional[str], list_id: str) -> None:
        """
        Delete a list with all its items and shares. Owner only.

        Raises:
            ListNotFoundError: If the list doesn't exist
            NotListOwnerError: If the caller is not the owner
        """
        ...

    async def get_list_items(self, user_id: Optional[str], list_id: str) -> list[ListItem]:
        """
        Items of a list in display order.

        Returns an empty list when the caller is anonymous, lacks view
        access, or the list doesn't exist.
        """
        ...

    async def add_item(
        self,
        user_id: Optional[str],
        list_id: str,
        request: AddItemRequest,
        tasks: TaskDispatcher,
    ) -> ListItem:
        """
        Append an item (edit access) at max(order) + 1.

        Schedules the frequency update and the item_added fan-out.
        """
        ...

    async def update_item(
        self,
        user_id: Optional[str],
        item_id: str,
        request: UpdateItemRequest,
    ) -> ListItem:
        """
        Patch item fields (edit access on the item's list).

        Raises:
            ItemNotFoundError: If the item doesn't exist
        """
        ...

    async def delete_item(self, user_id: Optional[str], item_id: str) -> None:
        """Delete an item (edit access on the item's list)."""
        ...

    async def reorder_items(
        self,
        user_id: Optional[str],
        list_id: str,
        item_orders: list[ItemOrder],
    ) -> None:
        """
        Apply each (item, order) pair independently (edit access).

        No atomicity: a failure part-way leaves earlier pairs applied.
        """
        ...

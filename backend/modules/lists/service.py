"""
List & Item Store.

CRUD over shopping lists and their ordered items. Every operation on an
existing list asks the access evaluator first; mutations that other
collaborators should hear about dispatch the notification fan-out as a
deferred task.
"""

import logging
from typing import Any, Optional, TYPE_CHECKING

from modules.access import AccessControlEvaluator, AccessLevel, InviteStatus, require_authenticated
from shared.tasks import TaskDispatcher

from .exceptions import ItemNotFoundError, ListNotFoundError, NotListOwnerError
from .interfaces import IListService
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
from .repository import ItemRepository, ListRepository

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService
    from modules.sharing.repository import ShareRepository
    from modules.suggestions.frequency import FrequencyTracker

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Outros"


class ListService(IListService):
    """
    List service with Supabase backend.

    Implements IListService protocol.
    """

    def __init__(
        self,
        lists: ListRepository,
        items: ItemRepository,
        shares: "ShareRepository",
        access: AccessControlEvaluator,
        notifications: "INotificationService",
        frequency: "FrequencyTracker",
    ):
        self._lists = lists
        self._items = items
        self._shares = shares
        self._access = access
        self._notifications = notifications
        self._frequency = frequency

    # -------------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------------

    async def list_lists(self, user_id: Optional[str]) -> list[ListWithAccess]:
        if not user_id:
            return []

        owned = [
            ListWithAccess(**lst.model_dump(), access_level=AccessLevel.ADMIN, is_shared=False)
            for lst in self._lists.list_by_owner(user_id)
        ]

        accepted = self._shares.list_for_user(user_id, status=InviteStatus.ACCEPTED)
        lists_by_id = self._lists.get_many([share.list_id for share in accepted])
        shared = [
            ListWithAccess(
                **lists_by_id[share.list_id].model_dump(),
                access_level=share.access_level,
                is_shared=True,
            )
            for share in accepted
            if share.list_id in lists_by_id
        ]

        return owned + shared

    async def create_list(self, user_id: Optional[str], request: CreateListRequest) -> ShoppingList:
        user_id = require_authenticated(user_id)
        data = {
            "title": request.title,
            "description": request.description,
            "category": request.category,
            "color": request.color,
            "owner_id": user_id,
            "is_template": False,
        }
        created = self._lists.create(data)
        logger.info(f"List {created.id} created by {user_id}")
        return created

    async def update_list(
        self,
        user_id: Optional[str],
        list_id: str,
        request: UpdateListRequest,
        tasks: TaskDispatcher,
    ) -> ShoppingList:
        user_id = require_authenticated(user_id)
        shopping_list = self._get_list(list_id)
        self._access.require(user_id, shopping_list, AccessLevel.EDIT)

        patch = request.to_patch()
        if patch:
            self._lists.update(list_id, patch)

        tasks.dispatch(self._notifications.notify_list_updated, list_id, user_id)

        return shopping_list.model_copy(update=patch)

    async def delete_list(self, user_id: Optional[str], list_id: str) -> None:
        user_id = require_authenticated(user_id)
        shopping_list = self._get_list(list_id)

        if shopping_list.owner_id != user_id:
            raise NotListOwnerError(list_id, user_id)

        # Items and shares go before the list row.
        self._items.delete_for_list(list_id)
        self._shares.delete_for_list(list_id)
        self._lists.delete(list_id)
        logger.info(f"List {list_id} deleted by {user_id}")

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    async def get_list_items(self, user_id: Optional[str], list_id: str) -> list[ListItem]:
        if not user_id:
            return []
        shopping_list = self._lists.get_by_id(list_id)
        if shopping_list is None:
            return []
        if not self._access.authorize(user_id, shopping_list, AccessLevel.VIEW):
            return []
        return self._items.list_for_list(list_id)

    async def add_item(
        self,
        user_id: Optional[str],
        list_id: str,
        request: AddItemRequest,
        tasks: TaskDispatcher,
    ) -> ListItem:
        user_id = require_authenticated(user_id)
        shopping_list = self._get_list(list_id)
        self._access.require(user_id, shopping_list, AccessLevel.EDIT)

        max_order = self._items.max_order(list_id)
        data: dict[str, Any] = {
            "list_id": list_id,
            "name": request.name,
            "quantity": request.quantity,
            "notes": request.notes,
            "category": request.category,
            "is_completed": False,
            "added_by": user_id,
            "order": 0 if max_order is None else max_order + 1,
        }
        item = self._items.create(data)

        tasks.dispatch(
            self._frequency.record_usage,
            user_id,
            request.name,
            request.category or DEFAULT_CATEGORY,
        )
        tasks.dispatch(self._notifications.notify_item_added, list_id, request.name, user_id)

        return item

    async def update_item(
        self,
        user_id: Optional[str],
        item_id: str,
        request: UpdateItemRequest,
    ) -> ListItem:
        user_id = require_authenticated(user_id)
        item = self._get_item(item_id)
        shopping_list = self._get_list(item.list_id)
        self._access.require(user_id, shopping_list, AccessLevel.EDIT)

        patch = request.to_patch()
        if patch:
            self._items.update(item_id, patch)
        return item.model_copy(update=patch)

    async def delete_item(self, user_id: Optional[str], item_id: str) -> None:
        user_id = require_authenticated(user_id)
        item = self._get_item(item_id)
        shopping_list = self._get_list(item.list_id)
        self._access.require(user_id, shopping_list, AccessLevel.EDIT)

        self._items.delete(item_id)

    async def reorder_items(
        self,
        user_id: Optional[str],
        list_id: str,
        item_orders: list[ItemOrder],
    ) -> None:
        user_id = require_authenticated(user_id)
        shopping_list = self._get_list(list_id)
        self._access.require(user_id, shopping_list, AccessLevel.EDIT)

        for entry in item_orders:
            self._items.update_order(list_id, entry.item_id, entry.order)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_list(self, list_id: str) -> ShoppingList:
        shopping_list = self._lists.get_by_id(list_id)
        if shopping_list is None:
            raise ListNotFoundError(list_id)
        return shopping_list

    def _get_item(self, item_id: str) -> ListItem:
        item = self._items.get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

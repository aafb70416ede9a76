"""
Lists module.

Shopping lists and their ordered items.

Public API:
- IListService: Interface for list and item operations
- ShoppingList, ListWithAccess, ListItem: list views
- ListRepository, ItemRepository: table access
"""

from .interfaces import IListService
from .models import (
    ShoppingList,
    ListWithAccess,
    ListItem,
    CreateListRequest,
    UpdateListRequest,
    AddItemRequest,
    UpdateItemRequest,
    ItemOrder,
    ReorderItemsRequest,
)
from .repository import ListRepository, ItemRepository
from .exceptions import ListNotFoundError, ItemNotFoundError, NotListOwnerError

__all__ = [
    # Interface
    "IListService",
    # Models
    "ShoppingList",
    "ListWithAccess",
    "ListItem",
    "CreateListRequest",
    "UpdateListRequest",
    "AddItemRequest",
    "UpdateItemRequest",
    "ItemOrder",
    "ReorderItemsRequest",
    # Repositories
    "ListRepository",
    "ItemRepository",
    # Exceptions
    "ListNotFoundError",
    "ItemNotFoundError",
    "NotListOwnerError",
]

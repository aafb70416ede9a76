"""
List and item API endpoints.

Queries take an optional bearer token and answer anonymous callers with an
empty result; mutations require one. Domain errors are mapped to HTTP
responses by the application's exception handler.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_list_service, get_task_dispatcher
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser
from shared.tasks import TaskDispatcher

from .interfaces import IListService
from .models import (
    AddItemRequest,
    CreateListRequest,
    ListItem,
    ListWithAccess,
    ReorderItemsRequest,
    ShoppingList,
    UpdateItemRequest,
    UpdateListRequest,
)

router = APIRouter()
items_router = APIRouter()


@router.get("", response_model=list[ListWithAccess])
async def list_lists(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IListService = Depends(get_list_service),
) -> list[ListWithAccess]:
    """
    Lists the caller owns, then lists shared with them.
    """
    return await service.list_lists(user.id if user else None)


@router.post("", response_model=ShoppingList, status_code=201)
async def create_list(
    request: CreateListRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
) -> ShoppingList:
    return await service.create_list(user.id, request)


@router.patch("/{list_id}", response_model=ShoppingList)
async def update_list(
    list_id: str,
    request: UpdateListRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
    tasks: TaskDispatcher = Depends(get_task_dispatcher),
) -> ShoppingList:
    """
    Patch list fields. Collaborators are notified after the response.
    """
    return await service.update_list(user.id, list_id, request, tasks)


@router.delete("/{list_id}", status_code=204)
async def delete_list(
    list_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
) -> None:
    """
    Delete a list with its items and shares. Owner only.
    """
    await service.delete_list(user.id, list_id)


@router.get("/{list_id}/items", response_model=list[ListItem])
async def get_list_items(
    list_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IListService = Depends(get_list_service),
) -> list[ListItem]:
    return await service.get_list_items(user.id if user else None, list_id)


@router.post("/{list_id}/items", response_model=ListItem, status_code=201)
async def add_item(
    list_id: str,
    request: AddItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
    tasks: TaskDispatcher = Depends(get_task_dispatcher),
) -> ListItem:
    """
    Append an item to the end of the list.
    """
    return await service.add_item(user.id, list_id, request, tasks)


@router.put("/{list_id}/items/order", status_code=204)
async def reorder_items(
    list_id: str,
    request: ReorderItemsRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
) -> None:
    await service.reorder_items(user.id, list_id, request.item_orders)


@items_router.patch("/{item_id}", response_model=ListItem)
async def update_item(
    item_id: str,
    request: UpdateItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
) -> ListItem:
    return await service.update_item(user.id, item_id, request)


@items_router.delete("/{item_id}", status_code=204)
async def delete_item(
    item_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListService = Depends(get_list_service),
) -> None:
    await service.delete_item(user.id, item_id)

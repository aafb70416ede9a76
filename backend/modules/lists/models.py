"""
Lists module data models.

Shopping lists, their ordered items, and the request bodies used to
create and patch them.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from modules.access.models import AccessLevel


class ShoppingList(BaseModel):
    """A shopping list owned by one user."""

    id: str = Field(..., description="List ID")
    title: str = Field(..., description="List title")
    description: Optional[str] = Field(None, description="Optional description")
    category: Optional[str] = Field(None, description="Optional category")
    color: Optional[str] = Field(None, description="Optional display color")
    owner_id: str = Field(..., description="Owning user ID")
    is_template: bool = Field(default=False, description="Reserved; not used by current flows")
    created_at: Optional[datetime] = Field(None, description="Creation time")


class ListWithAccess(ShoppingList):
    """A list as seen by a particular user."""

    access_level: AccessLevel = Field(..., description="Caller's effective access level")
    is_shared: bool = Field(..., description="True when reached through a share")


class ListItem(BaseModel):
    """An item inside a shopping list."""

    id: str = Field(..., description="Item ID")
    list_id: str = Field(..., description="Parent list ID")
    name: str = Field(..., description="Item name")
    quantity: Optional[str] = Field(None, description="Free-form quantity")
    notes: Optional[str] = Field(None, description="Free-form notes")
    category: Optional[str] = Field(None, description="Item category")
    is_completed: bool = Field(default=False, description="Checked off")
    added_by: str = Field(..., description="User who added the item")
    order: int = Field(..., description="Position within the list (ascending)")
    created_at: Optional[datetime] = Field(None, description="Creation time")


class PatchModel(BaseModel):
    """
    Base for partial updates.

    Only fields present in the request body end up in the patch, so an
    omitted field is left alone while an explicit null clears the column.
    """

    def to_patch(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class CreateListRequest(BaseModel):
    """Request to create a new list."""

    title: str = Field(..., min_length=1, description="List title")
    description: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None


class UpdateListRequest(PatchModel):
    """Partial update of list fields."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("title may be omitted but not set to null")
        return value


class AddItemRequest(BaseModel):
    """Request to add an item to a list."""

    name: str = Field(..., min_length=1, description="Item name")
    quantity: Optional[str] = None
    notes: Optional[str] = None
    category: Optional[str] = None


class UpdateItemRequest(PatchModel):
    """Partial update of item fields."""

    name: Optional[str] = Field(None, min_length=1)
    quantity: Optional[str] = None
    notes: Optional[str] = None
    category: Optional[str] = None
    is_completed: Optional[bool] = None

    @field_validator("name", "is_completed")
    @classmethod
    def required_not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value


class ItemOrder(BaseModel):
    """New position for one item."""

    item_id: str
    order: int


class ReorderItemsRequest(BaseModel):
    """Full set of (item, position) pairs for a list."""

    item_orders: list[ItemOrder] = Field(default_factory=list)

"""
Notifications module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    """Kinds of notification a user can receive."""

    LIST_SHARED = "list_shared"
    ITEM_ADDED = "item_added"
    LIST_UPDATED = "list_updated"
    AI_SUGGESTION = "ai_suggestion"


class Notification(BaseModel):
    """A message addressed to one user."""

    id: str = Field(..., description="Notification ID")
    user_id: str = Field(..., description="Recipient")
    type: NotificationType = Field(..., description="Notification kind")
    title: str = Field(..., description="Short title")
    message: str = Field(..., description="Rendered message text")
    is_read: bool = Field(default=False, description="Marked read by the recipient")
    related_list_id: Optional[str] = Field(None, description="List that triggered it")
    from_user_id: Optional[str] = Field(None, description="User whose action triggered it")
    created_at: Optional[datetime] = Field(None, description="Creation time")


class NewNotification(BaseModel):
    """Notification to be inserted by the fan-out."""

    user_id: str
    type: NotificationType
    title: str
    message: str
    related_list_id: Optional[str] = None
    from_user_id: Optional[str] = None

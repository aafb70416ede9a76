"""
Sharing module data models.
"""

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from modules.access.models import AccessLevel, InviteStatus
from modules.lists.models import ShoppingList
from shared.models import UserSummary


class ListShare(BaseModel):
    """A grant of access on one list to one user."""

    id: str = Field(..., description="Share ID")
    list_id: str = Field(..., description="Shared list ID")
    shared_with_user_id: str = Field(..., description="User receiving access")
    shared_by_user_id: str = Field(..., description="User who granted access")
    access_level: AccessLevel = Field(..., description="Granted level")
    invite_status: InviteStatus = Field(..., description="Invite lifecycle state")


class ShareWithUser(ListShare):
    """A share joined with the target user's identity."""

    user: Optional[UserSummary] = Field(None, description="Target user")


class PendingInvite(ListShare):
    """A pending share joined with the list and the inviting user."""

    list: Optional[ShoppingList] = Field(None, description="Shared list")
    shared_by: Optional[UserSummary] = Field(None, description="Inviting user")


class ShareListRequest(BaseModel):
    """Request to share a list with a user by email."""

    user_email: EmailStr = Field(..., description="Email of the user to invite")
    access_level: AccessLevel = Field(..., description="Level to grant")


class RespondToInviteRequest(BaseModel):
    """Invitee's answer to a pending share."""

    response: Literal["accepted", "declined"]

"""
Notification inbox API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_notification_service
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser

from .interfaces import INotificationService
from .models import Notification

router = APIRouter()


class MarkAllReadResponse(BaseModel):
    updated: int


@router.get("", response_model=list[Notification])
async def get_user_notifications(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: INotificationService = Depends(get_notification_service),
) -> list[Notification]:
    """
    The caller's latest notifications, newest first.
    """
    return await service.get_user_notifications(user.id if user else None)


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_as_read(
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(updated=await service.mark_all_as_read(user.id))


@router.post("/{notification_id}/read", status_code=204)
async def mark_as_read(
    notification_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> None:
    await service.mark_as_read(user.id, notification_id)

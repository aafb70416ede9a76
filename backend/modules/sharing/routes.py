"""
Sharing and invite API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_sharing_service
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser

from .interfaces import ISharingService
from .models import (
    ListShare,
    PendingInvite,
    RespondToInviteRequest,
    ShareListRequest,
    ShareWithUser,
)

router = APIRouter()
invites_router = APIRouter()


@router.post("/{list_id}/shares", response_model=ListShare, status_code=201)
async def share_list(
    list_id: str,
    request: ShareListRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> ListShare:
    """
    Invite a user by email. Requires admin access on the list.

    Sharing again with the same user replaces the level and makes the
    invite pending again.
    """
    return await service.share_list(user.id, list_id, request.user_email, request.access_level)


@router.get("/{list_id}/shares", response_model=list[ShareWithUser])
async def get_list_shares(
    list_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: ISharingService = Depends(get_sharing_service),
) -> list[ShareWithUser]:
    return await service.get_list_shares(user.id if user else None, list_id)


@router.delete("/{list_id}/shares/{user_id}", status_code=204)
async def remove_share(
    list_id: str,
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> None:
    await service.remove_share(user.id, list_id, user_id)


@invites_router.get("", response_model=list[PendingInvite])
async def get_pending_invites(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: ISharingService = Depends(get_sharing_service),
) -> list[PendingInvite]:
    """
    Invites waiting for the caller's answer.
    """
    return await service.get_pending_invites(user.id if user else None)


@invites_router.post("/{list_id}/respond", status_code=204)
async def respond_to_invite(
    list_id: str,
    request: RespondToInviteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> None:
    """
    Accept or decline an invite. Declining removes it.
    """
    await service.respond_to_invite(user.id, list_id, request.response)

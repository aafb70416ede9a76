"""
User profile API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_profile_service
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import (
    CurrentUserProfile,
    PhotoUrlResponse,
    ProfileRequest,
    UploadTarget,
    UserProfile,
)

router = APIRouter()


@router.get("", response_model=Optional[CurrentUserProfile])
async def get_current_user_profile(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IProfileService = Depends(get_profile_service),
) -> Optional[CurrentUserProfile]:
    """
    The caller and their profile. null for anonymous callers.
    """
    return await service.get_current_user_profile(user)


@router.put("", response_model=UserProfile)
async def create_or_update_profile(
    request: ProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> UserProfile:
    return await service.create_or_update_profile(user.id, request)


@router.post("/photo-upload-url", response_model=UploadTarget)
async def generate_upload_url(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> UploadTarget:
    """
    Signed URL for uploading a profile photo. Save the returned path
    as profile_photo afterwards.
    """
    return await service.generate_upload_url(user.id)


@router.get("/photo-url/{storage_path:path}", response_model=PhotoUrlResponse)
async def get_profile_photo_url(
    storage_path: str,
    service: IProfileService = Depends(get_profile_service),
) -> PhotoUrlResponse:
    return PhotoUrlResponse(url=await service.get_profile_photo_url(storage_path))

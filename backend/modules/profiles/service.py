"""
User profile service.
"""

import logging
from typing import Any, Optional

from modules.access import require_authenticated
from shared.models import AuthenticatedUser, UserSummary

from .interfaces import IProfileService
from .models import CurrentUserProfile, ProfileRequest, UploadTarget, UserProfile
from .repository import ProfileRepository
from .storage import PhotoStorage

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """Profile service with Supabase backend."""

    def __init__(self, profiles: ProfileRepository, storage: PhotoStorage):
        self._profiles = profiles
        self._storage = storage

    async def get_current_user_profile(
        self, user: Optional[AuthenticatedUser]
    ) -> Optional[CurrentUserProfile]:
        if user is None:
            return None
        return CurrentUserProfile(
            user=UserSummary(id=user.id, email=user.email),
            profile=self._profiles.get_by_user(user.id),
        )

    async def create_or_update_profile(
        self, user_id: Optional[str], request: ProfileRequest
    ) -> UserProfile:
        user_id = require_authenticated(user_id)

        data: dict[str, Any] = {
            "name": request.name,
            "dietary_preferences": request.dietary_preferences,
            "theme": request.theme,
        }
        if request.profile_photo:
            data["profile_photo"] = request.profile_photo

        existing = self._profiles.get_by_user(user_id)
        if existing:
            self._profiles.update(existing.id, data)
            return existing.model_copy(update=data)

        logger.info(f"Creating profile for {user_id}")
        return self._profiles.create({"user_id": user_id, **data})

    async def generate_upload_url(self, user_id: Optional[str]) -> UploadTarget:
        user_id = require_authenticated(user_id)
        return self._storage.create_upload_target(user_id)

    async def get_profile_photo_url(self, storage_path: str) -> Optional[str]:
        return self._storage.signed_url(storage_path)

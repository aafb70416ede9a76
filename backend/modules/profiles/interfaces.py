"""
Profiles module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import CurrentUserProfile, ProfileRequest, UploadTarget, UserProfile


@runtime_checkable
class IProfileService(Protocol):
    """Interface for user profile operations."""

    async def get_current_user_profile(
        self, user: Optional[AuthenticatedUser]
    ) -> Optional[CurrentUserProfile]:
        """The caller with their profile; None when anonymous."""
        ...

    async def create_or_update_profile(
        self, user_id: Optional[str], request: ProfileRequest
    ) -> UserProfile:
        """
        Upsert the caller's profile.

        The stored photo is only replaced when request.profile_photo is set.

        Raises:
            NotAuthenticatedError: If user_id is None
        """
        ...

    async def generate_upload_url(self, user_id: Optional[str]) -> UploadTarget:
        """
        Issue a signed upload target in the photo bucket.

        Raises:
            NotAuthenticatedError: If user_id is None
            PhotoStorageError: If the bucket refuses
        """
        ...

    async def get_profile_photo_url(self, storage_path: str) -> Optional[str]:
        """Signed download URL for a stored photo, or None."""
        ...

"""
Profiles module.

Per-user display name, dietary preferences, theme and profile photo.

Public API:
- IProfileService: Interface for profile operations
- PhotoStorage: signed URLs on the photo bucket
"""

from .interfaces import IProfileService
from .models import (
    UserProfile,
    CurrentUserProfile,
    ProfileRequest,
    UploadTarget,
    PhotoUrlResponse,
)
from .repository import ProfileRepository
from .storage import PhotoStorage
from .exceptions import PhotoStorageError

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "UserProfile",
    "CurrentUserProfile",
    "ProfileRequest",
    "UploadTarget",
    "PhotoUrlResponse",
    # Components
    "ProfileRepository",
    "PhotoStorage",
    # Exceptions
    "PhotoStorageError",
]

"""
Profiles module data models.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from shared.models import UserSummary

Theme = Literal["light", "dark"]


class UserProfile(BaseModel):
    """Per-user preferences. At most one per user."""

    id: str = Field(..., description="Profile ID")
    user_id: str = Field(..., description="Owning user")
    name: str = Field(..., description="Display name")
    profile_photo: Optional[str] = Field(None, description="Storage path of the profile photo")
    dietary_preferences: list[str] = Field(default_factory=list, description="Used to steer smart lists")
    theme: Theme = Field(default="light", description="UI theme")


class CurrentUserProfile(BaseModel):
    """The caller's identity together with their profile, if one exists."""

    user: UserSummary
    profile: Optional[UserProfile] = None


class ProfileRequest(BaseModel):
    """Create or replace the caller's profile."""

    name: str = Field(..., description="Display name")
    dietary_preferences: list[str] = Field(default_factory=list)
    theme: Theme = "light"
    profile_photo: Optional[str] = Field(
        None,
        description="Storage path returned by the upload handshake; omitted keeps the current photo",
    )


class UploadTarget(BaseModel):
    """Signed upload destination for a profile photo."""

    path: str = Field(..., description="Storage path to send back as profile_photo")
    upload_url: str = Field(..., description="Signed URL accepting the upload")
    token: Optional[str] = Field(None, description="Upload token, when the storage backend issues one")


class PhotoUrlResponse(BaseModel):
    url: Optional[str] = None

"""Tests for the profile service."""

import pytest
from unittest.mock import MagicMock

from modules.access import NotAuthenticatedError
from modules.profiles.models import ProfileRequest, UploadTarget, UserProfile
from modules.profiles.service import ProfileService
from shared.models import AuthenticatedUser


def make_profile(photo: str | None = "user-1/old") -> UserProfile:
    return UserProfile(
        id="p1",
        user_id="user-1",
        name="Ana",
        profile_photo=photo,
        dietary_preferences=["vegetariano"],
        theme="dark",
    )


@pytest.fixture
def profiles():
    return MagicMock()


@pytest.fixture
def storage():
    return MagicMock()


@pytest.fixture
def service(profiles, storage):
    return ProfileService(profiles=profiles, storage=storage)


class TestCurrentUserProfile:
    @pytest.mark.asyncio
    async def test_anonymous_is_none(self, service):
        assert await service.get_current_user_profile(None) is None

    @pytest.mark.asyncio
    async def test_user_without_profile(self, service, profiles):
        profiles.get_by_user.return_value = None
        user = AuthenticatedUser(id="user-1", email="ana@example.com")

        result = await service.get_current_user_profile(user)

        assert result.user.email == "ana@example.com"
        assert result.profile is None

    @pytest.mark.asyncio
    async def test_user_with_profile(self, service, profiles):
        profiles.get_by_user.return_value = make_profile()
        user = AuthenticatedUser(id="user-1", email="ana@example.com")

        result = await service.get_current_user_profile(user)

        assert result.profile.theme == "dark"


class TestCreateOrUpdateProfile:
    @pytest.mark.asyncio
    async def test_creates_when_missing(self, service, profiles):
        profiles.get_by_user.return_value = None
        profiles.create.return_value = make_profile(photo=None)

        await service.create_or_update_profile(
            "user-1", ProfileRequest(name="Ana", dietary_preferences=["vegano"], theme="light")
        )

        data = profiles.create.call_args.args[0]
        assert data["user_id"] == "user-1"
        assert data["dietary_preferences"] == ["vegano"]
        assert "profile_photo" not in data

    @pytest.mark.asyncio
    async def test_update_keeps_photo_when_omitted(self, service, profiles):
        """The stored photo survives an update without a new one."""
        profiles.get_by_user.return_value = make_profile(photo="user-1/old")

        result = await service.create_or_update_profile("user-1", ProfileRequest(name="Ana B"))

        profile_id, patch = profiles.update.call_args.args
        assert profile_id == "p1"
        assert "profile_photo" not in patch
        assert result.profile_photo == "user-1/old"
        assert result.name == "Ana B"

    @pytest.mark.asyncio
    async def test_update_replaces_photo_when_given(self, service, profiles):
        profiles.get_by_user.return_value = make_profile(photo="user-1/old")

        result = await service.create_or_update_profile(
            "user-1", ProfileRequest(name="Ana", profile_photo="user-1/new")
        )

        assert profiles.update.call_args.args[1]["profile_photo"] == "user-1/new"
        assert result.profile_photo == "user-1/new"

    @pytest.mark.asyncio
    async def test_requires_auth(self, service):
        with pytest.raises(NotAuthenticatedError):
            await service.create_or_update_profile(None, ProfileRequest(name="Ana"))


class TestPhotos:
    @pytest.mark.asyncio
    async def test_generate_upload_url(self, service, storage):
        storage.create_upload_target.return_value = UploadTarget(path="user-1/x", upload_url="https://u")
        target = await service.generate_upload_url("user-1")
        assert target.path == "user-1/x"
        storage.create_upload_target.assert_called_once_with("user-1")

    @pytest.mark.asyncio
    async def test_generate_upload_url_requires_auth(self, service, storage):
        with pytest.raises(NotAuthenticatedError):
            await service.generate_upload_url(None)
        storage.create_upload_target.assert_not_called()

    @pytest.mark.asyncio
    async def test_photo_url(self, service, storage):
        storage.signed_url.return_value = "https://signed"
        assert await service.get_profile_photo_url("user-1/x") == "https://signed"

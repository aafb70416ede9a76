"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
JWT minting for authenticated requests and builders for domain objects.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import patch
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.access.models import AccessLevel, InviteStatus
from modules.lists.models import ListItem, ShoppingList
from modules.sharing.models import ListShare


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_list(
    list_id: str = "list-1",
    owner_id: str = "owner-1",
    title: str = "Mercado",
) -> ShoppingList:
    """Build a ShoppingList for tests."""
    return ShoppingList(id=list_id, title=title, owner_id=owner_id)


def make_item(
    item_id: str = "item-1",
    list_id: str = "list-1",
    name: str = "Leite",
    order: int = 0,
    added_by: str = "owner-1",
) -> ListItem:
    """Build a ListItem for tests."""
    return ListItem(id=item_id, list_id=list_id, name=name, order=order, added_by=added_by)


def make_share(
    list_id: str = "list-1",
    user_id: str = "user-b",
    level: AccessLevel = AccessLevel.EDIT,
    status: InviteStatus = InviteStatus.ACCEPTED,
    shared_by: str = "owner-1",
    share_id: str | None = None,
) -> ListShare:
    """Build a ListShare for tests."""
    return ListShare(
        id=share_id or f"share-{list_id}-{user_id}",
        list_id=list_id,
        shared_with_user_id=user_id,
        shared_by_user_id=shared_by,
        access_level=level,
        invite_status=status,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def jwt_settings():
    """Patch auth settings so tokens from create_test_token validate."""
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield mock_settings


@pytest.fixture
def override_dependency():
    """Replace a FastAPI dependency for the duration of one test."""
    from api import app

    def _override(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        return value

    yield _override
    app.dependency_overrides.clear()

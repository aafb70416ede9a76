"""
Authentication service implementation.

Validates Supabase JWT tokens and resolves users from the public
users directory.
"""

from datetime import datetime, timezone
from typing import Optional
import jwt

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload, UserRecord
from .repository import UserRepository
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication and the `users`
    table for identity lookups.
    """

    def __init__(self, repository: Optional[UserRepository] = None):
        self._settings = get_settings()
        self._repository = repository

    @property
    def users(self) -> UserRepository:
        """User repository, created on first use so token checks never touch the DB."""
        if self._repository is None:
            self._repository = UserRepository(get_supabase_client())
        return self._repository

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
            jwt_payload = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        if not jwt_payload.email:
            raise InvalidTokenError("Token has no email claim")

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID from the users directory."""
        return self.users.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by exact email from the users directory."""
        return self.users.get_by_email(email)


"""
Authentication module.

Handles JWT validation and user lookups.

Public API:
- IAuthService: Interface for auth operations
- UserRecord: Public identity of a user
- UserRepository: users directory access
"""

from .interfaces import IAuthService
from .models import JWTPayload, UserRecord
from .repository import UserRepository
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    "UserRecord",
    # Repository
    "UserRepository",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "UserNotFoundError",
]

"""
Shared infrastructure for Cartwise backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- tasks: Deferred side-effect dispatch

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    CartwiseError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, UserSummary
from .tasks import TaskDispatcher, BackgroundTaskDispatcher, InlineTaskDispatcher

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "CartwiseError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "UserSummary",
    "TaskDispatcher",
    "BackgroundTaskDispatcher",
    "InlineTaskDispatcher",
]

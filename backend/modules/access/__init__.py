"""
Access control module.

Decides whether a user may view, edit or administer a shopping list.

Public API:
- AccessControlEvaluator: share-backed permission checks
- is_authorized / effective_level: pure predicates over loaded shares
- AccessLevel, InviteStatus: share enums
"""

from .models import AccessLevel, InviteStatus, ALLOWED_LEVELS
from .exceptions import NotAuthenticatedError, ListAccessDeniedError
from .evaluator import (
    AccessControlEvaluator,
    effective_level,
    is_authorized,
    require_authenticated,
)

__all__ = [
    # Models
    "AccessLevel",
    "InviteStatus",
    "ALLOWED_LEVELS",
    # Exceptions
    "NotAuthenticatedError",
    "ListAccessDeniedError",
    # Evaluator
    "AccessControlEvaluator",
    "effective_level",
    "is_authorized",
    "require_authenticated",
]

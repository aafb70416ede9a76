"""
Access control exceptions.
"""

from shared.exceptions import AuthenticationError, AuthorizationError

from .models import AccessLevel


class NotAuthenticatedError(AuthenticationError):
    """Raised when a mutation or action is called without a user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class ListAccessDeniedError(AuthorizationError):
    """Raised when a user lacks the access level an operation requires."""

    def __init__(self, list_id: str, user_id: str, required: AccessLevel):
        super().__init__(
            f"Insufficient access to list {list_id}: {required.value} required",
            code="LIST_ACCESS_DENIED",
            details={
                "list_id": list_id,
                "user_id": user_id,
                "required_level": required.value,
            },
        )

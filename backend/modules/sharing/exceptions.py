"""
Sharing module exceptions.
"""

from shared.exceptions import NotFoundError


class InviteNotFoundError(NotFoundError):
    """Raised when the caller has no pending invite for a list."""

    def __init__(self, list_id: str, user_id: str):
        super().__init__(
            f"No pending invite for list {list_id}",
            code="INVITE_NOT_FOUND",
            details={"list_id": list_id, "user_id": user_id},
        )

"""
Lists module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class ListNotFoundError(NotFoundError):
    """Raised when a shopping list is not found."""

    def __init__(self, list_id: str):
        super().__init__(
            f"List not found: {list_id}",
            code="LIST_NOT_FOUND",
            details={"list_id": list_id},
        )


class ItemNotFoundError(NotFoundError):
    """Raised when a list item is not found."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class NotListOwnerError(AuthorizationError):
    """Raised when a non-owner tries an owner-only operation."""

    def __init__(self, list_id: str, user_id: str):
        super().__init__(
            f"Only the owner can delete list {list_id}",
            code="NOT_LIST_OWNER",
            details={"list_id": list_id, "user_id": user_id},
        )

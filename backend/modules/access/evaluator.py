"""
Access Control Evaluator.

Single source of truth for list permissions. A user may act on a list
when they own it, or when they hold an accepted share whose level
satisfies the required level (see ALLOWED_LEVELS).

Nothing is cached: the share rows are re-read on every check.
"""

from typing import Iterable, Optional, TYPE_CHECKING

from .exceptions import ListAccessDeniedError, NotAuthenticatedError
from .models import ALLOWED_LEVELS, AccessLevel, InviteStatus

if TYPE_CHECKING:
    from modules.lists.models import ShoppingList
    from modules.sharing.models import ListShare
    from modules.sharing.repository import ShareRepository


def effective_level(
    user_id: Optional[str],
    shopping_list: "ShoppingList",
    shares: Iterable["ListShare"],
) -> Optional[AccessLevel]:
    """
    Resolve the level a user holds on a list.

    The owner always holds ADMIN. Otherwise the level of the user's
    accepted share is returned, or None when there is no such share.
    """
    if not user_id:
        return None
    if shopping_list.owner_id == user_id:
        return AccessLevel.ADMIN
    for share in shares:
        if (
            share.list_id == shopping_list.id
            and share.shared_with_user_id == user_id
            and share.invite_status == InviteStatus.ACCEPTED
        ):
            return share.access_level
    return None


def is_authorized(
    user_id: Optional[str],
    shopping_list: "ShoppingList",
    required: AccessLevel,
    shares: Iterable["ListShare"],
) -> bool:
    """Pure permission predicate over an already-loaded set of shares."""
    level = effective_level(user_id, shopping_list, shares)
    return level is not None and level in ALLOWED_LEVELS[required]


def require_authenticated(user_id: Optional[str]) -> str:
    """Return user_id, or raise NotAuthenticatedError when it is missing."""
    if not user_id:
        raise NotAuthenticatedError()
    return user_id


class AccessControlEvaluator:
    """
    Evaluates list permissions against the share table.

    Every service that reads or mutates list-scoped data goes
    through this class.
    """

    def __init__(self, share_repository: "ShareRepository") -> None:
        self._shares = share_repository

    def authorize(
        self,
        user_id: Optional[str],
        shopping_list: "ShoppingList",
        required: AccessLevel,
    ) -> bool:
        """Return True if user_id may act on shopping_list at the required level."""
        if not user_id:
            return False
        if shopping_list.owner_id == user_id:
            return True
        shares = self._shares.list_for_list(shopping_list.id, status=InviteStatus.ACCEPTED)
        return is_authorized(user_id, shopping_list, required, shares)

    def level_for(
        self,
        user_id: Optional[str],
        shopping_list: "ShoppingList",
    ) -> Optional[AccessLevel]:
        """Return the user's effective level on the list, or None."""
        if not user_id:
            return None
        if shopping_list.owner_id == user_id:
            return AccessLevel.ADMIN
        shares = self._shares.list_for_list(shopping_list.id, status=InviteStatus.ACCEPTED)
        return effective_level(user_id, shopping_list, shares)

    def require(
        self,
        user_id: Optional[str],
        shopping_list: "ShoppingList",
        required: AccessLevel,
    ) -> None:
        """
        Raise unless the user holds the required level.

        Raises:
            NotAuthenticatedError: If user_id is missing
            ListAccessDeniedError: If the level is insufficient
        """
        user_id = require_authenticated(user_id)
        if not self.authorize(user_id, shopping_list, required):
            raise ListAccessDeniedError(shopping_list.id, user_id, required)

"""
User-related endpoints.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """Identity carried by the caller's token."""

    id: str
    email: EmailStr
    email_verified: bool


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
) -> CurrentUserResponse:
    """
    Get the caller's identity.

    Requires authentication.
    """
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
    )

"""
AI suggestion API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_suggestion_service
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser

from .interfaces import ISuggestionService
from .models import (
    CategorizeRequest,
    CategorizeResponse,
    GeneratedList,
    ItemSuggestion,
    ItemSuggestionsRequest,
    SmartListRequest,
    WeeklySuggestion,
)

router = APIRouter()


@router.post("/smart-list", response_model=GeneratedList)
async def generate_smart_list(
    request: SmartListRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISuggestionService = Depends(get_suggestion_service),
) -> GeneratedList:
    """
    Generate a complete list from a natural-language request.

    Returns 502 when the model call fails or its reply is not JSON.
    """
    return await service.generate_smart_list(user.id, request.prompt, request.dietary_preferences)


@router.post("/suggestions", response_model=list[ItemSuggestion])
async def get_item_suggestions(
    request: ItemSuggestionsRequest,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: ISuggestionService = Depends(get_suggestion_service),
) -> list[ItemSuggestion]:
    return await service.get_item_suggestions(
        user.id if user else None, request.query, request.list_id
    )


@router.post("/categorize", response_model=CategorizeResponse)
async def categorize_item(
    request: CategorizeRequest,
    service: ISuggestionService = Depends(get_suggestion_service),
) -> CategorizeResponse:
    return CategorizeResponse(category=await service.categorize_item(request.item_name))


@router.get("/weekly-suggestions", response_model=list[WeeklySuggestion])
async def get_weekly_suggestions(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: ISuggestionService = Depends(get_suggestion_service),
) -> list[WeeklySuggestion]:
    return await service.get_weekly_suggestions(user.id if user else None)

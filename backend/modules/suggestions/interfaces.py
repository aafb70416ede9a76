"""
Suggestions module interface.

AI-backed actions. Only generate_smart_list surfaces model failures; the
other actions degrade to history-only or empty results.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import GeneratedList, ItemSuggestion, WeeklySuggestion


@runtime_checkable
class ISuggestionService(Protocol):
    """Interface for the suggestion gateway."""

    async def generate_smart_list(
        self,
        user_id: Optional[str],
        prompt: str,
        dietary_preferences: Optional[list[str]] = None,
    ) -> GeneratedList:
        """
        Ask the model for a complete list.

        Raises:
            NotAuthenticatedError: If user_id is None
            SmartListGenerationError: If the call fails or the reply is not JSON
            InvalidSmartListError: If the JSON lacks a title or item array
        """
        ...

    async def get_item_suggestions(
        self,
        user_id: Optional[str],
        query: str,
        list_id: Optional[str] = None,
    ) -> list[ItemSuggestion]:
        """
        Autocomplete from history, topped up by the model when history is thin.

        Never raises on model failure; returns the history results instead.
        """
        ...

    async def categorize_item(self, item_name: str) -> str:
        """Classify an item into a fixed category. Never raises; falls back to "Outros"."""
        ...

    async def get_weekly_suggestions(self, user_id: Optional[str]) -> list[WeeklySuggestion]:
        """Items the user may have forgotten. Empty on any failure."""
        ...

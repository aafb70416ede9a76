"""
Suggestion/AI gateway.

Wraps the completion model for list generation, autocomplete,
categorization and weekly suggestions, blending in the user's own
item history from the frequency tracker.
"""

import json
import logging
from typing import Any, Optional

from langchain_core.utils.json import parse_json_markdown
from pydantic import ValidationError as PydanticValidationError

from modules.access import require_authenticated

from . import prompts
from .client import CompletionClient
from .exceptions import CompletionError, InvalidSmartListError, SmartListGenerationError
from .frequency import FrequencyTracker
from .interfaces import ISuggestionService
from .models import GeneratedList, ItemSuggestion, WeeklySuggestion

logger = logging.getLogger(__name__)


class SuggestionService(ISuggestionService):
    """Suggestion gateway backed by an injected CompletionClient."""

    def __init__(self, client: CompletionClient, frequency: FrequencyTracker):
        self._client = client
        self._frequency = frequency

    async def generate_smart_list(
        self,
        user_id: Optional[str],
        prompt: str,
        dietary_preferences: Optional[list[str]] = None,
    ) -> GeneratedList:
        require_authenticated(user_id)

        try:
            content = await self._client.complete(
                prompts.smart_list_prompt(dietary_preferences or []),
                prompt,
                temperature=prompts.SMART_LIST_TEMPERATURE,
            )
        except CompletionError as e:
            raise SmartListGenerationError(e.message) from e

        parsed = self._parse_json(content)
        if parsed is None:
            raise SmartListGenerationError("unparseable response")

        if not isinstance(parsed, dict) or not parsed.get("title") or not isinstance(parsed.get("items"), list):
            raise InvalidSmartListError("missing title or items")

        try:
            return GeneratedList.model_validate(parsed)
        except PydanticValidationError as e:
            raise InvalidSmartListError(str(e)) from e

    async def get_item_suggestions(
        self,
        user_id: Optional[str],
        query: str,
        list_id: Optional[str] = None,
    ) -> list[ItemSuggestion]:
        if not user_id:
            return []

        history = self._frequency.search_history(user_id, query, prompts.HISTORY_SEARCH_LIMIT)
        if len(history) >= prompts.HISTORY_ENOUGH:
            return history[:prompts.MAX_SUGGESTIONS]

        try:
            content = await self._client.complete(
                prompts.autocomplete_prompt(),
                query,
                temperature=prompts.AUTOCOMPLETE_TEMPERATURE,
            )
        except CompletionError:
            return history

        names = self._parse_json(content)
        if not isinstance(names, list):
            logger.warning(f"Autocomplete reply for {query!r} was not a JSON array")
            return history

        combined = list(history)
        seen = {suggestion.name.lower() for suggestion in combined}
        for name in names:
            if len(combined) >= prompts.MAX_SUGGESTIONS:
                break
            if not isinstance(name, str) or not name.strip():
                continue
            if name.lower() in seen:
                continue
            seen.add(name.lower())
            combined.append(ItemSuggestion(name=name, category=prompts.DEFAULT_CATEGORY, frequency=0))

        return combined[:prompts.MAX_SUGGESTIONS]

    async def categorize_item(self, item_name: str) -> str:
        try:
            content = await self._client.complete(
                prompts.categorize_prompt(),
                item_name,
                temperature=prompts.CATEGORIZE_TEMPERATURE,
            )
        except CompletionError:
            return prompts.DEFAULT_CATEGORY

        category = content.strip()
        if category in prompts.CATEGORIES:
            return category
        logger.info(f"Unknown category {category!r} for {item_name!r}, using default")
        return prompts.DEFAULT_CATEGORY

    async def get_weekly_suggestions(self, user_id: Optional[str]) -> list[WeeklySuggestion]:
        if not user_id:
            return []

        try:
            top = self._frequency.top_items(user_id, prompts.WEEKLY_HISTORY_LIMIT)
            content = await self._client.complete(
                prompts.weekly_prompt(),
                prompts.weekly_history_message([stat.item_name for stat in top]),
                temperature=prompts.WEEKLY_TEMPERATURE,
            )
        except Exception as e:
            logger.warning(f"Weekly suggestions unavailable for {user_id}: {e}")
            return []

        parsed = self._parse_json(content)
        if not isinstance(parsed, dict) or not isinstance(parsed.get("suggestions"), list):
            return []

        try:
            suggestions = [WeeklySuggestion.model_validate(s) for s in parsed["suggestions"]]
        except PydanticValidationError as e:
            logger.warning(f"Discarding malformed weekly suggestions: {e}")
            return []
        return suggestions[:prompts.MAX_WEEKLY_SUGGESTIONS]

    def _parse_json(self, content: str) -> Any:
        """Parse a JSON reply (fenced or bare). Returns None when it is not complete JSON."""
        try:
            return parse_json_markdown(content, parser=json.loads)
        except json.JSONDecodeError:
            logger.warning(f"Model reply is not valid JSON: {content[:200]!r}")
            return None

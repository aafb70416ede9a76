"""
Frequency Tracker.

Counts how often each user adds each item name. Names are matched exactly
(case-sensitive) when counting, while history search is case-insensitive;
"Leite" and "leite" are two separate counters that both match "lei".
"""

import logging

from .models import ItemSuggestion, SuggestionStat
from .repository import SuggestionStatRepository

logger = logging.getLogger(__name__)


class FrequencyTracker:
    """Upserts and reads per-user item usage counters."""

    def __init__(self, repository: SuggestionStatRepository) -> None:
        self._repository = repository

    async def record_usage(self, user_id: str, item_name: str, category: str) -> SuggestionStat:
        """
        Count one use of item_name by user_id.

        Increments the existing counter (refreshing category and
        timestamp) or inserts a new one at frequency 1.
        """
        existing = self._repository.get(user_id, item_name)
        if existing:
            self._repository.increment(existing, category)
            logger.debug(f"Frequency of {item_name!r} for {user_id} -> {existing.frequency + 1}")
            return existing.model_copy(
                update={"frequency": existing.frequency + 1, "category": category}
            )

        logger.debug(f"First use of {item_name!r} for {user_id}")
        return self._repository.create(user_id, item_name, category)

    def search_history(self, user_id: str, query: str, limit: int) -> list[ItemSuggestion]:
        """The user's past items containing query, most frequent first."""
        return [
            ItemSuggestion(name=stat.item_name, category=stat.category, frequency=stat.frequency)
            for stat in self._repository.search(user_id, query, limit)
        ]

    def top_items(self, user_id: str, limit: int) -> list[SuggestionStat]:
        return self._repository.top_for_user(user_id, limit)

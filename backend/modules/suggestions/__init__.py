"""
Suggestions module.

AI gateway (smart lists, autocomplete, categorization, weekly
suggestions) and the per-user frequency tracker.

Public API:
- ISuggestionService: Interface for AI actions
- FrequencyTracker: item usage counters
- CompletionClient: injected model client
"""

from .interfaces import ISuggestionService
from .models import (
    SuggestionStat,
    ItemSuggestion,
    WeeklySuggestion,
    GeneratedItem,
    GeneratedList,
    SmartListRequest,
    ItemSuggestionsRequest,
    CategorizeRequest,
    CategorizeResponse,
)
from .exceptions import CompletionError, SmartListGenerationError, InvalidSmartListError
from .client import CompletionClient
from .repository import SuggestionStatRepository
from .frequency import FrequencyTracker
from .prompts import CATEGORIES, DEFAULT_CATEGORY

__all__ = [
    # Interface
    "ISuggestionService",
    # Models
    "SuggestionStat",
    "ItemSuggestion",
    "WeeklySuggestion",
    "GeneratedItem",
    "GeneratedList",
    "SmartListRequest",
    "ItemSuggestionsRequest",
    "CategorizeRequest",
    "CategorizeResponse",
    # Exceptions
    "CompletionError",
    "SmartListGenerationError",
    "InvalidSmartListError",
    # Components
    "CompletionClient",
    "SuggestionStatRepository",
    "FrequencyTracker",
    "CATEGORIES",
    "DEFAULT_CATEGORY",
]

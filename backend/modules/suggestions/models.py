"""
Suggestions module data models.

Frequency stats, autocomplete/weekly suggestions, and the shape of an
AI-generated list.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SuggestionStat(BaseModel):
    """Per-user usage counter for one item name."""

    id: str = Field(..., description="Stat ID")
    user_id: str = Field(..., description="Owning user")
    item_name: str = Field(..., description="Item name, exactly as added")
    category: str = Field(..., description="Category last used for the item")
    frequency: int = Field(..., ge=0, description="Number of times the item was added")
    last_suggested: Optional[datetime] = Field(None, description="Last time the counter moved")
    context: Optional[str] = Field(None, description="Free-form context (unused)")


class ItemSuggestion(BaseModel):
    """An autocomplete entry. Model-sourced entries carry frequency 0."""

    name: str
    category: str
    frequency: int = 0


class WeeklySuggestion(BaseModel):
    """An item the user may have forgotten this week."""

    name: str
    reason: str = ""
    category: str = "Outros"


class GeneratedItem(BaseModel):
    """One item of an AI-generated list."""

    name: str = Field(..., min_length=1)
    quantity: Optional[str] = None
    category: Optional[str] = None


class GeneratedList(BaseModel):
    """An AI-generated list, ready to be turned into a real list by the client."""

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    items: list[GeneratedItem]


class SmartListRequest(BaseModel):
    """Natural-language request for a generated list."""

    prompt: str = Field(..., min_length=1)
    dietary_preferences: list[str] = Field(default_factory=list)


class ItemSuggestionsRequest(BaseModel):
    """Autocomplete request."""

    query: str
    list_id: Optional[str] = None


class CategorizeRequest(BaseModel):
    """Request to classify a single item name."""

    item_name: str


class CategorizeResponse(BaseModel):
    """Category chosen for an item."""

    category: str

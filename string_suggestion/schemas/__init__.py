"""
Pydantic schemas for API request/response models.
"""
from string_suggestion.schemas.suggestion import (
    WeightedWord,
    SuggestionRequest,
    SuggestionResponse,
    SpellingIssue,
    SpellCheckRequest,
    SpellCheckResponse,
    HealthResponse,
)

__all__ = [
    "WeightedWord",
    "SuggestionRequest",
    "SuggestionResponse",
    "SpellingIssue",
    "SpellCheckRequest",
    "SpellCheckResponse",
    "HealthResponse",
]

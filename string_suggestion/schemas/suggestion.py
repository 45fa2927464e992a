"""
Pydantic schemas for word suggestion functionality.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

# Longest word searched; the two-edit search grows with the square of the length
MAX_WORD_LENGTH = 32

# Longest text accepted for spell-checking
MAX_TEXT_LENGTH = 50000


class WeightedWord(BaseModel):
    """A vocabulary word with an explicit weight."""

    word: str = Field(description="Known word")
    weight: int = Field(ge=0, description="Non-negative weight, higher wins")


class SuggestionRequest(BaseModel):
    """Schema for a single-word suggestion request."""

    word: str = Field(
        ...,
        max_length=MAX_WORD_LENGTH,
        description="Word to correct"
    )
    words: List[str] = Field(
        default_factory=list,
        description="Known words, each given the default flat weight"
    )
    entries: List[WeightedWord] = Field(
        default_factory=list,
        description="Known words with explicit weights, applied after `words`"
    )


class SuggestionResponse(BaseModel):
    """Schema for a single-word suggestion response."""

    word: str
    suggestion: Optional[str] = Field(
        default=None,
        description="Most likely intended word, null when no correction was found"
    )
    vocabulary_size: int


class SpellingIssue(BaseModel):
    """An unknown word with its suggested correction."""

    word: str = Field(description="Unknown word (lowercase)")
    suggestion: Optional[str] = Field(
        default=None,
        description="Suggested correction, null when none was found"
    )


class SpellCheckRequest(BaseModel):
    """Schema for a free-text spell-check request."""

    text: str = Field(
        ...,
        max_length=MAX_TEXT_LENGTH,
        description="Text to check against the loaded word list"
    )


class SpellCheckResponse(BaseModel):
    """Schema for a free-text spell-check response."""

    issues: List[SpellingIssue]


class HealthResponse(BaseModel):
    """Schema for health check endpoint response."""

    status: str
    dictionary: str
    vocabulary_size: int
    timestamp: datetime

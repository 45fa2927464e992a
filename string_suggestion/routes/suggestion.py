"""
API routes for word suggestions and free-text spell-checking.

Handlers are plain functions: the correction search is CPU-bound, so
FastAPI runs them in its threadpool instead of on the event loop.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status

from string_suggestion.config import settings
from string_suggestion.schemas.suggestion import (
    SpellCheckRequest,
    SpellCheckResponse,
    SuggestionRequest,
    SuggestionResponse,
)
from string_suggestion.services.corrector import correct
from string_suggestion.services.suggestion import get_suggestion_service
from string_suggestion.services.vocabulary import VocabularyIndex
from string_suggestion.utils.logger import get_logger

logger = get_logger("routes.suggestion")

router = APIRouter()


def suggestion_outcome(word: str, suggestion: Optional[str]) -> str:
    """Classify a suggestion result for request logging."""
    if suggestion is None:
        return "no_correction"
    if suggestion == word:
        return "exact_match"
    return "corrected"


@router.post(
    "/suggestion",
    response_model=SuggestionResponse,
    summary="Suggest a correction for one word",
    responses={
        200: {"description": "Suggestion computed (suggestion may be null)"},
        422: {"description": "Malformed request or word too long"},
    }
)
def suggest_word(body: SuggestionRequest, request: Request) -> SuggestionResponse:
    """
    Return the most likely intended word from the supplied vocabulary.

    The vocabulary is built fresh for this request: `words` get the flat
    default weight, then `entries` are applied with their own weights.
    A null suggestion means no known word is within two edits.
    """
    vocabulary = VocabularyIndex(
        body.words,
        default_weight=settings.SUGGESTION_DEFAULT_WEIGHT,
    ).with_entries((entry.word, entry.weight) for entry in body.entries)

    suggestion = correct(body.word, vocabulary, settings.SUGGESTION_ALPHABET)

    request.state.suggestion_outcome = suggestion_outcome(body.word, suggestion)
    request.state.vocabulary_size = len(vocabulary)

    logger.debug(
        "Suggestion computed",
        word=body.word,
        suggestion=suggestion,
        vocabulary_size=len(vocabulary),
    )

    return SuggestionResponse(
        word=body.word,
        suggestion=suggestion,
        vocabulary_size=len(vocabulary),
    )


@router.post(
    "/spellcheck",
    response_model=SpellCheckResponse,
    summary="Spell-check text against the loaded word list",
    responses={
        200: {"description": "Text checked"},
        503: {"description": "No word list loaded"},
    }
)
def spellcheck_text(body: SpellCheckRequest, request: Request) -> SpellCheckResponse:
    """
    Report every unknown word in `text` with its suggested correction.
    """
    service = get_suggestion_service()
    if service is None or not service.is_loaded():
        logger.warning("Spell-check requested but no word list is loaded")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Spell-check word list is not loaded"
        )

    issues = service.check_text(body.text)

    request.state.issue_count = len(issues)
    request.state.vocabulary_size = service.vocabulary_size()

    return SpellCheckResponse(issues=issues)

"""
Suggestion service factory and singleton management.
"""
from typing import Optional

from string_suggestion.services.suggestion_wordlist import WordlistSuggestionService
from string_suggestion.utils.logger import get_logger

logger = get_logger("services.suggestion")

_wordlist_service: Optional[WordlistSuggestionService] = None


def get_suggestion_service() -> Optional[WordlistSuggestionService]:
    """
    Get the singleton word-list suggestion service.

    Returns:
        WordlistSuggestionService instance if initialized, None otherwise
    """
    return _wordlist_service


def initialize_suggestion_service(wordlist_path: Optional[str] = None) -> bool:
    """
    Initialize the word-list suggestion service singleton.

    Called during app startup to pre-load the word list.

    Args:
        wordlist_path: Word list to load instead of the configured one

    Returns:
        True if initialized successfully, False otherwise
    """
    global _wordlist_service

    logger.info("Initializing word-list suggestion service...")
    _wordlist_service = WordlistSuggestionService(wordlist_path=wordlist_path)

    if _wordlist_service.load():
        logger.info("Word-list suggestion service initialized successfully")
        return True
    else:
        logger.warning("Failed to initialize word-list suggestion service")
        _wordlist_service = None
        return False


def reset_suggestion_service() -> None:
    """Drop the singleton (used on shutdown)."""
    global _wordlist_service
    _wordlist_service = None

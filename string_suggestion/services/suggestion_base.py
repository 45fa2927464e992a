"""
Abstract base class for suggestion services.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from string_suggestion.schemas.suggestion import SpellingIssue


class SuggestionService(ABC):
    """
    Abstract base class for suggestion service implementations.

    Concrete implementations should handle loading a vocabulary and
    suggesting corrections against it.
    """

    @abstractmethod
    def suggest(self, word: str) -> Optional[str]:
        """
        Suggest the most likely intended word.

        Args:
            word: Word to correct

        Returns:
            The word itself if known, its best correction, or None
        """
        pass

    @abstractmethod
    def check_text(self, text: str) -> List[SpellingIssue]:
        """
        Check text for unknown words and return suggestions.

        Args:
            text: Text to check

        Returns:
            List of SpellingIssue objects, deduplicated by word
        """
        pass

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if the vocabulary is loaded and ready."""
        pass

    @abstractmethod
    def vocabulary_size(self) -> int:
        """Number of words in the loaded vocabulary."""
        pass

    @abstractmethod
    def load(self) -> bool:
        """
        Load the vocabulary.

        Returns:
            True if loaded successfully, False otherwise
        """
        pass

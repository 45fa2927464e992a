"""
Word-list backed suggestion service.
"""
import re
import time
from pathlib import Path
from typing import List, Optional

from string_suggestion.config import settings
from string_suggestion.schemas.suggestion import MAX_WORD_LENGTH, SpellingIssue
from string_suggestion.services.corrector import correct
from string_suggestion.services.suggestion_base import SuggestionService
from string_suggestion.services.vocabulary import VocabularyCache
from string_suggestion.utils.logger import get_logger


logger = get_logger("services.suggestion_wordlist")

# Letters only: digits, underscores and punctuation split words
WORD_PATTERN = re.compile(r"[^\W\d_]+")


class WordlistSuggestionService(SuggestionService):
    """
    Suggestion service over a plain word list.

    Every word in the list gets the same flat weight, so ties between
    equally distant candidates resolve alphabetically.
    """

    def __init__(
        self,
        wordlist_path: Optional[str] = None,
        alphabet: Optional[str] = None,
        default_weight: Optional[int] = None,
        min_word_length: Optional[int] = None,
    ):
        """
        Initialize word-list suggestion service.

        Args:
            wordlist_path: Path to word list file (one word per line)
            alphabet: Letters used for substitutions and insertions (default from config)
            default_weight: Weight given to every word (default from config)
            min_word_length: check_text skips words shorter than this (default from config)
        """
        self._loaded = False

        self._wordlist_path = Path(wordlist_path) if wordlist_path else Path(settings.SUGGESTION_WORDLIST_PATH)
        self._alphabet = alphabet or settings.SUGGESTION_ALPHABET
        self._default_weight = (
            default_weight if default_weight is not None else settings.SUGGESTION_DEFAULT_WEIGHT
        )
        self._min_word_length = (
            min_word_length if min_word_length is not None else settings.SUGGESTION_MIN_WORD_LENGTH
        )

        self._vocabulary = VocabularyCache(default_weight=self._default_weight)

        logger.info(
            "Word-list suggestion service initialized",
            wordlist_path=str(self._wordlist_path),
            alphabet=self._alphabet,
            default_weight=self._default_weight,
            min_word_length=self._min_word_length,
        )

    def load(self) -> bool:
        """
        Load vocabulary from the word list.

        Returns:
            True if loaded successfully, False otherwise
        """
        if self._loaded:
            return True

        if not self._wordlist_path.exists():
            logger.error(
                "Word list not found",
                wordlist_path=str(self._wordlist_path),
            )
            return False

        try:
            start_time = time.time()

            with open(self._wordlist_path, "r", encoding="utf-8") as f:
                words = [line.strip() for line in f]
            words = [word for word in words if word]

            if not words:
                logger.error(
                    "No words loaded from word list",
                    wordlist_path=str(self._wordlist_path),
                )
                return False

            index = self._vocabulary.rebuild(words)
            self._loaded = True

            logger.info(
                "Vocabulary built from word list",
                word_count=len(index),
                build_time_seconds=round(time.time() - start_time, 2),
                wordlist_path=str(self._wordlist_path),
            )
            return True

        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Failed to read word list",
                error=str(e),
                wordlist_path=str(self._wordlist_path),
                exc_info=True,
            )
            return False

    def suggest(self, word: str) -> Optional[str]:
        """
        Suggest the most likely intended word from the word list.

        Args:
            word: Word to correct

        Returns:
            The word itself if known, its best correction, or None
        """
        if not self._loaded:
            logger.warning("Suggestion requested but word list not loaded")
            return None

        return correct(word, self._vocabulary.snapshot(), self._alphabet)

    def check_text(self, text: str) -> List[SpellingIssue]:
        """
        Check text for words missing from the word list.

        Args:
            text: Text to check

        Returns:
            Deduplicated list of unknown words with their suggestions
        """
        if not self._loaded:
            logger.warning("Spell-check called but word list not loaded")
            return []

        vocabulary = self._vocabulary.snapshot()
        issues: dict[str, Optional[str]] = {}

        for word in self._tokenize(text):
            if len(word) < self._min_word_length:
                continue

            word_lower = word.lower()
            if word_lower in issues or word_lower in vocabulary:
                continue

            # Too long to search within two edits; reported without a suggestion
            if len(word_lower) > MAX_WORD_LENGTH:
                issues[word_lower] = None
                continue

            issues[word_lower] = correct(word_lower, vocabulary, self._alphabet)

        logger.debug("Text checked", issue_count=len(issues))

        return [
            SpellingIssue(word=word, suggestion=suggestion)
            for word, suggestion in issues.items()
        ]

    def _tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into words, preserving original case.

        Args:
            text: Text to tokenize

        Returns:
            List of words
        """
        return WORD_PATTERN.findall(text)

    def is_loaded(self) -> bool:
        """Check if word list is loaded."""
        return self._loaded

    def vocabulary_size(self) -> int:
        """Number of distinct words loaded."""
        return len(self._vocabulary)

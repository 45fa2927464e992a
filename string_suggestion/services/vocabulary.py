"""
Vocabulary index and a lock-guarded cache of index snapshots.
"""
import itertools
import threading
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from string_suggestion.utils.logger import get_logger

logger = get_logger("services.vocabulary")

DEFAULT_WEIGHT = 1

VocabularyEntry = Union[str, Tuple[str, int]]


class VocabularyError(ValueError):
    """Raised when a vocabulary entry cannot be indexed."""


class VocabularyIndex(Mapping[str, int]):
    """
    Immutable mapping of known word -> non-negative weight.

    Entries are either plain words (given `default_weight`) or
    `(word, weight)` pairs. A repeated word keeps the weight of its last
    occurrence.
    """

    __slots__ = ("_weights",)

    def __init__(
        self,
        entries: Iterable[VocabularyEntry] = (),
        default_weight: int = DEFAULT_WEIGHT,
    ):
        weights = {}
        for entry in entries:
            word, weight = _split_entry(entry, default_weight)
            weights[word] = weight
        self._weights = MappingProxyType(weights)

    @classmethod
    def from_words(cls, words: Iterable[str], default_weight: int = DEFAULT_WEIGHT) -> "VocabularyIndex":
        """Build an index giving every word the same flat weight."""
        return cls(words, default_weight=default_weight)

    def __getitem__(self, word: str) -> int:
        return self._weights[word]

    def __contains__(self, word: object) -> bool:
        return word in self._weights

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"VocabularyIndex(size={len(self)})"

    def with_entries(
        self,
        entries: Iterable[VocabularyEntry],
        default_weight: int = DEFAULT_WEIGHT,
    ) -> "VocabularyIndex":
        """Return a new index with `entries` applied on top of this one."""
        return VocabularyIndex(
            itertools.chain(self._weights.items(), entries),
            default_weight=default_weight,
        )


def _split_entry(entry: VocabularyEntry, default_weight: int) -> Tuple[str, int]:
    if isinstance(entry, str):
        word, weight = entry, default_weight
    else:
        word, weight = entry
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise VocabularyError(f"Weight for '{word}' must be an integer, got {weight!r}")
    if weight < 0:
        raise VocabularyError(f"Weight for '{word}' must be non-negative, got {weight}")
    return word, weight


class VocabularyCache:
    """
    Caller-owned holder of the current vocabulary snapshot.

    Readers take `snapshot()` without locking; `rebuild()` and `insert()`
    build a new immutable index and swap it in under a lock.
    """

    def __init__(self, default_weight: int = DEFAULT_WEIGHT):
        self._default_weight = default_weight
        self._lock = threading.Lock()
        self._index = VocabularyIndex()

    def snapshot(self) -> VocabularyIndex:
        """Return the current index."""
        return self._index

    def rebuild(self, entries: Iterable[VocabularyEntry]) -> VocabularyIndex:
        """
        Replace the cached index with one built from `entries`.

        Args:
            entries: Plain words and/or (word, weight) pairs

        Returns:
            The new index
        """
        index = VocabularyIndex(entries, default_weight=self._default_weight)
        with self._lock:
            self._index = index
        logger.info("Vocabulary rebuilt", vocabulary_size=len(index))
        return index

    def insert(self, word: str, weight: Optional[int] = None) -> VocabularyIndex:
        """
        Add or overwrite a single word.

        Args:
            word: Word to add
            weight: Weight for the word (default weight when omitted)

        Returns:
            The new index
        """
        entry = word if weight is None else (word, weight)
        with self._lock:
            self._index = self._index.with_entries([entry], default_weight=self._default_weight)
            index = self._index
        logger.debug("Vocabulary entry inserted", word=word, vocabulary_size=len(index))
        return index

    def __len__(self) -> int:
        return len(self._index)

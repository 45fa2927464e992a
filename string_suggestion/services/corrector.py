"""
Norvig-style word correction over a weighted vocabulary.

Based on the approach described at https://norvig.com/spell-correct.html:
try the word itself, then every string one edit away, then every string
two edits away, and keep whichever known word carries the highest weight.
"""
from typing import Dict, Iterable, Mapping, Optional

from string_suggestion.services.edits import DEFAULT_ALPHABET, edits1
from string_suggestion.services.vocabulary import VocabularyEntry, VocabularyIndex, DEFAULT_WEIGHT


def known(
    candidates: Iterable[str],
    vocabulary: Mapping[str, int],
    into: Optional[Dict[str, int]] = None,
) -> Dict[str, int]:
    """
    Keep the candidates that are vocabulary words, paired with their weights.

    Args:
        candidates: Candidate strings, duplicates allowed
        vocabulary: Known word -> weight mapping (never modified)
        into: Existing accumulator to write matches into

    Returns:
        `into` (or a new dict) holding every matching candidate once
    """
    matches = {} if into is None else into
    for candidate in candidates:
        weight = vocabulary.get(candidate)
        if weight is not None:
            matches[candidate] = weight
    return matches


def best_match(matches: Mapping[str, int]) -> Optional[str]:
    """
    Pick the highest-weight word; ties go to the lexicographically smallest word.

    Returns:
        The winning word, or None for an empty mapping
    """
    if not matches:
        return None
    return min(matches.items(), key=lambda item: (-item[1], item[0]))[0]


def correct(
    word: str,
    vocabulary: Mapping[str, int],
    alphabet: str = DEFAULT_ALPHABET,
) -> Optional[str]:
    """
    Return the most likely intended vocabulary word for `word`.

    Tiers are tried in order and the first one with a match wins:
    exact match, one edit, two edits. Second-tier candidates are
    accumulated into the same map as first-tier matches.

    Args:
        word: Possibly misspelled word
        vocabulary: Known word -> weight mapping
        alphabet: Letters used for substitutions and insertions

    Returns:
        The corrected word, or None if nothing within two edits is known
    """
    if word in vocabulary:
        return word

    distance_one = edits1(word, alphabet)
    candidates = known(distance_one, vocabulary)
    if candidates:
        return best_match(candidates)

    for candidate in distance_one:
        known(edits1(candidate, alphabet), vocabulary, into=candidates)

    return best_match(candidates)


def suggest(
    word: str,
    entries: Iterable[VocabularyEntry],
    alphabet: str = DEFAULT_ALPHABET,
    default_weight: int = DEFAULT_WEIGHT,
) -> Optional[str]:
    """
    Build a vocabulary from `entries` and correct `word` against it.

    Args:
        word: Possibly misspelled word
        entries: Plain words and/or (word, weight) pairs, last duplicate wins
        alphabet: Letters used for substitutions and insertions
        default_weight: Weight given to plain words

    Returns:
        The corrected word, or None if no correction was found

    Examples:
        >>> suggest("teh", ["the", "then"])
        'the'
        >>> suggest("quxxx", ["zebra"]) is None
        True
    """
    vocabulary = VocabularyIndex(entries, default_weight=default_weight)
    return correct(word, vocabulary, alphabet)

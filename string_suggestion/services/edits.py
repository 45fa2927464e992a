"""
Single-edit candidate generation.
"""
import string
from typing import List

DEFAULT_ALPHABET = string.ascii_lowercase


def edits1(word: str, alphabet: str = DEFAULT_ALPHABET) -> List[str]:
    """
    Generate every string exactly one edit away from `word`.

    Candidates are produced in a fixed order: deletions, transpositions of
    adjacent characters, then for each letter of `alphabet` its
    substitutions followed by its insertions. The list is not deduplicated.

    Args:
        word: String to edit (any characters, may be empty)
        alphabet: Letters used for substitutions and insertions

    Returns:
        List of candidate strings

    Examples:
        >>> len(edits1("cat"))
        187
        >>> edits1("")[:3]
        ['a', 'b', 'c']
    """
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]

    results = [left + right[1:] for left, right in splits if right]
    results.extend(
        left + right[1] + right[0] + right[2:]
        for left, right in splits
        if len(right) > 1
    )

    for letter in alphabet:
        results.extend(left + letter + right[1:] for left, right in splits if right)
        results.extend(left + letter + right for left, right in splits)

    return results

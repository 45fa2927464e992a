"""
Unit tests for single-edit candidate generation.
"""
import pytest

from string_suggestion.services.edits import DEFAULT_ALPHABET, edits1


def expected_count(length: int, alphabet_size: int = 26) -> int:
    return max(length - 1, 0) + length + alphabet_size * (2 * length + 1)


class TestEditCounts:
    """Tests for the number of generated candidates."""

    def test_three_letter_word(self):
        """Test 'cat' yields 2*3-1 + 26*(2*3+1) = 187 candidates."""
        assert len(edits1("cat")) == 187

    @pytest.mark.parametrize("word", ["a", "ab", "hello", "teh"])
    def test_count_formula(self, word):
        """Test candidate count matches the per-operation formula."""
        assert len(edits1(word)) == expected_count(len(word))

    def test_empty_word_yields_only_insertions(self):
        """Test empty input produces the 26 single letters."""
        assert edits1("") == list(DEFAULT_ALPHABET)

    def test_single_character_has_no_transpositions(self):
        """Test a one-letter word yields 1 deletion + 26 substitutions + 52 insertions."""
        assert len(edits1("x")) == 1 + 26 + 52

    def test_custom_alphabet(self):
        """Test substitutions and insertions use the given alphabet only."""
        results = edits1("ab", alphabet="xy")
        assert len(results) == expected_count(2, alphabet_size=2)
        assert "xb" in results
        assert "aby" in results
        assert "zb" not in results


class TestEditOrder:
    """Tests for candidate discovery order."""

    def test_deletions_then_transpositions_first(self):
        """Test deletions come first, then adjacent swaps."""
        results = edits1("abc")
        assert results[:3] == ["bc", "ac", "ab"]
        assert results[3:5] == ["bac", "acb"]

    def test_substitutions_before_insertions_per_letter(self):
        """Test each letter contributes substitutions then insertions."""
        results = edits1("ab")
        # 2 deletions + 1 transposition, then letter 'a'
        assert results[3:5] == ["ab", "aa"]
        assert results[5:8] == ["aab", "aab", "aba"]
        # letter 'b' follows
        assert results[8:10] == ["bb", "ab"]


class TestEditContent:
    """Tests for the kinds of candidates produced."""

    def test_contains_each_operation(self):
        """Test deletion, transposition, substitution and insertion are all present."""
        results = edits1("teh")
        assert "th" in results        # deletion
        assert "the" in results       # transposition
        assert "tea" in results       # substitution
        assert "tech" in results      # insertion

    def test_non_alphabet_characters_only_deleted_or_moved(self):
        """Test characters outside the alphabet are kept, dropped or swapped but never produced."""
        results = edits1("a1")
        assert "a" in results
        assert "1a" in results
        assert not any("2" in candidate for candidate in results)

    def test_duplicates_are_not_removed(self):
        """Test repeated candidates stay in the list."""
        results = edits1("aa")
        assert results.count("a") == 2

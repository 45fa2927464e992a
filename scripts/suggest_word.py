#!/usr/bin/env python3
"""
Suggest a correction for a single word from the command line.

The vocabulary is taken from --words and/or a word list file (one word
per line); every word gets the same flat weight.

Usage:
    python scripts/suggest_word.py teh --words the then them
    python scripts/suggest_word.py instal --wordlist /path/to/package-names.txt

Output:
    The suggested word, or an empty line when no correction was found.
"""

import argparse
import sys
from pathlib import Path
from typing import List

from string_suggestion.config import settings
from string_suggestion.services.corrector import suggest


def read_wordlist(path: Path) -> List[str]:
    """Read non-empty lines from a word list file."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def main(argv=None) -> int:
    """Print the suggestion for WORD."""
    parser = argparse.ArgumentParser(
        description="Suggest the most likely intended word from a vocabulary"
    )
    parser.add_argument("word", help="Word to correct")
    parser.add_argument(
        "--words", "-w",
        nargs="*",
        default=[],
        help="Known words"
    )
    parser.add_argument(
        "--wordlist", "-f",
        type=Path,
        help="File with one known word per line"
    )
    parser.add_argument(
        "--alphabet", "-a",
        default=settings.SUGGESTION_ALPHABET,
        help="Letters used for substitutions and insertions (default: a-z)"
    )
    args = parser.parse_args(argv)

    words = list(args.words)
    if args.wordlist:
        if not args.wordlist.exists():
            parser.error(f"word list not found: {args.wordlist}")
        words.extend(read_wordlist(args.wordlist))

    suggestion = suggest(
        args.word,
        words,
        alphabet=args.alphabet,
        default_weight=settings.SUGGESTION_DEFAULT_WEIGHT,
    )
    print(suggestion or "")
    return 0


if __name__ == "__main__":
    sys.exit(main())

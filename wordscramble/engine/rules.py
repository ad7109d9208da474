"""
Validation rules for a submitted word.

A candidate is accepted into a game iff, in this order:
  1) it has not been used already in the current game   (is_original)
  2) it can be spelled from the root word's letters      (is_possible)
  3) the dictionary oracle recognizes it as a real word  (is_real)

The session runs them in that order and stops at the first failure, so the
reported reason is always the earliest rule that rejects the word.

All rules expect an already-normalized word (see `normalize`).
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def normalize(text: str) -> str:
    """
    Canonical form of raw player input: lowercase, surrounding whitespace
    (spaces, tabs, newlines) removed.

    Idempotent: normalize(normalize(s)) == normalize(s).
    """
    return text.lower().strip()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    """True if `word` has not been accepted before (exact match)."""
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if every letter of `word` can be taken from `root_word`, each letter
    of the root used at most once.

    Works like drawing tiles: the root's letters go into a multiset and each
    letter of the candidate consumes one matching tile. A letter with no tile
    left means the word can't be spelled.

    Examples:
      is_possible("bred", "bread") -> True
      is_possible("aab",  "aab")   -> True
      is_possible("aaab", "aab")   -> False   (only two 'a' tiles)
    """
    remaining = Counter(root_word)
    for letter in word:
        if remaining[letter] <= 0:
            return False
        remaining[letter] -= 1  # consume one tile
    return True


def is_real(word: str, oracle, language: str) -> bool:
    """
    Ask the dictionary oracle whether `word` is a recognized word.
    An empty token is never a word, whatever the oracle says.
    """
    if not word:
        return False
    return bool(oracle.is_recognized_word(word, language))

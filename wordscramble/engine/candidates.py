"""
Candidate enumeration for a root word.

Given a vocabulary (e.g. a dictionary word list), keep only the words that
pass the spelling rule against the root. The survey harness feeds these into a
session to see how many words a root word really yields.
"""

from typing import Iterable, List, Set

from .rules import normalize, is_possible


def spellable_words(words: Iterable[str], root_word: str, min_length: int = 1) -> List[str]:
    """
    Words from `words` that can be spelled with the letters of `root_word`.

    Args:
      words      : vocabulary to scan
      root_word  : letter budget
      min_length : shortest word worth keeping

    Returns:
      List[str] of normalized, de-duplicated words (order preserved as in `words`).
    """
    root = normalize(root_word)
    seen: Set[str] = set()
    out: List[str] = []

    for w in words:
        w = normalize(w)

        # Cheap rejects before counting letters
        if len(w) < min_length or len(w) > len(root) or w in seen:
            continue

        if is_possible(w, root):
            seen.add(w)
            out.append(w)

    return out

"""
Word-set oracle.

A word is real iff it appears in a fixed in-memory set. Good for tests, for
offline play with a curated list, and for reproducible surveys where the
dictionary must not drift between library releases.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from wordscramble.datasets.io import read_lines
from .base import BaseOracle, register


@register
class WordSetOracle(BaseOracle):
    id = "wordset"
    name = "Word Set"

    def __init__(self, words: Iterable[str] = (), language: str = "en"):
        super().__init__(language=language)
        # Case-normalize once; lookups are exact after that
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordSetOracle":
        """
        Build an oracle from a newline-separated word list.
        Raises FileNotFoundError if the path doesn't exist.
        """
        return cls(read_lines(path), language=language)

    def _lookup(self, token: str) -> bool:
        return token.strip().lower() in self.words

    def __len__(self) -> int:
        return len(self.words)

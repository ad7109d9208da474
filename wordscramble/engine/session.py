"""
Game session: one root word plus the words accepted so far.

- start_game: pick a root word (uniformly at random) and open a fresh session.
- Session.submit: the only state transition; normalizes the raw input, runs
  the rules in order and records the word on success.

UI-agnostic: a terminal loop, a notebook or the survey harness all drive a
session the same way.
"""

from __future__ import annotations

import random
from typing import List, Sequence

from .outcome import Outcome, Reason
from .rules import normalize, is_original, is_possible, is_real

# Root word used when the word list has nothing to offer; the game must
# always be playable.
DEFAULT_ROOT_WORD = "rugrat"

# Single validation/dictionary language.
DEFAULT_LANGUAGE = "en"


class Session:
    """
    State of one game.

    Attributes:
      root_word  : fixed for the lifetime of the session
      used_words : accepted words, most recent first
      oracle     : dictionary capability (anything with is_recognized_word)
      language   : language tag passed to the oracle
    """

    def __init__(self, root_word: str, oracle, *, language: str = DEFAULT_LANGUAGE):
        self._root_word = normalize(root_word)
        self.oracle = oracle
        self.language = language
        self._used: List[str] = []

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> List[str]:
        # copy; only submit() may grow the history
        return list(self._used)

    def submit(self, candidate: str) -> Outcome:
        """
        Evaluate one raw input and update the session.

        Checks run in a fixed order and the first failure wins:
          empty -> already used -> not spellable -> not a real word

        The used list is only touched on acceptance.
        """
        word = normalize(candidate)
        if not word:
            return Outcome.empty()

        if not is_original(word, self._used):
            return Outcome.rejected(word, Reason.ALREADY_USED)

        if not is_possible(word, self._root_word):
            return Outcome.rejected(word, Reason.NOT_SPELLABLE_FROM_ROOT)

        if not is_real(word, self.oracle, self.language):
            return Outcome.rejected(word, Reason.NOT_A_REAL_WORD)

        self._used.insert(0, word)
        return Outcome.accepted(word)

    def __repr__(self) -> str:
        return f"Session(root_word={self._root_word!r}, used={len(self._used)})"


def start_game(
        word_list: Sequence[str],
        oracle,
        *,
        language: str = DEFAULT_LANGUAGE,
        seed: int | None = None,
) -> Session:
    """
    Open a new session with a root word drawn uniformly from `word_list`.

    Entries are normalized first and blank ones are skipped. If nothing is
    left, DEFAULT_ROOT_WORD is used instead of failing. No I/O happens here;
    loading the list is wordscramble.datasets' job.

    Args:
      word_list : candidate root words
      oracle    : dictionary capability for the session
      language  : language tag for dictionary lookups
      seed      : RNG seed to make the draw reproducible
    """
    pool = [w for w in (normalize(x) for x in word_list) if w]
    if pool:
        rng = random.Random(seed)
        root = pool[rng.randrange(len(pool))]
    else:
        root = DEFAULT_ROOT_WORD
    return Session(root, oracle, language=language)

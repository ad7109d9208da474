"""
Frequency-backed oracle (wordfreq).

Strategy:
  - A token counts as a real word when wordfreq knows it in the oracle's
    language with a Zipf frequency >= `min_zipf`.
  - Zipf is log10 of frequency per billion words: ~7 for "the", ~3 for
    everyday words, 0 for anything wordfreq has never seen.

Notes:
  - The default threshold only asks that the word is known at all. Raise it
    (e.g. 2.5) to keep obscure tokens and abbreviations out of play.
  - Lookups are memoized per oracle; a game asks about the same word often
    (retries after rejection, surveys over many roots).
"""

from __future__ import annotations

from functools import lru_cache

from wordfreq import zipf_frequency

from .base import BaseOracle, register

# Unknown words score 0.0; any positive value means wordfreq has seen it.
DEFAULT_MIN_ZIPF = 0.0


@register
class FrequencyOracle(BaseOracle):
    id = "wordfreq"
    name = "wordfreq"

    def __init__(self, language: str = "en", min_zipf: float = DEFAULT_MIN_ZIPF,
                 wordlist: str = "best"):
        super().__init__(language=language)
        self.min_zipf = float(min_zipf)
        self.wordlist = wordlist
        self._zipf = lru_cache(maxsize=65536)(self._zipf_uncached)

    def _zipf_uncached(self, token: str) -> float:
        return zipf_frequency(token, self.language, wordlist=self.wordlist)

    def zipf(self, token: str) -> float:
        """Zipf frequency of `token` in the oracle's language (0.0 if unknown)."""
        return self._zipf(token.strip().lower())

    def _lookup(self, token: str) -> bool:
        # wordfreq tokenizes multi-word input; only single alphabetic tokens
        # can be words here
        if not token.isalpha():
            return False
        z = self.zipf(token)
        return z > 0.0 and z >= self.min_zipf

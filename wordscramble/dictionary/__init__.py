from __future__ import annotations
from typing import List
from .base import BaseOracle, REGISTRY, register

from .word_set import WordSetOracle
from .frequency import FrequencyOracle, DEFAULT_MIN_ZIPF


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def build_oracle(oracle_id: str, *, dictionary: str | None = None, language: str = "en",
                 min_zipf: float = DEFAULT_MIN_ZIPF) -> BaseOracle:
    """
    Oracle from CLI-style options: `wordset` loads its words from `dictionary`,
    `wordfreq` takes its threshold from `min_zipf`.
    """
    if oracle_id == WordSetOracle.id:
        if not dictionary:
            raise ValueError("a dictionary word list is required for the wordset oracle")
        return WordSetOracle.from_file(dictionary, language=language)
    if oracle_id == FrequencyOracle.id:
        return FrequencyOracle(language=language, min_zipf=min_zipf)
    return create_oracle(oracle_id, language=language)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseOracle", "REGISTRY", "register", "WordSetOracle", "FrequencyOracle",
    "create_oracle", "build_oracle", "get_oracle_ids",
]

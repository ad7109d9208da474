"""
Survey harness core primitives.

- run_case:  play one root word automatically: submit every vocabulary word
             spellable from the root and tally the outcomes.
- select_roots: the roots a run covers (all, or a sample prefix).
- run_batch: survey many root words in sequence (optionally a sample prefix).
- summarize: numpy statistics over a batch (how rich the root list is).

A root word whose survey accepts only a handful of words makes for a dull
game; the survey is how a start list gets vetted before it ships.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

import numpy as np

from wordscramble.engine import Reason, Session, spellable_words, DEFAULT_LANGUAGE

# Two-letter "words" are mostly noise for this game.
DEFAULT_MIN_LENGTH = 3


def run_case(
        root_word: str,
        *,
        vocabulary: Iterable[str],
        oracle,
        min_length: int = DEFAULT_MIN_LENGTH,
        language: str = DEFAULT_LANGUAGE,
) -> Dict:
    """
    Play one game on `root_word` by submitting every spellable vocabulary word.

    Args:
        root_word:   the root word to survey
        vocabulary:  words to try (e.g. a dictionary list or wordfreq's top-N)
        oracle:      dictionary capability for the session
        min_length:  skip candidates shorter than this
        language:    language tag for dictionary lookups

    Returns:
        dict with keys:
            root (str), tried (int), accepted (int), rejected (dict reason -> int),
            longest (str), words (list[str], acceptance order), time_ms (float)
    """
    if min_length < 1:
        raise ValueError(f"min_length must be >= 1; got {min_length}")

    session = Session(root_word, oracle, language=language)
    candidates = spellable_words(vocabulary, session.root_word, min_length=min_length)
    rejected = {r.value: 0 for r in Reason}

    t0 = time.perf_counter_ns()
    for w in candidates:
        out = session.submit(w)
        if out.is_rejected:
            rejected[out.reason.value] += 1
    total_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

    # used_words is most-recent-first; report in submission order
    words = list(reversed(session.used_words))
    longest = max(words, key=len) if words else ""

    return {
        "root": session.root_word,
        "tried": len(candidates),
        "accepted": len(words),
        "rejected": rejected,
        "longest": longest,
        "words": words,
        "time_ms": total_ms,
    }


def select_roots(roots: Iterable[str], sample: int | None = None) -> List[str]:
    """
    Roots to survey: all of them, or only the first `sample` (0 means none).
    """
    pool = list(roots)
    if sample is None:
        return pool
    if sample < 0:
        raise ValueError(f"sample must be >= 0; got {sample}")
    return pool[:sample]


def run_batch(
        roots: List[str],
        *,
        vocabulary: Iterable[str],
        oracle,
        min_length: int = DEFAULT_MIN_LENGTH,
        language: str = DEFAULT_LANGUAGE,
        sample: int | None = None,
) -> List[Dict]:
    """
    Survey many root words back-to-back. If 'sample' is provided, only the
    first K roots are used to speed up quick checks.
    """
    vocab = list(vocabulary)  # may be a generator; every case rescans it
    pool = select_roots(roots, sample)
    return [
        run_case(r, vocabulary=vocab, oracle=oracle, min_length=min_length, language=language)
        for r in pool
    ]


def summarize(results: List[Dict]) -> Dict:
    """
    Distribution of accepted-word counts across surveyed roots.

    Returns zeros for an empty batch so manifests always have the same keys.
    """
    if not results:
        return {"roots": 0, "mean": 0.0, "median": 0.0, "p10": 0.0, "p90": 0.0,
                "min": 0, "max": 0, "poorest": ""}

    counts = np.array([r["accepted"] for r in results], dtype=float)
    p10, p50, p90 = np.percentile(counts, [10, 50, 90])
    poorest = results[int(np.argmin(counts))]["root"]

    return {
        "roots": len(results),
        "mean": round(float(counts.mean()), 2),
        "median": float(p50),
        "p10": float(p10),
        "p90": float(p90),
        "min": int(counts.min()),
        "max": int(counts.max()),
        "poorest": poorest,
    }

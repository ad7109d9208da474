# apps/cli/survey.py
"""
CLI entry point for surveying a root word list.

This script:
  1) Validates the root word list (prints counts + SHA, flags bad lines).
  2) Loads the roots and a vocabulary to try against them.
  3) Plays every root automatically with a live progress indicator and writes:
       - CSV:  per-root results (accepted/rejected counts, words)
       - JSON: manifest with config, word list hash, statistics, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm
from wordfreq import top_n_list

from wordscramble.datasets import (
    validate_wordlist, pretty_summary, load_root_words, SourceUnavailable, DEFAULT_START_PATH,
)
from wordscramble.datasets.io import read_words
from wordscramble.dictionary import build_oracle, get_oracle_ids
from wordscramble.engine import DEFAULT_LANGUAGE
from wordscramble.harness import run_case, select_roots, summarize, write_csv, write_manifest
from wordscramble.harness.core import DEFAULT_MIN_LENGTH
from wordscramble.harness.io import timestamp_id, git_commit_or_unknown


def _load_vocabulary(args) -> list[str]:
    """
    Words to try against each root: a file if given, else wordfreq's top-N.
    """
    if args.vocabulary:
        return read_words(args.vocabulary)
    return [w for w in top_n_list(args.language, args.top_n, wordlist="best") if w.isalpha()]


def main():
    """
    Parse CLI args, validate the root list, run the survey with progress, and write outputs.
    """
    oracle_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="wordscramble: survey root words")
    ap.add_argument("--start-words", default=str(DEFAULT_START_PATH),
                    help="path to root word list (one word per line)")
    ap.add_argument("--root-min-length", type=int, default=6,
                    help="shortest acceptable root word when validating the list")
    ap.add_argument("--oracle", default="wordfreq", choices=get_oracle_ids(),
                    help=f"dictionary oracle id (one of: {oracle_choices})")
    ap.add_argument("--dictionary", help="word list for --oracle wordset")
    ap.add_argument("--min-zipf", type=float, default=0.0, help="wordfreq threshold")
    ap.add_argument("--vocabulary",
                    help="words to try (default: wordfreq top-N for --language)")
    ap.add_argument("--top-n", type=int, default=50000,
                    help="vocabulary size when drawing from wordfreq")
    ap.add_argument("--min-length", type=int, default=DEFAULT_MIN_LENGTH,
                    help="shortest candidate word to submit")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--sample", type=int, help="survey only the first K roots")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate the root list and print a one-liner summary
    rep = validate_wordlist(args.start_words, min_length=args.root_min_length)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load roots, oracle, vocabulary
    try:
        roots = load_root_words(args.start_words)
    except SourceUnavailable as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        oracle = build_oracle(args.oracle, dictionary=args.dictionary,
                              language=args.language, min_zipf=args.min_zipf)
    except (ValueError, OSError) as e:
        ap.error(str(e))

    vocabulary = _load_vocabulary(args)

    try:
        cases = select_roots(roots, args.sample)
    except ValueError as e:
        ap.error(str(e))
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Surveying", unit="root") if mode == "bar" else cases

    # 4) Run the survey with live progress
    for idx, root in enumerate(iterator, 1):
        r = run_case(root, vocabulary=vocabulary, oracle=oracle,
                     min_length=args.min_length, language=args.language)
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    stats = summarize(results)
    print(
        f"roots={stats['roots']} | accepted mean={stats['mean']} median={stats['median']} "
        f"p10={stats['p10']} p90={stats['p90']} | poorest={stats['poorest']!r} ({stats['min']})"
    )

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "vocabulary_size": len(vocabulary),
        "oracle_id": oracle.id,
        "summary": stats,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

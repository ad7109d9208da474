# apps/cli/play.py
"""
Terminal front end for wordscramble.

This script:
  1) Loads the root word list (a missing list is reported, not a crash).
  2) Builds the requested dictionary oracle.
  3) Runs the input loop: every line is submitted to the session and the
     outcome is printed. `:new` starts a fresh game, `:quit` (or EOF) exits.
"""

from __future__ import annotations

import argparse
import sys

from wordscramble.datasets import load_root_words, SourceUnavailable, DEFAULT_START_PATH
from wordscramble.dictionary import build_oracle, get_oracle_ids
from wordscramble.engine import start_game, Status, DEFAULT_LANGUAGE


def _show_board(session) -> None:
    print(f"\n== {session.root_word.upper()} ==")
    for w in session.used_words:
        print(f"  ({len(w)}) {w}")


def main():
    """
    Parse CLI args, load words, then play until the player quits.
    """
    oracle_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="wordscramble: make words from a root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_PATH),
                    help="path to root word list (one word per line)")
    ap.add_argument("--oracle", default="wordfreq", choices=get_oracle_ids(),
                    help=f"dictionary oracle id (one of: {oracle_choices})")
    ap.add_argument("--dictionary", help="word list for --oracle wordset")
    ap.add_argument("--min-zipf", type=float, default=0.0,
                    help="wordfreq threshold; raise to reject obscure words")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--seed", type=int, help="RNG seed for the root word draw")
    args = ap.parse_args()

    # 1) Root words; an unreadable list means a broken install
    try:
        roots = load_root_words(args.start_words)
    except SourceUnavailable as e:
        print(f"error: {e}", file=sys.stderr)
        print("The root word list ships with the package; reinstall or pass --start-words.",
              file=sys.stderr)
        sys.exit(2)

    # 2) Dictionary
    try:
        oracle = build_oracle(args.oracle, dictionary=args.dictionary,
                              language=args.language, min_zipf=args.min_zipf)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    # 3) Play
    seed = args.seed
    session = start_game(roots, oracle, language=args.language, seed=seed)
    _show_board(session)

    while True:
        try:
            line = input("word> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            # Advance the seed so a seeded run doesn't redraw the same root
            seed = None if seed is None else seed + 1
            session = start_game(roots, oracle, language=args.language, seed=seed)
            _show_board(session)
            continue

        out = session.submit(line)
        if out.status is Status.EMPTY:
            continue
        if out.status is Status.REJECTED:
            print(f"{out.reason.title}: {out.reason.message}")
            continue
        _show_board(session)

    print(f"{len(session.used_words)} word(s) from {session.root_word!r}.")


if __name__ == "__main__":
    main()

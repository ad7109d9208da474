"""
Download a plain-text word list and write a clean copy.

What it does:
- Downloads a newline-separated word list over HTTP.
- Keeps lowercase a–z tokens within the requested length bounds.
- De-duplicates while preserving the source order, and writes to file.

The result can back the `wordset` oracle (--dictionary) or serve as a survey
vocabulary (--vocabulary); with --min-length 8 --max-length 8 it makes a
root word list.

Usage:
    python -m script.fetch_wordlist --out data/dictionary_en.txt
    python -m script.fetch_wordlist --min-length 8 --max-length 8 --sort \
        --out wordscramble/datasets/data/start.txt
"""

import argparse
from pathlib import Path

import requests

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines, min_length: int = 1, max_length: int | None = None) -> list[str]:
    out = []
    for raw in lines:
        w = raw.strip().lower()
        if not (w.isascii() and w.isalpha()):
            continue
        if len(w) < min_length or (max_length is not None and len(w) > max_length):
            continue
        out.append(w)
    return unique_preserve_order(out)


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", required=True)
    ap.add_argument("--min-length", type=int, default=1)
    ap.add_argument("--max-length", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = clean_words(fetch_words(args.url), args.min_length, args.max_length)
    if args.sort:
        words = sorted(words)

    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()

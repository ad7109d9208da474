"""
Word list validator for wordscramble.

What this module does:
- Validate a root word list (start.txt) or a dictionary list.
- Enforce formatting rules (lowercase, a–z only, minimum length, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordscramble/datasets/data/start.txt", min_length=8)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    blank_lines: int     # empty/whitespace-only lines (tolerated, not invalid)


@dataclass
class ValidationReport:
    """Top-level validation result for one word list."""
    min_length: int
    wordlist: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int, List[str]]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must be at least `min_length` letters
      - blank lines are skipped (a trailing newline is normal)

    Returns:
      (valid_words, invalid_count, blank_count, invalid_examples)
    """
    valid: List[str] = []
    bad: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            # require already-lowercase ascii letters & minimum length
            if w.isascii() and w.isalpha() and w.islower() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1
                if len(bad) < 5:
                    bad.append(w)

    return valid, invalid, blank, bad


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str | Path, min_length: int = 1) -> Dict:
    """
    Validate a newline-separated word list.

    Parameters
    ----------
    path : str | Path
        Word list to check (one word per line).
    min_length : int
        Shortest acceptable word (root words are usually 6-8 letters).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - `passed` boolean (strict: requires non-empty, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    if min_length < 1:
        raise ValueError(f"min_length must be >= 1; got {min_length}")

    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            min_length=min_length,
            wordlist=FileReport(str(path), False, 0, "", 0, 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid, blank, bad = _load_and_check(p, min_length)
    unique = set(words)

    fr = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        blank_lines=blank,
    )

    if fr.count == 0:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s) (e.g., {bad})")
    if fr.count != fr.unique_count:
        issues.append("word list contains duplicate lines")

    passed = fr.count > 0 and invalid == 0 and fr.count == fr.unique_count

    rep = ValidationReport(min_length=min_length, wordlist=fr, passed=passed, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=412 (uniq=412, sha=abc123...) | invalid=0 | min_len=8 | OK
    """
    w = report["wordlist"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    return (
        f"{Path(w['path']).name} | words={w['count']} (uniq={w['unique_count']}, sha={sha}) "
        f"| invalid={w['invalid_lines']} | min_len={report['min_length']} | {status}"
    )

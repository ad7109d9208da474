"""
I/O utilities for survey runs.

Responsibilities:
- write_csv:     flatten per-root results into a tidy CSV (one row per root).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordscramble.engine import Reason


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of survey results to CSV.

    Schema (columns):
      root, tried, accepted, rejected_<reason> (one per reason),
      longest, time_ms, words

    `words` is space-separated in acceptance order.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    reasons = [r.value for r in Reason]
    fields = ["root", "tried", "accepted"]
    fields += [f"rejected_{r}" for r in reasons]
    fields += ["longest", "time_ms", "words"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "root": r["root"],
                "tried": r["tried"],
                "accepted": r["accepted"],
                "longest": r["longest"],
                "time_ms": round(float(r["time_ms"]), 3),
                "words": " ".join(r.get("words", [])),
            }
            rejected = r.get("rejected", {})
            for reason in reasons:
                row[f"rejected_{reason}"] = rejected.get(reason, 0)

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (oracle, paths, sample, min_length, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

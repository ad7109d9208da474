"""
Root word source.

Reads the list of starting words a game draws its root word from. The file is
plain text, one word per line, nothing else.

An unreadable list is a packaging problem and is reported as
SourceUnavailable; an empty-but-readable list is just data and comes back as
[] (start_game then falls back to its default root word).
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .io import read_words

# Root words shipped with the package.
DEFAULT_START_PATH = Path(__file__).parent / "data" / "start.txt"


class SourceUnavailable(RuntimeError):
    """The root word list could not be read."""

    def __init__(self, path: Path | str, detail: str = ""):
        self.path = str(path)
        msg = f"could not load root words from {self.path}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


def load_root_words(path: Path | str = DEFAULT_START_PATH) -> List[str]:
    """
    Load candidate root words (trimmed, lowercased, blank lines dropped).

    Raises:
      SourceUnavailable if the file is missing or can't be read/decoded.
    """
    try:
        return read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, str(e)) from e

from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines
from .source import load_root_words, SourceUnavailable, DEFAULT_START_PATH

__all__ = [
    "validate_wordlist", "pretty_summary", "read_lines", "write_lines",
    "load_root_words", "SourceUnavailable", "DEFAULT_START_PATH",
]

from .rules import normalize, is_original, is_possible, is_real
from .outcome import Outcome, Status, Reason
from .session import Session, start_game, DEFAULT_ROOT_WORD, DEFAULT_LANGUAGE
from .candidates import spellable_words

__all__ = [
    "normalize", "is_original", "is_possible", "is_real",
    "Outcome", "Status", "Reason",
    "Session", "start_game", "DEFAULT_ROOT_WORD", "DEFAULT_LANGUAGE",
    "spellable_words",
]

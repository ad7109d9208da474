"""
Result of a single submission.

Status is one of:
  - ACCEPTED : the word passed every rule and was added to the used list
  - EMPTY    : blank after normalization; ignored, not an error
  - REJECTED : failed a rule; `reason` says which one

Reasons carry the title/message a front end shows to the player.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Status(Enum):
    ACCEPTED = "accepted"
    EMPTY = "empty"
    REJECTED = "rejected"


class Reason(Enum):
    ALREADY_USED = "already_used"
    NOT_SPELLABLE_FROM_ROOT = "not_spellable_from_root"
    NOT_A_REAL_WORD = "not_a_real_word"

    @property
    def title(self) -> str:
        return _TEXTS[self][0]

    @property
    def message(self) -> str:
        return _TEXTS[self][1]


_TEXTS = {
    Reason.ALREADY_USED: ("Word used already", "Be more original"),
    Reason.NOT_SPELLABLE_FROM_ROOT: ("Word not possible",
                                     "You can't just make them up, you know!"),
    Reason.NOT_A_REAL_WORD: ("Word not recognized",
                             "That isn't a real word."),
}


@dataclass(frozen=True)
class Outcome:
    status: Status
    word: str = ""
    reason: Optional[Reason] = None

    @classmethod
    def accepted(cls, word: str) -> "Outcome":
        return cls(Status.ACCEPTED, word)

    @classmethod
    def empty(cls) -> "Outcome":
        return cls(Status.EMPTY)

    @classmethod
    def rejected(cls, word: str, reason: Reason) -> "Outcome":
        return cls(Status.REJECTED, word, reason)

    @property
    def is_accepted(self) -> bool:
        return self.status is Status.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status is Status.REJECTED

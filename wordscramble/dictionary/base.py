from __future__ import annotations
from typing import Dict, Type

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that dictionary oracles inherit ----
class BaseOracle:
    """
    Answers one question: is `token` a real word in `language`?

    One oracle serves one language; asking about another one is a
    configuration error, not a "no".
    """
    id = "base"
    name = "Base"

    def __init__(self, language: str = "en"):
        self.language = language

    def is_recognized_word(self, token: str, language: str = "en") -> bool:
        if language != self.language:
            raise ValueError(
                f"{self.id} oracle serves language {self.language!r}; got {language!r}")
        if not token:
            return False
        return self._lookup(token)

    def _lookup(self, token: str) -> bool:
        raise NotImplementedError("Override in subclass")

from __future__ import annotations
from typing import Dict, Type

# ---- Global validator registry ----
REGISTRY: Dict[str, Type["BaseValidator"]] = {}


def register(cls: Type["BaseValidator"]) -> Type["BaseValidator"]:
    """
    Decorator: @register on a validator class adds it to REGISTRY by its `id`.
    """
    vid = getattr(cls, "id", None)
    if not vid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if vid in REGISTRY:
        raise ValueError(f"Duplicate validator id: {vid}")
    REGISTRY[vid] = cls
    return cls


# ---- Base class that validators inherit ----
class BaseValidator:
    """
    A word validator answers one question: "is this candidate a real word?"

    Validators are awaited one call at a time by the search, so an
    implementation never has to guard against concurrent use.
    """
    id = "base"
    name = "Base"

    async def validate(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    async def __call__(self, word: str) -> bool:
        return await self.validate(word)

    def close(self) -> None:
        """Release any held resources (sessions, files). No-op by default."""

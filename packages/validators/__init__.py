from __future__ import annotations
from typing import List
from .base import BaseValidator, REGISTRY, register

from . import static  # noqa: F401
from . import http  # noqa: F401
from . import wordlist  # noqa: F401


def create_validator(validator_id: str, **kwargs) -> BaseValidator:
    """
    Factory: instantiate a registered validator by id, forwarding kwargs
    to its constructor.
    """
    try:
        cls = REGISTRY[validator_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown validator id: {validator_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_validator_ids() -> List[str]:
    """
    Return all registered validator ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())

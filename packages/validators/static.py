"""
Accept-all validator.

Every candidate is reported valid, so a search run with it returns the raw
enumeration of exact-sum letter sequences. Useful offline and for exploring
how many candidates a target produces before pointing the search at a service.
"""

from __future__ import annotations

from .base import BaseValidator, register


@register
class AcceptAllValidator(BaseValidator):
    id = "accept_all"
    name = "Accept All"

    async def validate(self, word: str) -> bool:
        return bool(word)

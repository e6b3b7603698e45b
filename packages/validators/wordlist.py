"""
Word-list validator.

Answers from a local UTF-8 list (one word per line) instead of a remote
service. Lines are read with datasets.io.read_words (stripped; blanks and
`#` comments skipped). Membership is exact: no case folding or
normalization is applied to Arabic text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Set

from packages.datasets.io import read_words
from .base import BaseValidator, register


@register
class WordListValidator(BaseValidator):
    id = "wordlist"
    name = "Word list"

    def __init__(self, path: Optional[Path | str] = None, *, words: Optional[Iterable[str]] = None):
        if path is None and words is None:
            raise ValueError("WordListValidator needs a `path` or `words`")
        src = read_words(path) if path is not None else words
        self.words: Set[str] = {w.strip() for w in src if w.strip()}

    async def validate(self, word: str) -> bool:
        return word in self.words

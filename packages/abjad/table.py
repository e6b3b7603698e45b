"""
The Abjad letter table.

Each of the 28 Arabic letters maps to its traditional numeral value:
units (1-9), tens (10-90), hundreds (100-900) and a single thousand (1000).

The insertion order of LETTERS is the canonical abjadi order
(abjad, hawwaz, hutti, kalaman, sa'fas, qurishat, thakhadh, dazagh) and is the
order the word search walks the alphabet in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

_PAIRS: Tuple[Tuple[str, int], ...] = (
    ("ا", 1),
    ("ب", 2),
    ("ج", 3),
    ("د", 4),
    ("ه", 5),
    ("و", 6),
    ("ز", 7),
    ("ح", 8),
    ("ط", 9),
    ("ي", 10),
    ("ك", 20),
    ("ل", 30),
    ("م", 40),
    ("ن", 50),
    ("س", 60),
    ("ع", 70),
    ("ف", 80),
    ("ص", 90),
    ("ق", 100),
    ("ر", 200),
    ("ش", 300),
    ("ت", 400),
    ("ث", 500),
    ("خ", 600),
    ("ذ", 700),
    ("ض", 800),
    ("ظ", 900),
    ("غ", 1000),
)

# Read-only view; the table is built once at import and never mutated.
LETTER_VALUES: Mapping[str, int] = MappingProxyType(dict(_PAIRS))

# Fixed iteration order for the search.
LETTERS: Tuple[str, ...] = tuple(letter for letter, _ in _PAIRS)


def letter_value(letter: str) -> Optional[int]:
    """Return the Abjad value of a single letter, or None if it is unmapped."""
    return LETTER_VALUES.get(letter)

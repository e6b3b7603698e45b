"""
Abjad numeral value of a text.

Characters that are not in the letter table (spaces, punctuation, diacritics,
Latin letters, digits) contribute nothing; the function never raises.

Examples:
  calculate_abjad("جمل")     -> 73    (3 + 40 + 30)
  calculate_abjad("بِسْمِ")   -> 102   (harakat are skipped)
  calculate_abjad("")        -> 0
"""

from __future__ import annotations

from typing import Iterable

from .table import LETTER_VALUES


def calculate_abjad(text: Iterable[str]) -> int:
    total = 0
    for ch in text:
        # Membership, not truthiness: a zero-valued entry must still count as mapped.
        if ch in LETTER_VALUES:
            total += LETTER_VALUES[ch]
    return total

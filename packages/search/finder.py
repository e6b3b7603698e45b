"""
Word search by Abjad value.

Given a target value, enumerate letter sequences (up to `max_length` letters)
whose Abjad sum is exactly the target and keep the ones a validator accepts.

Algorithm: depth-first backtracking over the letter table.
  - state is (word so far, running sum); the sum is carried incrementally
  - reaching the target with a non-empty word yields a candidate and ends the
    branch (every letter value is positive, so no extension can still match)
  - a branch is abandoned once it has `max_length` letters or its sum has
    passed the target
  - otherwise every letter is tried in table order

Because values are positive the running sum grows strictly with depth, so
the search always terminates; the worst case is 28 + 28^2 + ... + 28^max_length
branches.

Validation is sequential: each candidate is awaited before the next branch is
explored, so results come back in visitation order and at most one validator
call is ever outstanding. A validator that raises is treated as a rejection.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterator, List, Optional

from packages.abjad import LETTER_VALUES, LETTERS

logger = logging.getLogger(__name__)

# Anything awaitable that takes a word and answers valid / not valid.
# BaseValidator instances are callable and fit this shape.
Validator = Callable[[str], Awaitable[bool]]
CandidateHook = Callable[[str, bool], None]

DEFAULT_MAX_LENGTH = 3


@dataclass
class SearchReport:
    """Outcome of one search run."""
    target: int
    max_length: int
    words: List[str] = field(default_factory=list)   # accepted, in discovery order
    checked: int = 0       # validator calls issued
    rejected: int = 0      # candidates the validator said no to
    errors: int = 0        # validator calls that raised
    elapsed_ms: float = 0.0


def _check_max_length(max_length: int) -> None:
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
        raise ValueError(f"max_length must be a positive integer; got {max_length!r}")


def iter_candidates(target: int, max_length: int = DEFAULT_MAX_LENGTH) -> Iterator[str]:
    """
    Yield every word of at most `max_length` letters whose value equals
    `target`, in depth-first table order.

    Example (target=3, max_length=3):
        ااا, اب, با, ج
    """
    _check_max_length(max_length)

    def walk(word: str, total: int) -> Iterator[str]:
        if total == target and word:
            yield word
            return
        if len(word) >= max_length or total > target:
            return
        for letter in LETTERS:
            yield from walk(word + letter, total + LETTER_VALUES[letter])

    yield from walk("", 0)


async def _accepts(validator: Validator, word: str, report: SearchReport) -> bool:
    report.checked += 1
    try:
        ok = bool(await validator(word))
    except Exception as e:  # any validator failure only costs this candidate
        report.errors += 1
        logger.warning("validator failed on %r, treating as invalid: %s", word, e)
        return False
    if not ok:
        report.rejected += 1
    return ok


async def search(
        target: int,
        max_length: int = DEFAULT_MAX_LENGTH,
        *,
        validator: Validator,
        on_candidate: Optional[CandidateHook] = None,
) -> SearchReport:
    """
    Run the search and return a SearchReport with the accepted words and
    counters. `on_candidate(word, accepted)` is called after each validation.
    """
    _check_max_length(max_length)
    report = SearchReport(target=target, max_length=max_length)

    t0 = time.perf_counter()
    for word in iter_candidates(target, max_length):
        accepted = await _accepts(validator, word, report)
        if accepted:
            report.words.append(word)
        if on_candidate is not None:
            on_candidate(word, accepted)
    report.elapsed_ms = (time.perf_counter() - t0) * 1000.0

    logger.info(
        "search target=%d max_length=%d: %d candidate(s), %d accepted, %d error(s)",
        target, max_length, report.checked, len(report.words), report.errors,
    )
    return report


async def find_valid_words(
        target: int,
        max_length: int = DEFAULT_MAX_LENGTH,
        *,
        validator: Validator,
        on_candidate: Optional[CandidateHook] = None,
) -> List[str]:
    """
    Words of at most `max_length` letters whose Abjad value is `target` and
    which `validator` accepts, in discovery order. Never raises because of
    the validator; an empty list is a normal outcome.
    """
    report = await search(target, max_length, validator=validator, on_candidate=on_candidate)
    return report.words

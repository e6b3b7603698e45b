"""
Front-end primitives shared by the CLI (and anything else that wants them).

- parse_target:    turn raw user input into a positive target, or None.
- abjad_message:   the one-line result for "compute numeral value".
- run_search:      gate the target, run the word search, build the message.

Kept UI-agnostic: no printing, no argument parsing.
"""

from __future__ import annotations
import re
from typing import Dict, Optional

from packages.abjad import calculate_abjad
from packages.search import search
from packages.search.finder import DEFAULT_MAX_LENGTH, CandidateHook, Validator

INVALID_TARGET_MSG = "Please enter a valid positive number."
SEARCHING_MSG = "Searching for valid words..."
NO_WORDS_MSG = "No valid word found."

# Optional whitespace and sign, then the leading run of ASCII digits; trailing text is ignored.
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_target(raw) -> Optional[int]:
    """
    Parse a target value the way a browser form would (parseInt semantics):
      "12"    -> 12
      " 7 "   -> 7
      "12abc" -> 12
      "3.9"   -> 3
      "abc", "", "0", "-5" -> None   (not a positive integer)
      "٣"     -> None                (only ASCII digits, like parseInt)
    Ints pass through the same positivity gate.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        m = _LEADING_INT_RE.match(str(raw))
        if not m:
            return None
        try:
            value = int(m.group(1))
        except ValueError:
            # digit run beyond the interpreter's int conversion limit
            return None
    return value if value > 0 else None


def abjad_message(text: str) -> str:
    return f"Abjad numeral value: {calculate_abjad(text)}"


def found_message(words) -> str:
    if words:
        return f"Found valid word(s): {', '.join(words)}"
    return NO_WORDS_MSG


async def run_search(
        raw_target,
        *,
        validator: Validator,
        max_length: int = DEFAULT_MAX_LENGTH,
        on_candidate: Optional[CandidateHook] = None,
) -> Dict:
    """
    Validate the target and run one search.

    Returns a dict with keys:
        ok (bool), target (int | None), message (str),
        words (list[str]), report (SearchReport | None)

    An invalid target is reported through `message`; it is not an exception.
    """
    target = parse_target(raw_target)
    if target is None:
        return {"ok": False, "target": None, "message": INVALID_TARGET_MSG,
                "words": [], "report": None}

    report = await search(target, max_length, validator=validator, on_candidate=on_candidate)
    return {
        "ok": True, "target": target, "message": found_message(report.words),
        "words": list(report.words), "report": report,
    }

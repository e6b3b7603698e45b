"""
Arabic word list validator.

Checks a word list before the `wordlist` validator loads it:
- one word per line, no inner whitespace
- every character must be a letter of the Abjad table
  (diacritics, tatweel, hamza-carrier forms and Latin text are invalid)
- duplicates are reported
- SHA-256 of the raw file is recorded so a run manifest pins the exact list

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words_ar.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.abjad import LETTER_VALUES
from .io import read_lines


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def is_abjad_word(word: str) -> bool:
    """True if `word` is non-empty and made only of Abjad table letters."""
    return bool(word) and all(ch in LETTER_VALUES for ch in word)


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0
    for raw in read_lines(path):
        w = raw.strip()
        if is_abjad_word(w):
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def validate_wordlist(path: str) -> Dict:
    """
    Validate an Arabic word list.

    Returns a JSON-serializable dict (see WordListReport) whose `passed` flag
    is strict: the file exists, is non-empty, and has no invalid or
    duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(path, False, 0, "", 0, 0, False, [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        words=1200 (uniq=1198, invalid=3, sha=abc123...) | FAIL
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )

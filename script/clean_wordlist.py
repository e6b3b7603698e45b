"""
Clean an Arabic word list for the `wordlist` validator.

Features:
- Strips harakat and other combining marks, plus tatweel (ـ).
- Drops lines that still contain anything outside the Abjad letter table
  (taa marbuta, hamza forms, Latin text, digits, inner spaces).
- Removes duplicates, preserving original order.
- Optional sorting AFTER dedupe by Abjad value (ties keep input order).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in data/words_ar.txt --out data/words_clean.txt --sort-by-value
"""

import argparse
import unicodedata
from pathlib import Path
from typing import Iterable, List

from packages.abjad import calculate_abjad
from packages.datasets import is_abjad_word, read_lines, write_lines

TATWEEL = "ـ"


def strip_marks(word: str) -> str:
    """Remove combining marks (harakat, shadda, sukun) and tatweel."""
    return "".join(
        ch for ch in word
        if ch != TATWEEL and not unicodedata.category(ch).startswith("M")
    )


def unique_preserve_order(lines: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean_words(lines: Iterable[str]) -> List[str]:
    """Normalize, filter to Abjad-only words and dedupe."""
    stripped = (strip_marks(s.strip()) for s in lines)
    return unique_preserve_order(w for w in stripped if is_abjad_word(w))


def main():
    ap = argparse.ArgumentParser(description="Clean an Arabic word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort-by-value", action="store_true",
                    help="sort by Abjad value after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines)
    if args.sort_by_value:
        out = sorted(out, key=calculate_abjad)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()

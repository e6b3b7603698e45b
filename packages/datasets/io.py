from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of raw lines (trailing CR/LF removed).
    A leading byte-order mark, common in Arabic lists saved by Windows editors,
    is dropped so the first word still matches.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8-sig").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list for lookups: one word per line, surrounding whitespace
    (including the NBSP / RTL marks some editors leave behind) stripped,
    blank lines and `#` comment lines skipped. Order is preserved.
    """
    out: List[str] = []
    for ln in read_lines(p):
        w = ln.strip().strip("\u200f\u200e\u00a0")
        if w and not w.startswith("#"):
            out.append(w)
    return out


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file with a trailing newline; returns the path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)

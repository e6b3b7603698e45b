"""
I/O utilities for search runs.

Responsibilities:
- write_csv:      one row per accepted word (word, value, length).
- write_manifest: dump a JSON manifest with config, counters and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Arabic text is written as-is (UTF-8, no \\u escapes in JSON). The CSV gets a
BOM so spreadsheet apps pick the right encoding instead of showing mojibake.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Dict
import csv
import json
import subprocess
import datetime as dt

from packages.abjad import calculate_abjad
from packages.search import SearchReport


def write_csv(report: SearchReport, path: str) -> str:
    """
    Serialize the accepted words of a search to CSV.

    Schema (columns): word, value, length

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8-sig") as f:
        w = csv.DictWriter(f, fieldnames=["word", "value", "length"])
        w.writeheader()
        for word in report.words:
            w.writerow({"word": word, "value": calculate_abjad(word), "length": len(word)})

    return str(p)


def report_dict(report: SearchReport) -> Dict:
    """SearchReport -> plain dict, elapsed time rounded for readability."""
    d = asdict(report)
    d["elapsed_ms"] = round(float(d["elapsed_ms"]), 3)
    return d


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (target, max_length, validator, endpoint, ...)
      - wordlist: output of datasets.validate_wordlist(...) when a list was used
      - search: report_dict(...) of the run
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

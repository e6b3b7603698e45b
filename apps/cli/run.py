# apps/cli/run.py
"""
CLI entry point for abjad-finder.

Subcommands:
  calc TEXT      print the Abjad numeral value of TEXT
  find TARGET    search for words (up to --max-length letters) whose value is
                 TARGET, checking each candidate with the chosen validator

`find` optionally:
  - validates the word list first (prints counts + SHA) when --validator wordlist
  - shows a live progress bar over validation calls
  - writes a CSV of the found words and a JSON manifest into --outdir

Examples:
  python -m apps.cli.run calc "بسم الله"
  python -m apps.cli.run find 66 --validator wordlist --wordlist data/words_ar.txt
  python -m apps.cli.run find 12 --validator accept_all --max-length 2 --outdir reports
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from packages.config import Settings
from packages.datasets import validate_wordlist, pretty_summary
from packages.harness import abjad_message, run_search, parse_target
from packages.harness.core import SEARCHING_MSG
from packages.harness.io import (
    write_csv, write_manifest, report_dict, timestamp_id, git_commit_or_unknown,
)
from packages.validators import create_validator, get_validator_ids

logger = logging.getLogger("abjad_finder.cli")


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="abjad-finder — Abjad values and word search")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity (diagnostics go to stderr)")
    sub = ap.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="compute the Abjad numeral value of a text")
    calc.add_argument("text", nargs="+", help="Arabic text (several args are joined with spaces)")

    find = sub.add_parser("find", help="find words whose Abjad value equals TARGET")
    find.add_argument("target", help="positive integer target value")
    find.add_argument("--max-length", type=int, default=settings.max_length,
                      help=f"maximum word length in letters (default {settings.max_length})")
    find.add_argument("--validator", default="http",
                      help=f"validator id (one of: {', '.join(get_validator_ids())})")
    find.add_argument("--endpoint", default=settings.endpoint,
                      help="validation endpoint for the http validator")
    find.add_argument("--timeout", type=float, default=settings.timeout,
                      help="per-request timeout in seconds for the http validator")
    find.add_argument("--wordlist", help="path to a UTF-8 word list (wordlist validator)")
    find.add_argument("--outdir", help="write CSV + JSON manifest into this directory")
    find.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar over validation calls (auto=bar when stderr is a TTY)."
    )
    return ap


def _make_validator(args):
    if args.validator == "http":
        return create_validator("http", endpoint=args.endpoint, timeout=args.timeout)
    if args.validator == "wordlist":
        if not args.wordlist:
            raise ValueError("--wordlist is required with --validator wordlist")
        return create_validator("wordlist", path=args.wordlist)
    return create_validator(args.validator)


def _cmd_calc(args) -> int:
    print(abjad_message(" ".join(args.text)))
    return 0


def _cmd_find(args) -> int:
    if args.max_length < 1:
        print("--max-length must be at least 1", file=sys.stderr)
        return 2
    if args.timeout <= 0:
        print("--timeout must be positive", file=sys.stderr)
        return 2

    # Gate the target before touching word lists or the network
    if parse_target(args.target) is None:
        print("Please enter a valid positive number.")
        return 2

    wordlist_rep = None
    if args.validator == "wordlist" and args.wordlist:
        wordlist_rep = validate_wordlist(args.wordlist)
        print(pretty_summary(wordlist_rep))
        if not wordlist_rep["exists"]:
            return 2

    try:
        validator = _make_validator(args)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    bar = tqdm(desc="Validating", unit="word", ncols=80) if mode == "bar" else None

    def on_candidate(word: str, accepted: bool) -> None:
        bar.update(1)
        if accepted:
            bar.set_postfix(found=word)

    print(SEARCHING_MSG)
    try:
        result = asyncio.run(run_search(
            args.target,
            validator=validator,
            max_length=args.max_length,
            on_candidate=on_candidate if bar is not None else None,
        ))
    finally:
        if bar is not None:
            bar.close()
        validator.close()

    print(result["message"])

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"search_{run_id}.csv"
        manifest_path = outdir / f"search_{run_id}_manifest.json"
        write_csv(result["report"], str(csv_path))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": wordlist_rep,
            "search": report_dict(result["report"]),
        }
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, configure logging and dispatch to the subcommand.
    """
    settings = Settings.from_env()
    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("settings: %s", settings)

    if args.command == "calc":
        return _cmd_calc(args)
    return _cmd_find(args)


if __name__ == "__main__":
    sys.exit(main())

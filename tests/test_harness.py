import asyncio
import csv
import json
from pathlib import Path

import pytest
from packages.harness import abjad_message, found_message, parse_target, run_search
from packages.harness.io import write_csv, write_manifest, report_dict, timestamp_id
from packages.search import search


async def accept_all(word):
    return True


@pytest.mark.parametrize("raw,expected", [
    ("12", 12),
    (" 7 ", 7),
    ("+5", 5),
    ("12abc", 12),
    ("3.9", 3),
    (66, 66),
    ("abc", None),
    ("", None),
    ("0", None),
    ("-5", None),
    (0, None),
    (True, None),
    ("٣", None),
    ("9" * 5000, None),
])
def test_parse_target(raw, expected):
    assert parse_target(raw) == expected


def test_abjad_message():
    assert abjad_message("جمل") == "Abjad numeral value: 73"
    assert abjad_message("") == "Abjad numeral value: 0"


def test_found_message():
    assert found_message(["اب", "ج"]) == "Found valid word(s): اب, ج"
    assert found_message([]) == "No valid word found."


def test_run_search_rejects_bad_target_without_calling_validator():
    calls = []

    async def record(word):
        calls.append(word)
        return True

    r = asyncio.run(run_search("-3", validator=record))
    assert r["ok"] is False
    assert r["message"] == "Please enter a valid positive number."
    assert r["words"] == [] and r["report"] is None
    assert calls == []


def test_run_search_found():
    r = asyncio.run(run_search("3", validator=accept_all, max_length=2))
    assert r["ok"] is True and r["target"] == 3
    assert r["words"] == ["اب", "با", "ج"]
    assert r["message"] == "Found valid word(s): اب, با, ج"


def test_run_search_nothing_found():
    async def reject(word):
        return False

    r = asyncio.run(run_search("3", validator=reject))
    assert r["ok"] is True
    assert r["message"] == "No valid word found."


def test_write_csv_and_manifest(tmp_path: Path):
    report = asyncio.run(search(3, 2, validator=accept_all))

    csv_path = write_csv(report, str(tmp_path / "run.csv"))
    with open(csv_path, encoding="utf-8-sig", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["word"] for r in rows] == ["اب", "با", "ج"]
    assert all(r["value"] == "3" for r in rows)
    assert [r["length"] for r in rows] == ["2", "2", "1"]

    manifest = {"run_id": timestamp_id(), "search": report_dict(report)}
    mpath = write_manifest(manifest, str(tmp_path / "sub" / "manifest.json"))
    text = Path(mpath).read_text(encoding="utf-8")
    assert "اب" in text  # not \u-escaped
    data = json.loads(text)
    assert data["search"]["words"] == ["اب", "با", "ج"]
    assert data["search"]["checked"] == 3


def test_timestamp_id_shape():
    ts = timestamp_id()
    assert len(ts) == 16 and ts[8] == "T" and ts.endswith("Z")


def test_run_search_huge_target_is_rejected_with_message():
    r = asyncio.run(run_search("9" * 5000, validator=accept_all, max_length=1))
    assert r["ok"] is False
    assert r["message"] == "Please enter a valid positive number."

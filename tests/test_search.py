import asyncio
import itertools

import pytest
from packages.abjad import LETTERS, calculate_abjad
from packages.search import find_valid_words, iter_candidates, search


async def accept_all(word):
    return True


async def reject_all(word):
    return False


async def explode(word):
    raise ConnectionError("validator unreachable")


def _run(coro):
    return asyncio.run(coro)


def test_target_3_depth_first_order():
    words = _run(find_valid_words(3, 3, validator=accept_all))
    assert words == ["ااا", "اب", "با", "ج"]


def test_single_letter_when_max_length_is_one():
    assert _run(find_valid_words(3, 1, validator=accept_all)) == ["ج"]
    assert _run(find_valid_words(1000, 1, validator=accept_all)) == ["غ"]


def test_default_max_length_is_three():
    words = _run(find_valid_words(3, validator=accept_all))
    assert max(len(w) for w in words) == 3


@pytest.mark.parametrize("max_length", [1, 2, 3, 4])
def test_target_zero_is_unreachable(max_length):
    assert _run(find_valid_words(0, max_length, validator=accept_all)) == []


def test_negative_target_yields_nothing():
    assert _run(find_valid_words(-5, 3, validator=accept_all)) == []


def test_rejecting_validator_returns_empty():
    assert _run(find_valid_words(12, 3, validator=reject_all)) == []


def test_raising_validator_is_not_fatal():
    report = _run(search(3, 3, validator=explode))
    assert report.words == []
    assert report.checked == 4
    assert report.errors == 4


def test_failure_on_one_candidate_keeps_searching():
    async def flaky(word):
        if word == "اب":
            raise TimeoutError("slow service")
        return True

    assert _run(find_valid_words(3, 3, validator=flaky)) == ["ااا", "با", "ج"]


def test_validator_only_sees_exact_sum_words_within_length():
    seen = []

    async def record(word):
        seen.append(word)
        return False

    _run(find_valid_words(25, 2, validator=record))
    assert seen
    assert all(len(w) <= 2 for w in seen)
    assert all(calculate_abjad(w) == 25 for w in seen)


@pytest.mark.parametrize("target,max_length", [(12, 2), (12, 3), (61, 3), (400, 2)])
def test_matches_brute_force_enumeration(target, max_length):
    index = {ch: i for i, ch in enumerate(LETTERS)}
    expected = [
        "".join(combo)
        for n in range(1, max_length + 1)
        for combo in itertools.product(LETTERS, repeat=n)
        if calculate_abjad(combo) == target
    ]
    expected.sort(key=lambda w: [index[ch] for ch in w])

    words = _run(find_valid_words(target, max_length, validator=accept_all))
    assert words == expected
    assert len(words) == len(set(words))


def test_iter_candidates_matches_async_search():
    assert list(iter_candidates(40, 2)) == _run(find_valid_words(40, 2, validator=accept_all))


def test_validation_is_sequential():
    state = {"in_flight": 0, "max_in_flight": 0}

    async def slow(word):
        state["in_flight"] += 1
        state["max_in_flight"] = max(state["max_in_flight"], state["in_flight"])
        await asyncio.sleep(0)
        state["in_flight"] -= 1
        return True

    words = _run(find_valid_words(10, 3, validator=slow))
    assert words
    assert state["max_in_flight"] == 1


def test_report_counters_and_hook():
    calls = []

    async def only_short(word):
        return len(word) == 1

    report = _run(search(3, 3, validator=only_short,
                         on_candidate=lambda w, ok: calls.append((w, ok))))
    assert report.words == ["ج"]
    assert report.checked == 4
    assert report.rejected == 3
    assert report.errors == 0
    assert calls == [("ااا", False), ("اب", False), ("با", False), ("ج", True)]
    assert report.elapsed_ms >= 0.0


@pytest.mark.parametrize("bad", [0, -1, 2.5, True, "3"])
def test_bad_max_length_raises(bad):
    with pytest.raises(ValueError):
        list(iter_candidates(3, bad))
    with pytest.raises(ValueError):
        _run(find_valid_words(3, bad, validator=accept_all))


class CountingLetters(tuple):
    def __new__(cls, letters):
        obj = super().__new__(cls, letters)
        obj.loops = 0
        return obj

    def __iter__(self):
        self.loops += 1
        return super().__iter__()


def test_branches_over_target_are_not_extended(monkeypatch):
    from packages.search import finder

    letters = CountingLetters(LETTERS)
    monkeypatch.setattr(finder, "LETTERS", letters)
    # Only the empty word loops over the alphabet: "ا" hits the target and
    # every other single letter already exceeds it.
    assert list(iter_candidates(1, 3)) == ["ا"]
    assert letters.loops == 1


def test_expansion_count_for_small_target(monkeypatch):
    from packages.search import finder

    letters = CountingLetters(LETTERS)
    monkeypatch.setattr(finder, "LETTERS", letters)
    # Target 3: the root, "ا" (1), "اا" (2) and "ب" (2) are the only words
    # below the target with room left to grow.
    assert list(iter_candidates(3, 3)) == ["ااا", "اب", "با", "ج"]
    assert letters.loops == 4

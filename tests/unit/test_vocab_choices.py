"""Unit tests for random helpers and distractor sampling."""

from __future__ import annotations

from collections import Counter
import random

import pytest

from pinyin_drill.models import VocabularyEntry
from pinyin_drill.vocab.choices import pick_random, sample_choices, shuffle


def _entries(count: int) -> list[VocabularyEntry]:
    return [
        VocabularyEntry(id=str(idx), hanzi=f"字{idx}", pinyin="zì", numeric="zi4", fr="x")
        for idx in range(count)
    ]


def test_shuffle_returns_permutation_without_mutating_input() -> None:
    items = list(range(10))

    out = shuffle(items, random.Random(3))

    assert items == list(range(10))
    assert sorted(out) == items


def test_shuffle_is_deterministic_for_seeded_rng() -> None:
    assert shuffle(range(8), random.Random(7)) == shuffle(range(8), random.Random(7))


def test_shuffle_is_not_biased_toward_a_position() -> None:
    rng = random.Random(42)
    first = Counter(shuffle("abcd", rng)[0] for _ in range(4000))

    assert set(first) == set("abcd")
    assert all(800 < count < 1200 for count in first.values())


def test_pick_random_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError, match="empty"):
        pick_random([])
    assert pick_random(["only"]) == "only"


def test_sample_choices_returns_five_with_correct_once() -> None:
    pool = _entries(12)
    rng = random.Random(0)

    for _ in range(50):
        correct = pool[rng.randrange(len(pool))]
        choices = sample_choices(correct, pool, rng=rng)
        assert len(choices) == 5
        assert [entry.id for entry in choices].count(correct.id) == 1
        assert len({entry.id for entry in choices}) == 5


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_sample_choices_underfills_small_pool(size: int) -> None:
    pool = _entries(size)

    choices = sample_choices(pool[0], pool, count=5, rng=random.Random(1))

    assert sorted(entry.id for entry in choices) == sorted(entry.id for entry in pool)


def test_sample_choices_places_correct_entry_at_every_position() -> None:
    pool = _entries(6)
    rng = random.Random(5)

    positions = {
        [entry.id for entry in sample_choices(pool[0], pool, rng=rng)].index("0")
        for _ in range(300)
    }

    assert positions == {0, 1, 2, 3, 4}


def test_sample_choices_adds_correct_entry_missing_from_pool() -> None:
    pool = _entries(3)
    outsider = VocabularyEntry(id="x", hanzi="外", pinyin="wài", numeric="wai4", fr="dehors")

    choices = sample_choices(outsider, pool, count=2, rng=random.Random(2))

    assert len(choices) == 2
    assert "x" in {entry.id for entry in choices}

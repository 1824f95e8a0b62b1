"""Random selection helpers and the multiple-choice distractor sampler."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from pinyin_drill.models import VocabularyEntry

DEFAULT_CHOICE_COUNT = 5

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly permuted copy of ``items`` (Fisher-Yates).

    Args:
        items: Sequence to permute; it is left untouched.
        rng: Random source, the module-level generator when omitted.

    Returns:
        New list in random order.
    """

    source = rng or random
    out = list(items)
    for idx in range(len(out) - 1, 0, -1):
        swap = source.randrange(idx + 1)
        out[idx], out[swap] = out[swap], out[idx]
    return out


def pick_random(items: Sequence[T], rng: random.Random | None = None) -> T:
    """Return one element of ``items`` chosen uniformly.

    Raises:
        ValueError: If ``items`` is empty.
    """

    if not items:
        raise ValueError("Cannot pick from an empty sequence.")
    return (rng or random).choice(items)


def sample_choices(
    correct: VocabularyEntry,
    pool: Sequence[VocabularyEntry],
    count: int = DEFAULT_CHOICE_COUNT,
    rng: random.Random | None = None,
) -> list[VocabularyEntry]:
    """Build a shuffled choice set holding ``correct`` and up to ``count - 1`` others.

    Args:
        correct: Entry that must appear exactly once.
        pool: Candidate distractors; entries sharing ``correct.id`` are skipped.
        count: Target size of the choice set.
        rng: Random source for deterministic tests.

    Returns:
        Choice list; shorter than ``count`` when the pool is too small.
    """

    others = [entry for entry in pool if entry.id != correct.id]
    distractors = shuffle(others, rng)[: max(0, count - 1)]
    return shuffle([correct, *distractors], rng)

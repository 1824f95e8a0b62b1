"""Homophone-aware lookup of entries by pronunciation."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable

from pinyin_drill.models import PinyinIndex, VocabularyEntry


def pronunciation_keys(entry: VocabularyEntry) -> tuple[str, ...]:
    """Return the index keys contributed by ``entry``.

    Args:
        entry: Vocabulary entry.

    Returns:
        The diacritic ``pinyin`` followed by the lower-cased ``numeric`` when
        it is non-empty.
    """

    keys = [entry.pinyin]
    numeric = entry.numeric.strip().lower()
    if numeric:
        keys.append(numeric)
    return tuple(keys)


def build_pinyin_index(entries: Iterable[VocabularyEntry]) -> PinyinIndex:
    """Group entry ids by every pronunciation key they carry.

    Args:
        entries: Active entry subset; rebuild whenever the subset changes.

    Returns:
        Immutable index where homophones share a key.
    """

    grouped: dict[str, set[str]] = {}
    for entry in entries:
        for key in pronunciation_keys(entry):
            grouped.setdefault(key, set()).add(entry.id)
    return PinyinIndex(
        keys=MappingProxyType({key: frozenset(ids) for key, ids in grouped.items()})
    )


def accepted_ids_for(entry: VocabularyEntry, index: PinyinIndex) -> frozenset[str]:
    """Return ids of every entry pronounced like ``entry``, ``entry.id`` included."""

    accepted: set[str] = {entry.id}
    for key in pronunciation_keys(entry):
        accepted.update(index.lookup(key))
    return frozenset(accepted)

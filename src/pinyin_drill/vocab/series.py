"""Series grouping helpers for restricting drills to part of the word list."""

from __future__ import annotations

from typing import Collection, Iterable

from pinyin_drill.models import VocabularyEntry


def series_options(entries: Iterable[VocabularyEntry]) -> list[int]:
    """Return the sorted distinct series numbers; ungrouped entries are ignored."""

    return sorted({entry.series for entry in entries if entry.series is not None})


def filter_by_series(
    entries: Iterable[VocabularyEntry],
    selected: Collection[int] | None,
) -> list[VocabularyEntry]:
    """Keep entries whose series is selected.

    Args:
        entries: Full word list.
        selected: Series numbers to keep; ``None`` or empty keeps everything.

    Returns:
        Filtered entries in their original order.
    """

    if not selected:
        return list(entries)
    return [entry for entry in entries if entry.series is not None and entry.series in selected]


def parse_series_selection(text: str | None) -> frozenset[int] | None:
    """Parse a comma-separated selection such as ``1,3``.

    Args:
        text: Selection text; empty text or ``all`` means no filter.

    Returns:
        Selected series numbers, or ``None`` for no filter.

    Raises:
        ValueError: If a token is not an integer.
    """

    if text is None or not text.strip() or text.strip().lower() == "all":
        return None

    selected: set[int] = set()
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            selected.add(int(token))
        except ValueError as exc:
            raise ValueError(f"Invalid series number '{token}' in '{text}'.") from exc
    return frozenset(selected) or None

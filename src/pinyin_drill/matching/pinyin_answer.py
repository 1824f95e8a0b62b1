"""Tolerant comparison of typed pinyin against the expected marked spelling."""

from __future__ import annotations

import re

from pinyin_drill.models import MatchVerdict
from pinyin_drill.pinyin.tones import (
    has_diacritics,
    has_tone_digits,
    normalize_umlaut,
    numeric_string_to_diacritic,
)

WHITESPACE_RE = re.compile(r"\s+")


def canonical_pinyin(text: str) -> str:
    """Reduce pinyin in any notation to a spacing- and case-free marked form.

    Numbered input is converted to tone marks first, then whitespace is removed,
    the text is lower-cased and ``v``/``u:`` become ``ü``.

    Args:
        text: Typed or stored pinyin.

    Returns:
        Canonical string suitable for exact comparison.
    """

    if has_tone_digits(text):
        text = numeric_string_to_diacritic(text)
    return normalize_umlaut(WHITESPACE_RE.sub("", text).lower())


def check_pinyin_answer(raw_input: str, expected_diacritic: str) -> MatchVerdict:
    """Decide whether ``raw_input`` spells the same pronunciation as expected.

    Args:
        raw_input: Text typed by the learner (marked, numbered or mixed).
        expected_diacritic: Canonical tone-marked pinyin of the entry.

    Returns:
        Verdict with the match result, advisory flags and the tone-marked
        rendering of the input for feedback display.
    """

    matched = canonical_pinyin(raw_input) == canonical_pinyin(expected_diacritic)
    used_digits = has_tone_digits(raw_input)
    used_marks = has_diacritics(raw_input)

    return MatchVerdict(
        matched=matched,
        corrected_display=numeric_string_to_diacritic(raw_input),
        used_numeric_tone_notation=matched and used_digits and not used_marks,
        missing_tone_markers=not matched and not used_digits and not used_marks,
    )

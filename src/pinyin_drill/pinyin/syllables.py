"""Inventory of valid toneless Mandarin syllables."""

from __future__ import annotations

import unicodedata

from pypinyin import constants as pypinyin_constants

from pinyin_drill.pinyin.tones import normalize_umlaut

COMBINING_DIAERESIS = "\u0308"
EXTRA_VALID_SYLLABLES = {"m", "n", "ng", "hm", "hng", "r"}


def strip_tone_marks(syllable: str) -> str:
    """Remove tone marks from ``syllable`` while keeping ``ü``.

    Args:
        syllable: Pinyin chunk that may contain tone-marked vowels or the
            syllabic ``ḿ``/``ń``/``ň``/``ǹ`` forms.

    Returns:
        Lowercase toneless pinyin.
    """

    decomposed = unicodedata.normalize("NFD", normalize_umlaut(syllable).lower())
    kept = (
        ch
        for ch in decomposed
        if not unicodedata.combining(ch) or ch == COMBINING_DIAERESIS
    )
    return unicodedata.normalize("NFC", "".join(kept))


def _collect_valid_syllables() -> frozenset[str]:
    """Collect toneless syllables from the pypinyin single-character dictionary.

    Returns:
        Every base syllable, plus erhua ``-r`` forms and interjections.
    """

    syllables: set[str] = set()
    for value in pypinyin_constants.PINYIN_DICT.values():
        for item in str(value).split(","):
            base = strip_tone_marks(item.strip())
            if base:
                syllables.add(base)

    syllables.update({s + "r" for s in syllables if not s.endswith("r")})
    syllables.update(EXTRA_VALID_SYLLABLES)
    return frozenset(syllables)


VALID_SYLLABLES = _collect_valid_syllables()


def is_valid_syllable(base: str) -> bool:
    """Return whether ``base`` (toneless, ``v``/``u:`` allowed) is valid Mandarin."""

    return strip_tone_marks(base) in VALID_SYLLABLES

"""Conversion between numbered pinyin (``ni3``) and tone-marked pinyin (``nǐ``)."""

from __future__ import annotations

import re
import unicodedata

VOWELS = ("a", "e", "i", "o", "u", "ü")

DIACRITICS = {
    "a": ("ā", "á", "ǎ", "à"),
    "e": ("ē", "é", "ě", "è"),
    "i": ("ī", "í", "ǐ", "ì"),
    "o": ("ō", "ó", "ǒ", "ò"),
    "u": ("ū", "ú", "ǔ", "ù"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ"),
}

# Reverse lookup: marked vowel -> (base vowel, tone).
TONE_MARKS = {
    marked: (base, tone)
    for base, variants in DIACRITICS.items()
    for tone, marked in enumerate(variants, start=1)
}

TONE_DIGIT_RE = re.compile(r"[1-5]")
NUMBERED_SYLLABLE_RE = re.compile(r"^(.*?)([0-5])$")


def normalize_umlaut(text: str) -> str:
    """Spell ``u:`` and ``v`` as ``ü``.

    Args:
        text: Pinyin text in any notation.

    Returns:
        Text where the ASCII stand-ins for ``ü`` are replaced.
    """

    text = text.replace("u:", "ü").replace("U:", "ü")
    return text.replace("v", "ü").replace("V", "ü")


def has_tone_digits(text: str) -> bool:
    """Return whether ``text`` contains a tone digit ``1``-``5``."""

    return TONE_DIGIT_RE.search(text) is not None


def has_diacritics(text: str) -> bool:
    """Return whether ``text`` contains a tone-marked vowel."""

    return any(ch in TONE_MARKS for ch in unicodedata.normalize("NFC", text))


def _tone_target_index(lower: str) -> int:
    """Locate the vowel carrying the tone mark, or ``-1`` when there is none."""

    if "a" in lower:
        return lower.index("a")
    if "e" in lower:
        return lower.index("e")
    if "ou" in lower:
        return lower.index("o")
    if "iu" in lower:
        return lower.index("iu") + 1
    # ui marks its second letter (huì), not the u as the written rule reads.
    if "ui" in lower:
        return lower.index("ui") + 1
    for idx in range(len(lower) - 1, -1, -1):
        if lower[idx] in VOWELS:
            return idx
    return -1


def mark_tone(syllable: str, tone: int) -> str:
    """Place the diacritic for ``tone`` on the nucleus vowel of ``syllable``.

    The nucleus is ``a`` or ``e`` when present, the ``o`` of ``ou``, the second
    letter of ``iu`` and ``ui``, and otherwise the last vowel. The substituted
    vowel is always lower case, even inside upper-case input.

    Args:
        syllable: One toneless syllable, ``v``/``u:`` accepted for ``ü``.
        tone: Tone number; ``0`` and ``5`` mean neutral.

    Returns:
        The tone-marked syllable, or ``syllable`` untouched for neutral tones
        and syllables without a vowel.
    """

    if tone in (0, 5):
        return syllable

    normalized = normalize_umlaut(syllable)
    lower = normalized.lower()
    target = _tone_target_index(lower)
    if target == -1 or not 1 <= tone <= 4:
        return syllable

    marked = DIACRITICS[lower[target]][tone - 1]
    return normalized[:target] + marked + normalized[target + 1 :]


def numeric_syllable_to_diacritic(syllable: str) -> str:
    """Convert one numbered syllable such as ``hao3`` to ``hǎo``.

    Syllables without a trailing tone digit are treated as already marked and
    only get their ``ü`` spelling normalized.
    """

    match = NUMBERED_SYLLABLE_RE.match(syllable)
    if match is None:
        return normalize_umlaut(syllable)
    return mark_tone(match.group(1), int(match.group(2)))


def numeric_string_to_diacritic(text: str) -> str:
    """Convert every whitespace-separated syllable of ``text`` to marked form.

    Args:
        text: Numbered, marked, or mixed pinyin.

    Returns:
        Marked pinyin joined by single spaces; empty tokens are dropped.
    """

    converted = (numeric_syllable_to_diacritic(token) for token in text.split())
    return " ".join(syllable for syllable in converted if syllable)


def diacritic_syllable_to_numeric(syllable: str) -> str:
    """Convert one marked syllable such as ``lǜ`` to ``lü4``.

    Unmarked syllables get the neutral tone ``5``; syllables that already end
    in a tone digit are returned lower-cased.
    """

    syllable = normalize_umlaut(unicodedata.normalize("NFC", syllable)).lower()
    if syllable and syllable[-1] in "012345":
        return syllable

    chars: list[str] = []
    tone = 5
    for ch in syllable:
        if ch in TONE_MARKS:
            base, tone = TONE_MARKS[ch]
            chars.append(base)
        else:
            chars.append(ch)
    return f"{''.join(chars)}{tone}"


def diacritic_string_to_numeric(text: str) -> str:
    """Convert space-separated marked pinyin to numbered pinyin.

    Each token is assumed to hold exactly one syllable; ``nǐ hǎo`` converts but
    ``nǐhǎo`` does not segment.
    """

    return " ".join(diacritic_syllable_to_numeric(token) for token in text.split())

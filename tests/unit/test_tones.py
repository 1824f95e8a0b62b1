"""Unit tests for numbered/tone-marked pinyin conversion."""

from __future__ import annotations

import pytest

from pinyin_drill.pinyin.tones import (
    diacritic_string_to_numeric,
    has_diacritics,
    has_tone_digits,
    mark_tone,
    normalize_umlaut,
    numeric_string_to_diacritic,
    numeric_syllable_to_diacritic,
)


@pytest.mark.parametrize(
    ("numbered", "marked"),
    [
        ("ni3", "nǐ"),
        ("hao3", "hǎo"),
        ("xie4", "xiè"),
        ("zhong1", "zhōng"),
        ("guo2", "guó"),
        ("xue2", "xué"),
        ("lou2", "lóu"),
        ("niu2", "niú"),
        ("liu4", "liù"),
        ("hui4", "huì"),
        ("gui4", "guì"),
        ("lve4", "lüè"),
        ("lu:e4", "lüè"),
        ("nv3", "nǚ"),
        ("er2", "ér"),
    ],
)
def test_numeric_syllable_to_diacritic_places_mark_on_nucleus(numbered: str, marked: str) -> None:
    assert numeric_syllable_to_diacritic(numbered) == marked


def test_iu_and_ui_mark_the_second_vowel() -> None:
    """Both ``iu`` and ``ui`` carry the tone on their second letter."""

    assert numeric_syllable_to_diacritic("niu2") == "niú"
    assert numeric_syllable_to_diacritic("niu2") != "nìu"
    assert numeric_syllable_to_diacritic("hui4") == "huì"
    assert numeric_syllable_to_diacritic("hui4") != "huí"


def test_mark_tone_neutral_and_vowelless_pass_through() -> None:
    assert mark_tone("ma", 5) == "ma"
    assert mark_tone("ma", 0) == "ma"
    assert mark_tone("ng", 3) == "ng"
    assert mark_tone("", 2) == ""


def test_mark_tone_keeps_surrounding_case_and_lowercases_vowel() -> None:
    """The substituted vowel is always lower case."""

    assert mark_tone("NI", 3) == "Nǐ"
    assert mark_tone("Hao", 3) == "Hǎo"


def test_numeric_string_to_diacritic_handles_spacing_and_mixed_input() -> None:
    assert numeric_string_to_diacritic("ni3 hao3") == "nǐ hǎo"
    assert numeric_string_to_diacritic("  ni3   hǎo ") == "nǐ hǎo"
    assert numeric_string_to_diacritic("xie4 xie5") == "xiè xie"
    assert numeric_string_to_diacritic("") == ""


def test_numeric_string_to_diacritic_is_idempotent_on_marked_text() -> None:
    marked = "nǐ hǎo lǜ"
    assert numeric_string_to_diacritic(marked) == marked
    assert numeric_string_to_diacritic("lv") == "lü"


def test_helpers_detect_notation() -> None:
    assert has_tone_digits("ni3")
    assert not has_tone_digits("ni0 hao")
    assert has_diacritics("nǐ")
    assert not has_diacritics("ni")
    assert normalize_umlaut("nu:3 lv4") == "nü3 lü4"


def test_diacritic_string_to_numeric() -> None:
    assert diacritic_string_to_numeric("nǐ hǎo") == "ni3 hao3"
    assert diacritic_string_to_numeric("lǜ") == "lü4"
    assert diacritic_string_to_numeric("xiè xie") == "xie4 xie5"
    assert diacritic_string_to_numeric("ni3") == "ni3"


def test_numeric_string_to_diacritic_drops_bare_tone_digits() -> None:
    """A stray digit token converts to nothing and leaves no extra space."""

    assert numeric_string_to_diacritic("ni3 3") == "nǐ"
    assert numeric_string_to_diacritic("3 hao3") == "hǎo"

"""Matching of typed French translations against slash-separated glosses."""

from __future__ import annotations

import re
import unicodedata

APOSTROPHES = ("'", "’", "‘")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_french(text: str) -> str:
    """Normalize French text for lenient comparison.

    Apostrophes become spaces, accents are dropped and whitespace collapses.
    Punctuation other than apostrophes is kept, so ``bien!`` differs from
    ``bien``.
    """

    text = text.strip().lower()
    for mark in APOSTROPHES:
        text = text.replace(mark, " ")
    decomposed = unicodedata.normalize("NFD", text)
    text = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return WHITESPACE_RE.sub(" ", text).strip()


def split_alternatives(expected: str) -> list[str]:
    """Split a gloss such as ``tu/toi`` into its accepted alternatives."""

    return expected.split("/")


def check_french_answer(raw_input: str, expected: str) -> bool:
    """Return whether ``raw_input`` is an accepted translation of ``expected``.

    Args:
        raw_input: Text typed by the learner.
        expected: Gloss, possibly listing alternatives separated by ``/``.

    Returns:
        ``True`` when the input equals one alternative, all alternatives
        joined by spaces in their original order, or the gloss as written.
    """

    answer = normalize_french(raw_input)
    if answer == normalize_french(expected):
        return True
    alternatives = [normalize_french(item) for item in split_alternatives(expected)]
    if answer in alternatives:
        return True
    if len(alternatives) > 1:
        return answer == normalize_french(" ".join(alternatives))
    return False


def format_for_display(expected: str) -> str:
    """Render a slash-separated gloss as one readable phrase."""

    return expected.replace("/", " ")

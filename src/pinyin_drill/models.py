"""Data models shared by the drilling core.

Vocabulary entries are loaded once per session and never mutated; every derived
structure (index, question, verdict) is rebuilt rather than updated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class VocabularyEntry:
    """One vocabulary item as supplied by the word list.

    ``pinyin`` is the diacritic spelling (``nǐ hǎo``) and ``numeric`` the
    numbered spelling of the same pronunciation (``ni3 hao3``). ``fr`` may list
    several accepted translations separated by ``/``.
    """

    id: str
    hanzi: str
    pinyin: str
    numeric: str
    fr: str
    series: int | None = None
    pinyin_details: str = ""
    fr_details: str = ""
    audio_url: str = ""


@dataclass(frozen=True)
class MatchVerdict:
    """Outcome of comparing a typed pinyin answer to the expected spelling."""

    matched: bool
    corrected_display: str
    used_numeric_tone_notation: bool = False
    missing_tone_markers: bool = False

    @property
    def advisories(self) -> tuple[str, ...]:
        """Return the names of the advisory flags that are set."""

        flags: list[str] = []
        if self.used_numeric_tone_notation:
            flags.append("used_numeric_tone_notation")
        if self.missing_tone_markers:
            flags.append("missing_tone_markers")
        return tuple(flags)


@dataclass(frozen=True)
class PinyinIndex:
    """Pronunciation key to entry ids sharing that key.

    Keys are diacritic ``pinyin`` strings and lower-cased ``numeric`` strings.
    """

    keys: Mapping[str, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))

    def lookup(self, key: str) -> frozenset[str]:
        """Return ids registered under ``key`` or an empty set."""

        return self.keys.get(key, frozenset())

    def homophone_groups(self) -> dict[str, frozenset[str]]:
        """Return only the keys shared by more than one entry."""

        return {key: ids for key, ids in self.keys.items() if len(ids) > 1}


@dataclass(frozen=True)
class ConsistencyIssue:
    """Data-quality problem found in one vocabulary entry."""

    entry_id: str
    kind: str
    message: str


class QuestionMode(str, Enum):
    """Which field is shown as the hint; the other two are asked for."""

    HANZI = "hanzi"
    PINYIN = "pinyin"
    TRANSLATION = "translation"


@dataclass(frozen=True)
class Question:
    """A single quiz question with its multiple-choice set."""

    entry: VocabularyEntry
    mode: QuestionMode
    choices: tuple[VocabularyEntry, ...]
    accepted_ids: frozenset[str]

    @property
    def hint(self) -> str:
        if self.mode is QuestionMode.HANZI:
            return self.entry.hanzi
        if self.mode is QuestionMode.PINYIN:
            return self.entry.pinyin
        return self.entry.fr


@dataclass(frozen=True)
class Feedback:
    """Graded answer with user-facing messages in display order."""

    correct: bool
    messages: tuple[str, ...] = ()
    pinyin_verdict: MatchVerdict | None = None

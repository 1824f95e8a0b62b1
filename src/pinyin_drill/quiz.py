"""Question generation and answer grading for the vocabulary drill.

Each question shows one field of an entry (hanzi, pinyin or French) and asks for
the other two: typed French and/or pinyin, and a hanzi picked among a shuffled
choice set. Hanzi picks are graded against the homophone set of the entry, so a
character sharing the exact pronunciation is accepted as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import random
from typing import Sequence

from pinyin_drill.matching.french_answer import check_french_answer, format_for_display
from pinyin_drill.matching.pinyin_answer import check_pinyin_answer
from pinyin_drill.models import Feedback, PinyinIndex, Question, QuestionMode, VocabularyEntry
from pinyin_drill.vocab.choices import DEFAULT_CHOICE_COUNT, pick_random, sample_choices, shuffle
from pinyin_drill.vocab.index import accepted_ids_for, build_pinyin_index

MSG_EXPECTED_FRENCH = 'Traduction attendue : "{expected}"'
MSG_MISSING_TONES = "Le pinyin doit inclure les tons (accents ou chiffres)."
MSG_EXPECTED_PINYIN = 'Pinyin attendu : "{pinyin}" (toléré en numérique : "{numeric}")'
MSG_NUMERIC_NOTATION = '✔ Pinyin correct (numérique). Forme accentuée : "{corrected}".'
MSG_WRONG_HANZI = "Mauvais caractère choisi."

EXPECTS_FRENCH = {QuestionMode.HANZI, QuestionMode.PINYIN}
EXPECTS_PINYIN = {QuestionMode.HANZI, QuestionMode.TRANSLATION}
EXPECTS_HANZI = {QuestionMode.PINYIN, QuestionMode.TRANSLATION}


def build_question(
    entry: VocabularyEntry,
    pool: Sequence[VocabularyEntry],
    index: PinyinIndex,
    rng: random.Random | None = None,
    count: int = DEFAULT_CHOICE_COUNT,
    mode: QuestionMode | None = None,
) -> Question:
    """Build a question for ``entry`` with distractors drawn from ``pool``.

    Args:
        entry: Entry being asked.
        pool: Active entry subset used for the hanzi choice set.
        index: Homophone index built over ``pool``.
        rng: Random source for mode and choice ordering.
        count: Size of the hanzi choice set.
        mode: Forced hint mode; random when omitted.

    Returns:
        Question with its choice set and accepted hanzi ids.
    """

    if mode is None:
        mode = pick_random(list(QuestionMode), rng)
    return Question(
        entry=entry,
        mode=mode,
        choices=tuple(sample_choices(entry, pool, count=count, rng=rng)),
        accepted_ids=accepted_ids_for(entry, index),
    )


def new_question(
    entries: Sequence[VocabularyEntry],
    rng: random.Random | None = None,
    count: int = DEFAULT_CHOICE_COUNT,
    mode: QuestionMode | None = None,
    index: PinyinIndex | None = None,
) -> Question:
    """Draw a random entry and build a question around it.

    Args:
        entries: Active entry subset.
        rng: Random source for entry, mode and choice ordering.
        count: Size of the hanzi choice set.
        mode: Forced hint mode; random when omitted.
        index: Index already built over ``entries``; built here when omitted.

    Returns:
        Question with its choice set and accepted hanzi ids.

    Raises:
        ValueError: If ``entries`` is empty.
    """

    if not entries:
        raise ValueError("Cannot build a question from an empty word list.")

    if index is None:
        index = build_pinyin_index(entries)
    entry = pick_random(entries, rng)
    return build_question(entry, entries, index, rng=rng, count=count, mode=mode)


def grade_answer(
    question: Question,
    french: str = "",
    pinyin: str = "",
    selected_id: str | None = None,
) -> Feedback:
    """Grade the parts of an answer the question mode asks for.

    Args:
        question: Question being answered.
        french: Typed translation, ignored in ``TRANSLATION`` mode.
        pinyin: Typed pinyin, ignored in ``PINYIN`` mode.
        selected_id: Id of the picked hanzi choice, ignored in ``HANZI`` mode.

    Returns:
        Feedback with overall correctness and messages in display order.
    """

    entry = question.entry
    messages: list[str] = []
    correct = True
    verdict = None

    if question.mode in EXPECTS_FRENCH and not check_french_answer(french, entry.fr):
        correct = False
        messages.append(MSG_EXPECTED_FRENCH.format(expected=format_for_display(entry.fr)))

    if question.mode in EXPECTS_PINYIN:
        verdict = check_pinyin_answer(pinyin.strip(), entry.pinyin)
        if not verdict.matched:
            correct = False
            if verdict.missing_tone_markers:
                messages.append(MSG_MISSING_TONES)
            messages.append(MSG_EXPECTED_PINYIN.format(pinyin=entry.pinyin, numeric=entry.numeric))
        elif verdict.used_numeric_tone_notation:
            messages.append(MSG_NUMERIC_NOTATION.format(corrected=verdict.corrected_display))

    if question.mode in EXPECTS_HANZI and selected_id not in question.accepted_ids:
        correct = False
        messages.append(MSG_WRONG_HANZI)

    return Feedback(correct=correct, messages=tuple(messages), pinyin_verdict=verdict)


@dataclass
class QuizSession:
    """One drill round over a shuffled, optionally capped, list of entries.

    Entries are asked once each in the dealt order. The homophone index is built
    once over ``entries`` and reused for every question; distractors come from
    the whole of ``entries`` even when replaying mistakes.
    """

    entries: tuple[VocabularyEntry, ...]
    max_questions: int | None = None
    rng: random.Random | None = None
    count: int = DEFAULT_CHOICE_COUNT
    score: int = field(default=0, init=False)
    answered: int = field(default=0, init=False)
    mistakes: list[VocabularyEntry] = field(default_factory=list, init=False)
    order: list[VocabularyEntry] = field(default_factory=list, init=False)
    position: int = field(default=0, init=False)
    index: PinyinIndex = field(default_factory=PinyinIndex, init=False)
    _round: tuple[VocabularyEntry, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)
        self.index = build_pinyin_index(self.entries)
        limit = len(self.entries)
        if self.max_questions is not None:
            limit = max(0, min(limit, self.max_questions))
        self._round = tuple(shuffle(self.entries, self.rng)[:limit])
        self._deal(self._round)

    def _deal(self, entries: Sequence[VocabularyEntry]) -> None:
        self.order = shuffle(entries, self.rng)
        self.position = 0
        self.score = 0
        self.answered = 0
        self.mistakes = []

    @property
    def finished(self) -> bool:
        return self.position >= len(self.order)

    @property
    def current(self) -> VocabularyEntry | None:
        if self.finished:
            return None
        return self.order[self.position]

    def next_question(self, mode: QuestionMode | None = None) -> Question:
        """Build the question for the current entry of the round.

        Raises:
            ValueError: If the round is finished.
        """

        entry = self.current
        if entry is None:
            raise ValueError("The round is finished; restart or replay mistakes.")
        return build_question(
            entry, self.entries, self.index, rng=self.rng, count=self.count, mode=mode
        )

    def record(self, question: Question, feedback: Feedback) -> None:
        """Count one graded answer and move to the next entry.

        Missed entries are remembered once each for :meth:`replay_mistakes`.
        """

        self.answered += 1
        self.position += 1
        if feedback.correct:
            self.score += 1
            return
        if all(item.id != question.entry.id for item in self.mistakes):
            self.mistakes.append(question.entry)

    def restart(self) -> None:
        """Reshuffle the same round and reset score and mistakes."""

        self._deal(self._round)

    def replay_mistakes(self) -> bool:
        """Start a new round made only of the missed entries.

        Returns:
            ``False`` (and nothing changes) when there is no mistake to replay.
        """

        if not self.mistakes:
            return False
        self._deal(list(self.mistakes))
        return True

    @property
    def ratio(self) -> float:
        if not self.answered:
            return 0.0
        return self.score / self.answered

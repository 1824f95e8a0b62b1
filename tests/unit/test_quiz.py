"""Unit tests for question generation and answer grading."""

from __future__ import annotations

import random

import pytest

from pinyin_drill.models import Feedback, Question, QuestionMode, VocabularyEntry
from pinyin_drill.quiz import (
    MSG_MISSING_TONES,
    MSG_WRONG_HANZI,
    QuizSession,
    grade_answer,
    new_question,
)
from pinyin_drill.vocab.index import build_pinyin_index

NI = VocabularyEntry(id="1", hanzi="你", pinyin="nǐ", numeric="ni3", fr="tu/toi")
SHI_BE = VocabularyEntry(id="5", hanzi="是", pinyin="shì", numeric="shi4", fr="être")
SHI_THING = VocabularyEntry(id="6", hanzi="事", pinyin="shì", numeric="shi4", fr="affaire")
HAO = VocabularyEntry(id="2", hanzi="好", pinyin="hǎo", numeric="hao3", fr="bien")
ENTRIES = (NI, SHI_BE, SHI_THING, HAO)


def _question(entry: VocabularyEntry, mode: QuestionMode) -> Question:
    others = frozenset({"5", "6"}) if entry.pinyin == "shì" else frozenset({entry.id})
    return Question(entry=entry, mode=mode, choices=ENTRIES, accepted_ids=others)


def test_new_question_builds_choices_and_homophone_set() -> None:
    rng = random.Random(11)

    for _ in range(20):
        question = new_question(ENTRIES, rng=rng)
        assert question.entry in ENTRIES
        assert len(question.choices) == 4
        assert question.entry.id in question.accepted_ids
        if question.entry.pinyin == "shì":
            assert question.accepted_ids == {"5", "6"}


def test_new_question_respects_forced_mode_and_rejects_empty_list() -> None:
    question = new_question(ENTRIES, rng=random.Random(1), mode=QuestionMode.PINYIN)

    assert question.mode is QuestionMode.PINYIN
    assert question.hint == question.entry.pinyin
    with pytest.raises(ValueError, match="empty word list"):
        new_question([])


def test_hint_follows_mode() -> None:
    assert _question(NI, QuestionMode.HANZI).hint == "你"
    assert _question(NI, QuestionMode.TRANSLATION).hint == "tu/toi"


def test_hanzi_mode_grades_french_and_pinyin() -> None:
    question = _question(NI, QuestionMode.HANZI)

    ok = grade_answer(question, french="toi", pinyin="ni3")
    assert ok.correct
    assert ok.messages == ('✔ Pinyin correct (numérique). Forme accentuée : "nǐ".',)
    assert ok.pinyin_verdict is not None and ok.pinyin_verdict.used_numeric_tone_notation

    bad = grade_answer(question, french="vous", pinyin="ni")
    assert not bad.correct
    assert bad.messages == (
        'Traduction attendue : "tu toi"',
        MSG_MISSING_TONES,
        'Pinyin attendu : "nǐ" (toléré en numérique : "ni3")',
    )


def test_pinyin_mode_accepts_homophone_character() -> None:
    question = _question(SHI_BE, QuestionMode.PINYIN)

    assert grade_answer(question, french="être", selected_id="6").correct
    feedback = grade_answer(question, french="etre", selected_id="1")
    assert not feedback.correct
    assert feedback.messages == (MSG_WRONG_HANZI,)
    assert feedback.pinyin_verdict is None


def test_translation_mode_ignores_french() -> None:
    question = _question(HAO, QuestionMode.TRANSLATION)

    feedback = grade_answer(question, french="nimporte", pinyin="hǎo", selected_id="2")

    assert feedback.correct
    assert feedback.messages == ()
    assert not grade_answer(question, pinyin="hǎo").correct


def test_new_question_reuses_prebuilt_index() -> None:
    """A supplied index decides the accepted ids instead of a fresh one."""

    index = build_pinyin_index([SHI_BE, SHI_THING])

    question = new_question([SHI_BE], rng=random.Random(3), index=index)

    assert question.accepted_ids == {"5", "6"}


def _answer(session: QuizSession, correct: bool) -> None:
    question = session.next_question()
    session.record(question, Feedback(correct=correct))


def test_session_walks_entries_once_then_finishes() -> None:
    session = QuizSession(entries=ENTRIES, rng=random.Random(8))

    seen = []
    while not session.finished:
        seen.append(session.current.id)
        _answer(session, correct=True)

    assert sorted(seen) == ["1", "2", "5", "6"]
    assert session.current is None
    assert session.score == 4
    assert session.ratio == 1.0
    with pytest.raises(ValueError, match="round is finished"):
        session.next_question()


def test_session_caps_round_at_max_questions() -> None:
    session = QuizSession(entries=ENTRIES, max_questions=2, rng=random.Random(1))

    _answer(session, correct=True)
    _answer(session, correct=True)

    assert session.finished
    assert session.answered == 2
    assert session.index.lookup("shi4") == {"5", "6"}


def test_session_tracks_score_and_unique_mistakes() -> None:
    session = QuizSession(entries=(NI,), rng=random.Random(0))
    question = session.next_question(QuestionMode.HANZI)

    session.record(question, grade_answer(question, french="", pinyin=""))
    session.record(question, grade_answer(question, french="", pinyin=""))

    assert session.score == 0
    assert session.answered == 2
    assert session.mistakes == [NI]
    assert QuizSession(entries=()).ratio == 0.0
    assert QuizSession(entries=()).finished


def test_restart_reshuffles_same_round_and_resets_score() -> None:
    session = QuizSession(entries=ENTRIES, max_questions=3, rng=random.Random(4))
    first_round = {entry.id for entry in session.order}
    while not session.finished:
        _answer(session, correct=False)

    session.restart()

    assert {entry.id for entry in session.order} == first_round
    assert not session.finished
    assert (session.score, session.answered, session.mistakes) == (0, 0, [])


def test_replay_mistakes_starts_round_of_missed_entries() -> None:
    session = QuizSession(entries=ENTRIES, rng=random.Random(6))
    missed = set()
    for turn in range(4):
        if turn % 2:
            missed.add(session.current.id)
        _answer(session, correct=not turn % 2)

    assert session.replay_mistakes()
    assert {entry.id for entry in session.order} == missed
    assert session.score == 0 and session.mistakes == []

    while not session.finished:
        _answer(session, correct=True)
    assert not session.replay_mistakes()
    assert session.finished

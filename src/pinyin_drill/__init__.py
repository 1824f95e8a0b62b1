"""Mandarin vocabulary drilling core: pinyin codec, answer matchers and quiz helpers."""

from .models import Feedback, MatchVerdict, PinyinIndex, Question, QuestionMode, VocabularyEntry

__all__ = [
    "VocabularyEntry",
    "MatchVerdict",
    "PinyinIndex",
    "Question",
    "QuestionMode",
    "Feedback",
]

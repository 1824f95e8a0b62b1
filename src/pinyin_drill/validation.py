"""Load-time validation of word lists.

Authored word lists carry the same pronunciation twice (``pinyin`` and
``numeric``). Nothing downstream re-checks that the two agree, so mismatches are
reported here, together with malformed numbered syllables and duplicate ids.
"""

from __future__ import annotations

from collections import Counter
import logging
import re
from typing import Sequence

from pinyin_drill.matching.pinyin_answer import canonical_pinyin
from pinyin_drill.models import ConsistencyIssue, VocabularyEntry
from pinyin_drill.pinyin.syllables import is_valid_syllable
from pinyin_drill.pinyin.tones import diacritic_string_to_numeric, normalize_umlaut

logger = logging.getLogger(__name__)

NUMBERED_TOKEN_RE = re.compile(r"^([a-zü]+)([0-5])$")
UNGROUPED_SERIES = "-"
MAX_PREVIEW = 25


def _numeric_token_issues(entry: VocabularyEntry) -> list[ConsistencyIssue]:
    """Check each numbered token for shape and syllable validity."""

    issues: list[ConsistencyIssue] = []
    for token in entry.numeric.split():
        match = NUMBERED_TOKEN_RE.fullmatch(normalize_umlaut(token).lower())
        if match is None:
            issues.append(
                ConsistencyIssue(
                    entry.id, "numeric_token", f"invalid numeric token '{token}'"
                )
            )
        elif not is_valid_syllable(match.group(1)):
            issues.append(
                ConsistencyIssue(
                    entry.id, "numeric_syllable", f"unknown syllable '{match.group(1)}' in '{token}'"
                )
            )
    return issues


def find_consistency_issues(entries: Sequence[VocabularyEntry]) -> list[ConsistencyIssue]:
    """Collect data-quality issues for a word list and log each one.

    Args:
        entries: Loaded entries.

    Returns:
        Issues in entry order; empty when the list is clean.
    """

    issues: list[ConsistencyIssue] = []
    id_counts = Counter(entry.id for entry in entries)
    reported_duplicates: set[str] = set()

    for entry in entries:
        if id_counts[entry.id] > 1 and entry.id not in reported_duplicates:
            reported_duplicates.add(entry.id)
            issues.append(
                ConsistencyIssue(
                    entry.id, "duplicate_id", f"id used by {id_counts[entry.id]} entries"
                )
            )

        for name in ("hanzi", "pinyin", "fr"):
            if not getattr(entry, name).strip():
                issues.append(ConsistencyIssue(entry.id, "empty_field", f"empty {name}"))

        if not entry.numeric.strip() or not entry.pinyin.strip():
            continue

        token_issues = _numeric_token_issues(entry)
        issues.extend(token_issues)
        if token_issues:
            continue

        if canonical_pinyin(entry.numeric) != canonical_pinyin(entry.pinyin):
            issues.append(
                ConsistencyIssue(
                    entry.id,
                    "pinyin_mismatch",
                    f"numeric '{entry.numeric}' does not match pinyin '{entry.pinyin}' "
                    f"(expected numeric '{diacritic_string_to_numeric(entry.pinyin)}')",
                )
            )

    for issue in issues:
        logger.warning("Entry %s: %s", issue.entry_id, issue.message)
    return issues


def validate_entries(
    entries: Sequence[VocabularyEntry], strict: bool = False
) -> list[ConsistencyIssue]:
    """Validate a word list, optionally failing on any issue.

    Args:
        entries: Loaded entries.
        strict: Whether issues raise instead of being returned.

    Returns:
        Issues found (always empty in strict mode).

    Raises:
        ValueError: In strict mode, when at least one issue exists.
    """

    issues = find_consistency_issues(entries)
    if issues and strict:
        preview = "\n".join(
            f"- Entry {item.entry_id}: {item.message}" for item in issues[:MAX_PREVIEW]
        )
        rest = len(issues) - min(MAX_PREVIEW, len(issues))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(
            f"Word list validation failed with {len(issues)} errors:\n{preview}{more}"
        )
    return issues


def collect_series_counts(entries: Sequence[VocabularyEntry]) -> dict[str, int]:
    """Count entries by series label, ungrouped entries under ``-``."""

    counter: Counter[str] = Counter()
    for entry in entries:
        counter[UNGROUPED_SERIES if entry.series is None else str(entry.series)] += 1
    return dict(counter)

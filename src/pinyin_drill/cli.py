"""CLI entrypoint for checking word lists and trying the pinyin matcher."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pinyin_drill.io.wordlist_io import load_words
from pinyin_drill.matching.pinyin_answer import check_pinyin_answer
from pinyin_drill.pinyin.tones import numeric_string_to_diacritic
from pinyin_drill.validation import UNGROUPED_SERIES, collect_series_counts, validate_entries
from pinyin_drill.vocab.index import build_pinyin_index
from pinyin_drill.vocab.series import filter_by_series, parse_series_selection, series_options


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the word-list check command.
    """

    parser = argparse.ArgumentParser(
        description="Validate a vocabulary word list and try pinyin answer checks."
    )
    parser.add_argument(
        "--words", required=True, type=Path, help="Path to the word list (.json or .tsv)."
    )
    parser.add_argument(
        "--series",
        default=None,
        help="Comma-separated series numbers to keep (default: all).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the word list has consistency issues.",
    )
    parser.add_argument(
        "--convert",
        default=None,
        help="Numbered pinyin to print in tone-marked form, e.g. 'ni3 hao3'.",
    )
    parser.add_argument(
        "--check-pinyin",
        nargs=2,
        metavar=("INPUT", "EXPECTED"),
        default=None,
        help="Check a typed pinyin answer against an expected tone-marked spelling.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    return parser


def _print_summary(entries, issues) -> None:
    """Print series counts, homophone groups and the issue total."""

    if not entries:
        print("No entries selected; skipping summary.")
        return

    series_counts = collect_series_counts(entries)
    series_rows = [
        [label, str(series_counts[label])]
        for label in sorted(
            series_counts, key=lambda v: (v == UNGROUPED_SERIES, int(v) if v.isdigit() else 0)
        )
    ]
    print("\nEntries by series:")
    print(_format_table(["series", "word_count"], series_rows))

    hanzi_by_id = {entry.id: entry.hanzi for entry in entries}
    groups = build_pinyin_index(entries).homophone_groups()
    if groups:
        group_rows = [
            [key, " ".join(sorted(hanzi_by_id[item] for item in ids))]
            for key, ids in sorted(groups.items())
        ]
        print("\nHomophone groups:")
        print(_format_table(["pronunciation", "hanzi"], group_rows))

    print(f"\nConsistency issues: {len(issues)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through printed summaries.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.words.exists():
        raise SystemExit(f"Word list not found: {args.words}")

    try:
        selection = parse_series_selection(args.series)
        all_entries = load_words(args.words)
        entries = filter_by_series(all_entries, selection)
        issues = validate_entries(entries, strict=args.strict)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(f"Loaded {len(entries)} entries from {args.words}")
    available = ", ".join(str(series) for series in series_options(all_entries))
    print(f"Available series: {available or 'none'}")
    _print_summary(entries, issues)

    if args.convert is not None:
        print(f"\n{args.convert} -> {numeric_string_to_diacritic(args.convert)}")

    if args.check_pinyin is not None:
        raw_input, expected = args.check_pinyin
        verdict = check_pinyin_answer(raw_input, expected)
        advisories = ", ".join(verdict.advisories) or "none"
        print(
            f"\nmatched={verdict.matched} corrected='{verdict.corrected_display}' "
            f"advisories={advisories}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

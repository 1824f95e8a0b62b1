"""Word-list read/write helpers (JSON arrays and TSV tables)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Sequence

from pinyin_drill.models import VocabularyEntry

TSV_HEADER = ["id", "series", "hanzi", "pinyin", "numeric", "fr"]
SUPPORTED_SUFFIXES = (".json", ".tsv")
REQUIRED_FIELDS = ("id", "hanzi", "pinyin", "fr")

# Word lists exported by the mobile app use camelCase keys.
FIELD_ALIASES = {
    "pinyinDetails": "pinyin_details",
    "frDetails": "fr_details",
    "audioUrl": "audio_url",
}


def _parse_series(value: Any, row_label: str) -> int | None:
    """Convert a raw ``series`` cell to ``int`` or ``None``.

    Raises:
        ValueError: If a non-empty value is not an integer.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{row_label}: invalid series '{value}'") from exc


def entry_from_mapping(record: Mapping[str, Any], row_label: str) -> VocabularyEntry:
    """Build a :class:`VocabularyEntry` from one JSON object or TSV row.

    Args:
        record: Field mapping; camelCase and snake_case detail keys are accepted.
        row_label: Row description used in error messages.

    Returns:
        Parsed entry with string fields stripped.

    Raises:
        ValueError: If a required field is missing or empty.
    """

    data = {FIELD_ALIASES.get(key, key): value for key, value in record.items()}
    missing = [
        name
        for name in REQUIRED_FIELDS
        if data.get(name) is None or not str(data[name]).strip()
    ]
    if missing:
        raise ValueError(f"{row_label}: missing required field(s) {', '.join(missing)}")

    def text(name: str) -> str:
        value = data.get(name)
        return "" if value is None else str(value).strip()

    return VocabularyEntry(
        id=text("id"),
        hanzi=text("hanzi"),
        pinyin=text("pinyin"),
        numeric=text("numeric"),
        fr=text("fr"),
        series=_parse_series(data.get("series"), row_label),
        pinyin_details=text("pinyin_details"),
        fr_details=text("fr_details"),
        audio_url=text("audio_url"),
    )


def _read_json(path: Path) -> list[Mapping[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"Word list {path} must contain a JSON array.")
    return payload


def _read_tsv(path: Path) -> list[Mapping[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        lines = [line.rstrip("\n") for line in handle]

    lines = [line for line in lines if line.strip() and not line.lstrip().startswith("#")]
    if not lines:
        return []

    header = [cell.strip() for cell in lines[0].split("\t")]
    rows: list[Mapping[str, Any]] = []
    for line in lines[1:]:
        cells = [cell.strip() for cell in line.split("\t")]
        rows.append(dict(zip(header, cells)))
    return rows


def load_words(path: Path) -> tuple[VocabularyEntry, ...]:
    """Load vocabulary entries from a ``.json`` or ``.tsv`` word list.

    Args:
        path: Word-list file path.

    Returns:
        Entries in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the format is unsupported or a row is malformed.
    """

    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        records = _read_json(path)
    elif suffix == ".tsv":
        records = _read_tsv(path)
    else:
        supported = ", ".join(SUPPORTED_SUFFIXES)
        raise ValueError(f"Unsupported word list format '{suffix}' (expected {supported}).")

    entries: list[VocabularyEntry] = []
    for idx, record in enumerate(records, start=1):
        if not isinstance(record, Mapping):
            raise ValueError(f"Row {idx}: expected an object, got {type(record).__name__}")
        entries.append(entry_from_mapping(record, row_label=f"Row {idx}"))
    return tuple(entries)


def write_tsv(
    entries: Sequence[VocabularyEntry], output_path: Path, include_header: bool = True
) -> None:
    """Write entries to a TSV file using the canonical column order.

    Args:
        entries: Entries to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for entry in entries:
            handle.write(
                "\t".join(
                    [
                        entry.id,
                        "" if entry.series is None else str(entry.series),
                        entry.hanzi,
                        entry.pinyin,
                        entry.numeric,
                        entry.fr,
                    ]
                )
            )
            handle.write("\n")

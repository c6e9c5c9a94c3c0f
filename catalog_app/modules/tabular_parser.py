"""Tolerant, quote-aware reader for the comma separated catalog table.

The catalog is published as a hand-edited spreadsheet export, so the reader
favours a best-effort result over strictness: blank lines are dropped, short
rows are padded, long rows are truncated and an unterminated quote simply runs
to the end of its line. Nothing in here raises for malformed text; the only
rejected input is a missing payload (``None``), which is a caller bug.

The helpers are free of Streamlit imports so they can be exercised directly
from unit tests.
"""

from __future__ import annotations

import logging
import re

from .schema import to_canonical_record

LOGGER = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'
_BOM = "\ufeff"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

Record = dict[str, str]


def _logical_lines(raw_text: str) -> list[str]:
    """Return the non-blank lines of ``raw_text`` in order."""

    return [line for line in _LINE_BREAK.split(raw_text) if line.strip()]


def split_row(line: str) -> list[str]:
    """Split ``line`` into trimmed cells honouring double-quoted fields.

    Inside quotes a comma is literal and ``""`` stands for one quote
    character. A quote that is never closed keeps the rest of the line in the
    current cell.
    """

    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if char == QUOTE:
            if in_quotes and index + 1 < length and line[index + 1] == QUOTE:
                current.append(QUOTE)
                index += 2
                continue
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        index += 1

    cells.append("".join(current).strip())
    return cells


def _row_to_record(headers: list[str], cells: list[str]) -> Record:
    record: Record = {}
    for position, name in enumerate(headers):
        value = cells[position] if position < len(cells) else ""
        record.setdefault(name, value)
    return record


def parse_table(raw_text: str) -> tuple[Record, ...]:
    """Parse ``raw_text`` into records keyed by the header row.

    Returns an empty tuple when the text has no header or no data rows.

    Raises:
        TypeError: If ``raw_text`` is not a string.
    """

    if not isinstance(raw_text, str):
        raise TypeError(f"parse_table expects str, got {type(raw_text).__name__}")

    lines = _logical_lines(raw_text.lstrip(_BOM))
    if not lines:
        LOGGER.info("Catalog text is empty; no records parsed")
        return ()

    headers = split_row(lines[0])
    records: list[Record] = []
    for line_number, line in enumerate(lines[1:], start=2):
        cells = split_row(line)
        if not any(cells):
            LOGGER.debug("Skipping row %d without cell content", line_number)
            continue
        if len(cells) > len(headers):
            LOGGER.debug(
                "Row %d has %d cells for %d headers; extra cells dropped",
                line_number,
                len(cells),
                len(headers),
            )
        records.append(_row_to_record(headers, cells))

    if not records:
        LOGGER.info("Catalog text has a header but no data rows")
    return tuple(records)


def parse_catalog(raw_text: str) -> tuple[Record, ...]:
    """Parse ``raw_text`` and map every row onto the canonical record shape."""

    records = tuple(to_canonical_record(row) for row in parse_table(raw_text))
    LOGGER.info("Parsed %d catalog records", len(records))
    return records


__all__ = [
    "DELIMITER",
    "QUOTE",
    "Record",
    "split_row",
    "parse_table",
    "parse_catalog",
]

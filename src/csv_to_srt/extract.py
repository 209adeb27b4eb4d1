"""Row classification and subtitle extraction."""

import logging
from typing import Iterable

from .models import RowFormat, SubtitleEntry
from .timecode import convert_time, is_timecode

logger = logging.getLogger(__name__)

# Column positions (start, end, text) for each layout
COLUMNS = {
    RowFormat.THREE_COLUMN: (0, 1, 2),
    RowFormat.FOUR_COLUMN: (1, 2, 3),
}


def is_header_row(fields: list[str]) -> bool:
    """Check if a row is a column header line (3- or 4-column)."""
    row_text = ",".join(fields).lower()
    if "speaker name" in row_text:
        return True
    return "start time" in row_text and "end time" in row_text


def is_skippable_row(fields: list[str]) -> bool:
    """Check if a row is empty, blank or a header."""
    if not fields or not "".join(fields).strip():
        return True
    return is_header_row(fields)


def classify_row(fields: list[str]) -> RowFormat | None:
    """Detect the column layout of a row.

    A row whose first field is a timecode is start/end/text; otherwise the
    first field is taken as a speaker name. Extra trailing columns are allowed.

    Returns:
        The detected RowFormat, or None if the row should be skipped
    """
    if is_skippable_row(fields):
        return None

    first_is_time = is_timecode(fields[0])
    if first_is_time and len(fields) >= 3:
        return RowFormat.THREE_COLUMN
    if not first_is_time and len(fields) >= 4:
        return RowFormat.FOUR_COLUMN
    return None


def extract_entry(fields: list[str]) -> SubtitleEntry | None:
    """Build a subtitle entry from a parsed row.

    Returns:
        SubtitleEntry, or None if the row is skipped, has an invalid timecode
        or has blank text
    """
    row_format = classify_row(fields)
    if row_format is None:
        return None

    start_col, end_col, text_col = COLUMNS[row_format]
    start = convert_time(fields[start_col])
    end = convert_time(fields[end_col])
    text = fields[text_col]

    if not start or not end or not text.strip():
        return None

    return SubtitleEntry(start=start, end=end, text=text)


def extract_entries(rows: Iterable[list[str]]) -> list[SubtitleEntry]:
    """Extract subtitle entries from rows, keeping source order."""
    entries = []
    skipped = 0

    for row_no, fields in enumerate(rows, start=1):
        entry = extract_entry(fields)
        if entry is None:
            skipped += 1
            logger.debug("Skipping row %d: %r", row_no, fields)
            continue
        entries.append(entry)

    logger.debug("Extracted %d entries, skipped %d rows", len(entries), skipped)
    return entries

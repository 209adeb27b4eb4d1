"""Tokenizer for comma- and tab-delimited subtitle exports.

Spreadsheet copy/paste produces tab-separated text while caption exports are
usually comma-separated, so both delimiters are accepted, even within one row.
Quoted fields may contain delimiters, doubled quotes and line breaks.
"""

QUOTE = '"'
DELIMITERS = (",", "\t")
LINE_BREAKS = ("\n", "\r")


def normalize_line_endings(text: str) -> str:
    """Canonicalize Windows (\\r\\n) and old Mac (\\r) line endings to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _tokenize(text: str, split_rows: bool) -> list[list[str]]:
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False

    i = 0
    while i < len(text):
        char = text[i]
        next_char = text[i + 1] if i + 1 < len(text) else ""

        if char == QUOTE:
            if in_quotes and next_char == QUOTE:
                field.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char in DELIMITERS and not in_quotes:
            row.append("".join(field))
            field = []
        elif split_rows and char in LINE_BREAKS and not in_quotes:
            if char == "\r" and next_char == "\n":
                i += 1
            # Consecutive terminators must not produce empty rows
            if field or row:
                row.append("".join(field))
                rows.append(row)
                row = []
                field = []
        else:
            field.append(char)
        i += 1

    if not split_rows or field or row:
        row.append("".join(field))
        rows.append(row)

    return rows


def parse_rows(text: str) -> list[list[str]]:
    """Parse delimited text into rows of fields.

    Fields are returned untrimmed. A quoted field may span several physical
    lines; its line breaks are kept verbatim.

    Args:
        text: Raw CSV/TSV content

    Returns:
        List of rows, each a list of field strings
    """
    return _tokenize(text, split_rows=True)


def parse_line(line: str) -> list[str]:
    """Parse a single line into fields.

    Line breaks are treated as ordinary characters, so this is only suitable
    for input already split into lines. Use parse_rows for anything that may
    contain multi-line quoted fields.
    """
    return _tokenize(line, split_rows=False)[0]

"""CSV to SRT conversion pipeline."""

import logging
from pathlib import Path

from .csv_parser import normalize_line_endings, parse_rows
from .extract import extract_entries
from .models import ConversionResult, ConvertOptions
from .srt import close_gaps, subtitles_to_srt

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Raised when a CSV file cannot be converted to SRT."""


def convert(
    csv_text: str | None, options: ConvertOptions | None = None
) -> ConversionResult:
    """Convert CSV text to SRT.

    Accepts 3-column (start, end, text) and 4-column (speaker, start, end,
    text) rows, in any mix, with HH:MM:SS:FF timecodes at 30 fps. Headers,
    blank rows and rows with invalid timecodes are skipped.

    Args:
        csv_text: CSV or TSV content
        options: Conversion options (default: remove gaps)

    Returns:
        ConversionResult holding the SRT text, or the error message if the
        conversion failed unexpectedly. Never raises for text input.
    """
    options = options or ConvertOptions()

    try:
        csv_text = (csv_text or "").removeprefix("\ufeff")
        if not csv_text.strip():
            return ConversionResult(srt="")

        rows = parse_rows(normalize_line_endings(csv_text))
        subtitles = extract_entries(rows)

        if options.remove_gaps:
            subtitles = close_gaps(subtitles)

        return ConversionResult(srt=subtitles_to_srt(subtitles))
    except Exception as e:
        logger.exception("SRT conversion failed")
        return ConversionResult(error=str(e))


def csv_to_srt(csv_text: str | None, options: ConvertOptions | None = None) -> str:
    """Convert CSV text to an SRT string.

    Failures are returned as text prefixed with "Error generating SRT: "
    instead of being raised, so UI callers can display the result as-is.
    """
    return convert(csv_text, options).render()


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    options: ConvertOptions | None = None,
) -> Path:
    """Convert a CSV file to an SRT file.

    Args:
        input_path: CSV file (UTF-8, byte order mark allowed)
        output_path: Output SRT path (default: input path with .srt suffix)
        options: Conversion options

    Returns:
        Path of the written SRT file

    Raises:
        ConversionError: If the file cannot be decoded or converted
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else input_path.with_suffix(".srt")

    try:
        csv_text = input_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ConversionError(f"{input_path} is not valid UTF-8: {e}") from e

    result = convert(csv_text, options)
    if not result.ok:
        raise ConversionError(result.error)

    output_path.write_text(result.srt, encoding="utf-8")
    logger.debug("Wrote %s", output_path)
    return output_path

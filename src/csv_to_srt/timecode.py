"""Frame-based timecode conversion (HH:MM:SS:FF -> HH:MM:SS,mmm)."""

import math
import re

# Fixed frame rate of the caption exports we accept
FPS = 30

_SEPARATORS = re.compile(r"[:;]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def frames_to_milliseconds(frames: int, fps: int = FPS) -> int:
    """Convert a frame count to milliseconds, rounding halves up."""
    return math.floor(frames / fps * 1000 + 0.5)


def _milliseconds_text(frame_field: str) -> str:
    """Render the millisecond part for a frame field, ignoring trailing junk.

    A field without a leading integer gives "NaN"; a frame count too large
    to convert gives "Infinity" (or "-Infinity").
    """
    match = _LEADING_INT.match(frame_field)
    if not match:
        return "NaN"

    digits = match.group(1)
    try:
        return str(frames_to_milliseconds(int(digits)))
    except (OverflowError, ValueError):
        return "-Infinity" if digits.startswith("-") else "Infinity"


def convert_time(value: str | None) -> str | None:
    """Convert a frame timecode to an SRT timecode.

    Both ':' and ';' are accepted as separators, in any mix. Hours, minutes
    and seconds are zero-padded but not validated, and frame counts outside
    0-29 are converted arithmetically.

    Args:
        value: Timecode in "HH:MM:SS:FF" form

    Returns:
        Timecode in "HH:MM:SS,mmm" form, or None if the input does not have
        exactly four components
    """
    if not value or not value.strip():
        return None

    parts = _SEPARATORS.split(value.strip())
    if len(parts) != 4:
        return None

    hours, minutes, seconds, frame_field = parts
    millis = _milliseconds_text(frame_field)

    return (
        f"{hours.rjust(2, '0')}:{minutes.rjust(2, '0')}:{seconds.rjust(2, '0')},"
        f"{millis.rjust(3, '0')}"
    )


def is_timecode(value: str | None) -> bool:
    """Check if a field converts as a frame timecode."""
    return convert_time(value) is not None

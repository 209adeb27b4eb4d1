"""SRT subtitle generation, gap closing and reading."""

import re
from pathlib import Path

from .models import SubtitleEntry

_TIMING = re.compile(r"(\S+)\s+-->\s+(\S+)")


def close_gaps(subtitles: list[SubtitleEntry]) -> list[SubtitleEntry]:
    """Remove gaps between consecutive subtitles.

    Each subtitle after the first starts where the previous one ends. The
    original start is discarded whether it was earlier or later than that, so
    overlaps are flattened the same way.

    Args:
        subtitles: Subtitles in display order

    Returns:
        New list of subtitles; the input is left unchanged
    """
    closed = subtitles[:1]
    for prev, sub in zip(subtitles, subtitles[1:]):
        closed.append(sub.model_copy(update={"start": prev.end}))
    return closed


def subtitles_to_srt(subtitles: list[SubtitleEntry]) -> str:
    """Convert subtitles to SRT format string.

    Blocks are numbered from 1 and separated by a single blank line.

    Args:
        subtitles: List of SubtitleEntry objects

    Returns:
        SRT formatted string, empty if there are no subtitles
    """
    return "\n".join(
        sub.to_srt_block(index) for index, sub in enumerate(subtitles, start=1)
    )


def write_srt(subtitles: list[SubtitleEntry], path: str | Path) -> None:
    """Write subtitles to an SRT file.

    Args:
        subtitles: List of SubtitleEntry objects
        path: Output file path
    """
    path = Path(path)
    path.write_text(subtitles_to_srt(subtitles), encoding="utf-8")


def parse_srt(content: str) -> list[SubtitleEntry]:
    """Parse SRT content into SubtitleEntry objects.

    Blocks without a numeric index, a timing line or any text are skipped.
    """
    subtitles = []
    content = content.replace("\r\n", "\n").strip()
    blocks = re.split(r"\n\s*\n", content)

    for block in blocks:
        lines = block.strip().split("\n")
        if len(lines) < 3 or not lines[0].strip().isdigit():
            continue

        match = _TIMING.match(lines[1].strip())
        if not match:
            continue

        text = "\n".join(lines[2:])
        if not text.strip():
            continue

        subtitles.append(
            SubtitleEntry(start=match.group(1), end=match.group(2), text=text)
        )

    return subtitles


def read_srt(path: str | Path) -> list[SubtitleEntry]:
    """Read and parse an SRT file."""
    path = Path(path)
    return parse_srt(path.read_text(encoding="utf-8"))

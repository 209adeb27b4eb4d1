"""Data models for csv-to-srt."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

ERROR_PREFIX = "Error generating SRT: "


class RowFormat(str, Enum):
    """Column layout detected for a single CSV row."""

    THREE_COLUMN = "start,end,text"
    FOUR_COLUMN = "speaker,start,end,text"


class SubtitleEntry(BaseModel):
    """A single subtitle entry with SRT timecodes and text."""

    model_config = ConfigDict(frozen=True)

    start: str  # HH:MM:SS,mmm
    end: str  # HH:MM:SS,mmm
    text: str

    @field_validator("start", "end")
    @classmethod
    def _require_timecode(cls, value: str) -> str:
        if not value:
            raise ValueError("timecode must not be empty")
        return value

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("text must not be blank")
        return value

    def to_srt_block(self, index: int) -> str:
        """Convert to SRT format block."""
        return f"{index}\n{self.start} --> {self.end}\n{self.text}\n"


class ConvertOptions(BaseModel):
    """Options for a single CSV to SRT conversion."""

    remove_gaps: bool = True


class ConversionResult(BaseModel):
    """Outcome of a conversion: SRT text on success, a message on failure."""

    srt: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Return the SRT text, or the error message with its standard prefix."""
        if self.error is not None:
            return f"{ERROR_PREFIX}{self.error}"
        return self.srt

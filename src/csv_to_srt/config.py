"""Configuration management via environment variables."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .models import ConvertOptions

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


@dataclass
class Config:
    """Application configuration loaded from environment."""

    remove_gaps: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        load_dotenv()
        return cls(
            remove_gaps=_env_bool("CSV_TO_SRT_REMOVE_GAPS", True),
            log_level=os.getenv("CSV_TO_SRT_LOG_LEVEL", "WARNING").upper(),
        )

    def options(self) -> ConvertOptions:
        """Build conversion options from this configuration."""
        return ConvertOptions(remove_gaps=self.remove_gaps)

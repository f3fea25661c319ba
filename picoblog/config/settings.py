"""
Configuration data classes for Picoblog.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_MODE, DEFAULT_TITLE


class OutputMode(Enum):
    """Supported output formats."""
    HTML = "html"
    RSS = "rss"
    ATOM = "atom"

    @property
    def is_feed(self) -> bool:
        return self is not OutputMode.HTML

    @property
    def display_name(self) -> str:
        """Name used in user-facing messages."""
        return {"html": "HTML", "rss": "RSS", "atom": "Atom"}[self.value]


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class BlogConfig:
    """Settings for a single run, built once at start-up."""
    title: str = DEFAULT_TITLE
    mode: str = DEFAULT_MODE
    url: str = ""
    list_path: Optional[Path] = None
    paths: List[Path] = field(default_factory=list)
    full_content: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @property
    def output_mode(self) -> Optional[OutputMode]:
        """Resolve the mode string, case-insensitively; None if unsupported."""
        try:
            return OutputMode(self.mode.strip().lower())
        except ValueError:
            return None

    @property
    def is_feed(self) -> bool:
        mode = self.output_mode
        return mode is not None and mode.is_feed

    @property
    def uses_manifest(self) -> bool:
        return self.list_path is not None

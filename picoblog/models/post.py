"""
Post models.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote


def title_from_path(path: Path) -> str:
    """Display title for a post file: its name without the final extension.

    "notes.v2.md" becomes "notes.v2" and "draft." becomes "draft". Names
    without an extension, and dotfiles such as ".draft", are kept whole.
    """
    stem = Path(path).stem
    if stem.endswith('.') and stem.strip('.'):
        stem = stem[:-1]
    return stem


@dataclass(frozen=True)
class PostReference:
    """A post to load, as named on the command line or in a post list."""
    path: Path
    explicit_date: Optional[datetime] = None
    line_number: Optional[int] = None  # 1-based line in the post list


@dataclass(frozen=True)
class Post:
    """One blog entry loaded from disk."""
    title: str
    timestamp: datetime
    contents: str
    source: Optional[Path] = None

    @property
    def anchor(self) -> str:
        """Title percent-encoded for use as a URL fragment."""
        return quote(self.title, safe='')

    def link(self, base_url: str) -> str:
        """Absolute link to this post's section of the blog page."""
        return f"{base_url}#{self.anchor}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "timestamp": self.timestamp.isoformat(),
            "source": str(self.source) if self.source else None,
            "length": len(self.contents),
        }

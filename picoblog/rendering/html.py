"""
Single-page HTML rendering.
"""

import logging
from datetime import datetime
from typing import Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from ..models.post import Post
from .markdown_converter import render_markdown

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "blog.html"


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of the month."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_long_date(dt: datetime) -> str:
    """Format a date like "January 2nd, 2006"."""
    return f"{dt.strftime('%B')} {dt.day}{ordinal_suffix(dt.day)}, {dt.year}"


class HtmlRenderer:
    """Renders all posts into one HTML document."""

    def __init__(self, template_name: str = TEMPLATE_NAME):
        self.env = Environment(
            loader=PackageLoader("picoblog", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["markdown"] = render_markdown
        self.env.filters["long_date"] = format_long_date
        self.template = self.env.get_template(template_name)

    def render(self, title: str, posts: Sequence[Post]) -> str:
        """Render the blog page.

        Args:
            title: Blog title shown in the page header
            posts: Posts in display order

        Returns:
            Complete HTML document
        """
        logger.debug(f"Rendering {len(posts)} posts as HTML")
        return self.template.render(title=title, posts=posts)

"""
Markdown conversion and HTML page rendering.
"""

from .markdown_converter import render_markdown
from .html import HtmlRenderer, format_long_date

__all__ = [
    'render_markdown',
    'HtmlRenderer',
    'format_long_date',
]

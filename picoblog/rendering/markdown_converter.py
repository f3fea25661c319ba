"""
Markdown to HTML conversion for post bodies.
"""

import markdown

from ..config.constants import MARKDOWN_EXTENSIONS, MARKDOWN_OUTPUT_FORMAT


def render_markdown(text: str) -> str:
    """Convert a markdown document to an HTML fragment."""
    return markdown.markdown(
        text,
        extensions=MARKDOWN_EXTENSIONS,
        output_format=MARKDOWN_OUTPUT_FORMAT,
    )

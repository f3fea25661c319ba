"""
Constants for Picoblog configuration.
"""

VERSION = "0.1.0"

DEFAULT_TITLE = "Picoblog"
DEFAULT_MODE = "html"

# Explicit dates in a post list, e.g. "first.md, 2021-03-04"
MANIFEST_DATE_FORMAT = "%Y-%m-%d"

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]
MARKDOWN_OUTPUT_FORMAT = "html5"

FEED_GENERATOR = "Picoblog"

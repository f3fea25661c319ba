"""
Picoblog - render a handful of markdown posts into one HTML page or a feed.
"""

from .config.constants import VERSION

__version__ = VERSION

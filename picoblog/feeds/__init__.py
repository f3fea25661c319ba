"""
RSS and Atom feed generation for Picoblog.
"""

from .generator import FeedGenerator

__all__ = [
    'FeedGenerator',
]

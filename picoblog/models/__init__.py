"""
Data models for Picoblog.
"""

from .post import Post, PostReference, title_from_path

__all__ = [
    'Post',
    'PostReference',
    'title_from_path',
]

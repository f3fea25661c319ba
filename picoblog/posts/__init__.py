"""
Post loading and ordering.
"""

from .loader import PostLoader
from .manifest import read_manifest, parse_manifest_line, parse_manifest_date
from .collection import PostCollectionBuilder, sort_by_recency

__all__ = [
    'PostLoader',
    'read_manifest',
    'parse_manifest_line',
    'parse_manifest_date',
    'PostCollectionBuilder',
    'sort_by_recency',
]

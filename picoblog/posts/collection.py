"""
Builds the ordered list of posts to render.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..config.settings import BlogConfig
from ..exceptions import NoPostsError, PostLoadError
from ..models.post import Post, PostReference
from .loader import PostLoader
from .manifest import read_manifest

logger = logging.getLogger(__name__)


def sort_by_recency(posts: Iterable[Post]) -> List[Post]:
    """Most recent first; posts with equal timestamps keep their order."""
    return sorted(posts, key=lambda post: post.timestamp, reverse=True)


class PostCollectionBuilder:
    """
    Resolves post references and loads them in display order.

    With a post list the list order is kept as is. Posts given as plain
    paths are ordered by timestamp, newest first.
    """

    def __init__(self, loader: Optional[PostLoader] = None):
        self.loader = loader or PostLoader()

    def build(self, config: BlogConfig) -> List[Post]:
        """Collect posts for a run.

        Raises:
            ManifestError: If the post list cannot be read or parsed
            NoPostsError: If no post could be loaded
        """
        if config.uses_manifest:
            if config.paths:
                logger.warning(
                    f"Ignoring {len(config.paths)} post path(s) given on the command line; "
                    f"using post list {config.list_path}"
                )
            return self.from_manifest(config.list_path)
        return self.from_paths(config.paths)

    def from_manifest(self, manifest_path: Path) -> List[Post]:
        """Load posts named in a post list, in list order."""
        references = read_manifest(manifest_path)
        return self.load_all(references)

    def from_paths(self, paths: Sequence[Path]) -> List[Post]:
        """Load posts from plain paths, newest first."""
        references = [PostReference(path=Path(p)) for p in paths]
        return sort_by_recency(self.load_all(references))

    def load_all(self, references: Sequence[PostReference]) -> List[Post]:
        """Load every reference, skipping the ones that fail.

        One post is produced per loadable reference, so two entries whose
        titles collide both appear.
        """
        if not references:
            raise NoPostsError()

        posts = []
        for reference in references:
            try:
                posts.append(self.loader.load(reference))
            except PostLoadError as e:
                logger.error(f"error building post: {e.to_log_string()}")

        if not posts:
            raise NoPostsError(
                f"None of the {len(references)} post(s) could be loaded",
                context={"requested": len(references)},
            )

        if len(posts) < len(references):
            logger.warning(f"Loaded {len(posts)} of {len(references)} posts")
        else:
            logger.info(f"Loaded {len(posts)} posts")
        return posts

"""
Reads post files from disk.
"""

import logging
from datetime import datetime
from pathlib import Path

from ..exceptions import PostLoadError, create_error_context
from ..models.post import Post, PostReference, title_from_path

logger = logging.getLogger(__name__)


class PostLoader:
    """Loads a single post file into a Post."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, reference: PostReference) -> Post:
        """Load the file named by a reference.

        Args:
            reference: Path to read, with an optional explicit date

        Returns:
            The loaded post. Its timestamp is the explicit date when one was
            given, otherwise the file's modification time.

        Raises:
            PostLoadError: If the file cannot be stat'ed, opened or decoded
        """
        path = Path(reference.path)
        context = create_error_context(
            path=str(path),
            line=reference.line_number,
            operation="load_post",
        )

        try:
            stat = path.stat()
            contents = path.read_text(encoding=self.encoding)
        except OSError as e:
            raise PostLoadError(
                path=str(path),
                reason=e.strerror or str(e),
                context=context,
                cause=e,
            )
        except UnicodeDecodeError as e:
            raise PostLoadError(
                path=str(path),
                reason=f"not valid {self.encoding} text",
                context=context,
                cause=e,
            )

        if reference.explicit_date is not None:
            timestamp = reference.explicit_date
        else:
            timestamp = datetime.fromtimestamp(stat.st_mtime).astimezone()

        post = Post(
            title=title_from_path(path),
            timestamp=timestamp,
            contents=contents,
            source=path,
        )
        logger.debug(f"Loaded post: {post.to_dict()}")
        return post

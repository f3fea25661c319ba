"""
Output mode dispatch.
"""

import logging
from typing import Optional, Sequence, TextIO

from .config.settings import BlogConfig, OutputMode
from .exceptions import ConfigurationError, RenderError
from .feeds.generator import FeedGenerator
from .models.post import Post
from .rendering.html import HtmlRenderer

logger = logging.getLogger(__name__)


class RendererDispatcher:
    """Renders posts in the configured output mode and writes the result."""

    def __init__(self, config: BlogConfig, html_renderer: Optional[HtmlRenderer] = None):
        self.config = config
        self._html_renderer = html_renderer

    @property
    def html_renderer(self) -> HtmlRenderer:
        if self._html_renderer is None:
            self._html_renderer = HtmlRenderer()
        return self._html_renderer

    def render(self, posts: Sequence[Post]) -> Optional[str]:
        """Render the document for the configured mode.

        Returns:
            The document, or None when the mode is unsupported

        Raises:
            ConfigurationError: If a feed mode has no base URL
            RenderError: If the document cannot be produced
        """
        mode = self.config.output_mode
        if mode is None:
            logger.error(f"Unsupported mode {self.config.mode.strip().lower()!r}")
            return None

        if mode == OutputMode.HTML:
            return self.html_renderer.render(self.config.title, posts)

        if not self.config.url:
            raise ConfigurationError(
                f"URL must be specified in {mode.display_name} mode",
                error_code="FEED_URL_MISSING",
            )

        generator = FeedGenerator(
            base_url=self.config.url,
            title=self.config.title,
            full_content=self.config.full_content,
        )
        return generator.generate(posts, mode)

    def write(self, posts: Sequence[Post], sink: TextIO) -> bool:
        """Render and write to the sink.

        Nothing is written unless the whole document rendered. Render
        failures are logged, not raised; a missing feed URL still raises
        ConfigurationError.

        Returns:
            True if a document was written
        """
        try:
            document = self.render(posts)
        except RenderError as e:
            logger.error(e.to_log_string())
            return False

        if document is None:
            return False

        sink.write(document)
        if not document.endswith("\n"):
            sink.write("\n")
        sink.flush()
        return True

"""
Configuration validation for Picoblog.
"""

import re
from typing import List

from .settings import BlogConfig


class ConfigValidator:
    """Validates run settings before any post is loaded."""

    @staticmethod
    def validate_config(config: BlogConfig) -> List[str]:
        """Validate the entire configuration.

        An unsupported mode is not reported here; the renderer handles it.
        """
        errors = []

        errors.extend(ConfigValidator._validate_title(config))
        errors.extend(ConfigValidator._validate_feed_url(config))

        return errors

    @staticmethod
    def _validate_title(config: BlogConfig) -> List[str]:
        errors = []
        if not config.title.strip():
            errors.append("Title must not be empty")
        return errors

    @staticmethod
    def _validate_feed_url(config: BlogConfig) -> List[str]:
        """Feed modes need an absolute base URL for entry links."""
        errors = []

        mode = config.output_mode
        if mode is None or not mode.is_feed:
            return errors

        if not config.url:
            errors.append(f"URL must be specified in {mode.display_name} mode")
        elif not ConfigValidator._is_valid_url(config.url):
            errors.append(f"Invalid URL: {config.url}")

        return errors

    @staticmethod
    def _is_valid_url(url: str) -> bool:
        """Check that a URL has a scheme and a host."""
        url_pattern = r'^[a-zA-Z][a-zA-Z0-9+.-]*://[^/\s?#]+(?:[/?#]\S*)?$'
        return bool(re.match(url_pattern, url))

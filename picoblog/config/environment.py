"""
Environment variable handling for Picoblog configuration.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .settings import BlogConfig, LogLevel
from .constants import DEFAULT_MODE, DEFAULT_TITLE


class EnvironmentLoader:
    """Loads default settings from environment variables.

    Command line flags are applied on top of these defaults.
    """

    @staticmethod
    def load_config(dotenv_path: Optional[str] = None) -> BlogConfig:
        """Load configuration from environment variables.

        Without an explicit path, .env is searched for from the working
        directory upwards.
        """
        # Values already exported in the shell take precedence over .env
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

        list_path = os.getenv('PICOBLOG_LIST', '').strip()

        return BlogConfig(
            title=os.getenv('PICOBLOG_TITLE', DEFAULT_TITLE),
            mode=os.getenv('PICOBLOG_MODE', DEFAULT_MODE),
            url=os.getenv('PICOBLOG_URL', '').strip(),
            list_path=Path(list_path) if list_path else None,
            full_content=EnvironmentLoader._parse_bool(os.getenv('PICOBLOG_FEED_FULL_CONTENT', 'false')),
            log_level=EnvironmentLoader._parse_log_level(os.getenv('LOG_LEVEL', 'WARNING')),
        )

    @staticmethod
    def _parse_bool(value: str) -> bool:
        return value.strip().lower() in ('1', 'true', 'yes', 'on')

    @staticmethod
    def _parse_log_level(value: str) -> LogLevel:
        """Parse a log level name, falling back to WARNING."""
        try:
            return LogLevel(value.strip().upper())
        except ValueError:
            return LogLevel.WARNING

"""
Main application entry point for Picoblog.

Loads posts, orders them and writes a single HTML page or feed to stdout.
Diagnostics always go to stderr.
"""

import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .cli import build_config, build_parser, is_version_request
from .config import BlogConfig, ConfigValidator, EnvironmentLoader, LogLevel
from .dispatcher import RendererDispatcher
from .exceptions import (
    ConfigurationError,
    ManifestError,
    NoPostsError,
    handle_unexpected_error,
)
from .posts import PostCollectionBuilder

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Send log records to stderr; stdout carries the rendered document."""
    logging.basicConfig(
        level=level.value,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level.value)


class PicoblogApp:
    """Runs one load, order and render pass."""

    def __init__(self,
                 config: BlogConfig,
                 builder: Optional[PostCollectionBuilder] = None,
                 dispatcher: Optional[RendererDispatcher] = None):
        self.config = config
        self.builder = builder or PostCollectionBuilder()
        self.dispatcher = dispatcher or RendererDispatcher(config)

    def validate(self) -> None:
        """Raise ConfigurationError for settings that make the run pointless."""
        errors = ConfigValidator.validate_config(self.config)
        if errors:
            raise ConfigurationError(
                "; ".join(errors),
                context={"errors": errors},
            )

    def run(self, stdout: TextIO) -> bool:
        """Build and write the document.

        Returns:
            True if a document was written

        Raises:
            ConfigurationError, ManifestError, NoPostsError: Fatal errors
        """
        self.validate()

        posts = self.builder.build(self.config)
        logger.info(f"Rendering {len(posts)} posts in {self.config.mode} mode")

        return self.dispatcher.write(posts, stdout)


def main(argv: Optional[List[str]] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Run the command line tool and return the exit status."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    if is_version_request(args):
        print(__version__, file=stderr)
        return 0

    config = build_config(args, EnvironmentLoader.load_config())
    setup_logging(config.log_level)

    app = PicoblogApp(config)
    try:
        app.run(stdout)
    except NoPostsError as e:
        logger.debug(f"Fatal error: {e.to_dict()}")
        print(f"ERROR: {e.user_message}\n", file=stderr)
        parser.print_help(stderr)
        return 1
    except (ConfigurationError, ManifestError) as e:
        logger.debug(f"Fatal error: {e.to_dict()}")
        print(f"ERROR: {e.user_message}", file=stderr)
        return 1
    except Exception as e:
        error = handle_unexpected_error(e)
        logger.error(f"Picoblog failed: {error.to_log_string()}")
        raise

    return 0


def run_main() -> None:
    """Console script entry point."""
    sys.exit(main())

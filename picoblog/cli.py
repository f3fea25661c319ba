"""
Command line parsing for Picoblog.
"""

import argparse
import dataclasses
from pathlib import Path
from typing import Optional

from .config.settings import BlogConfig

USAGE_EXAMPLES = """\
picoblog takes a list of post paths

Examples:
  picoblog first.md second.md
  picoblog --list file.txt
  picoblog --mode rss --url https://example.com/blog/ first.md second.md
  picoblog version
"""

LIST_HELP = (
    "List of blog posts, sorted by display order. One post per line, "
    "optionally followed by a date: \"first.md, 2021-03-04\""
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Flags default to None so that unset flags fall through to the
    environment defaults in build_config.
    """
    parser = argparse.ArgumentParser(
        prog="picoblog",
        description=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--title", default=None, help="Title for blog (default: Picoblog)")
    parser.add_argument("--list", dest="list_path", default=None, metavar="PATH", help=LIST_HELP)
    parser.add_argument(
        "--mode",
        default=None,
        help="Render in html, rss or atom mode (default: html). "
             "In rss and atom mode the --url flag must also be set.",
    )
    parser.add_argument("--url", default=None, help="URL to this blog to use in RSS and Atom feeds")
    parser.add_argument(
        "--full-content",
        action="store_true",
        default=None,
        help="Include rendered post bodies in feed entries",
    )
    parser.add_argument("paths", nargs="*", metavar="POST", help="Markdown post files")
    return parser


def is_version_request(args: argparse.Namespace) -> bool:
    return bool(args.paths) and args.paths[0] == "version"


def build_config(args: argparse.Namespace, base: Optional[BlogConfig] = None) -> BlogConfig:
    """Overlay parsed flags on the environment defaults."""
    config = base or BlogConfig()
    overrides = {}

    if args.title is not None:
        overrides["title"] = args.title
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.url is not None:
        overrides["url"] = args.url.strip()
    if args.list_path:
        overrides["list_path"] = Path(args.list_path)
    if args.full_content:
        overrides["full_content"] = True

    overrides["paths"] = [Path(p) for p in args.paths]

    return dataclasses.replace(config, **overrides)


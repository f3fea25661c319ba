"""
Post list ("manifest") parsing.

A post list names one post per line, optionally followed by the date to
display for it:

    first.md, 2021-03-04
    drafts/second.md

The order of the lines is the order of the rendered posts.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..config.constants import MANIFEST_DATE_FORMAT
from ..exceptions import ManifestError, create_error_context
from ..models.post import PostReference

logger = logging.getLogger(__name__)


def parse_manifest_date(value: str, line_number: Optional[int] = None) -> datetime:
    """Parse a YYYY-MM-DD date as local midnight.

    Raises:
        ManifestError: If the value is not a valid date
    """
    try:
        parsed = datetime.strptime(value, MANIFEST_DATE_FORMAT)
    except ValueError as e:
        location = f" on line {line_number}" if line_number is not None else ""
        raise ManifestError(
            f"invalid date {value!r}{location}, expected YYYY-MM-DD",
            error_code="MANIFEST_BAD_DATE",
            context=create_error_context(line=line_number, value=value),
            cause=e,
        )
    return parsed.astimezone()


def parse_manifest_line(line: str, line_number: Optional[int] = None) -> Optional[PostReference]:
    """Parse one "path[, date]" line; blank lines yield None."""
    line = line.strip()
    if not line:
        return None

    # Split on the last comma so the path itself may contain commas
    path_part, sep, date_part = line.rpartition(',')
    if not sep:
        path_part, date_part = line, ''

    path_part = path_part.strip()
    date_part = date_part.strip()

    if not path_part:
        raise ManifestError(
            f"missing post path on line {line_number}",
            error_code="MANIFEST_BAD_LINE",
            context=create_error_context(line=line_number),
        )

    explicit_date = parse_manifest_date(date_part, line_number) if date_part else None

    return PostReference(
        path=Path(path_part),
        explicit_date=explicit_date,
        line_number=line_number,
    )


def read_manifest(path: Path) -> List[PostReference]:
    """Read a post list file.

    Args:
        path: Post list location

    Returns:
        References in file order, one per non-blank line

    Raises:
        ManifestError: If the file is missing or unreadable, or a line holds
            an invalid date
    """
    path = Path(path)
    context = create_error_context(path=str(path), operation="read_manifest")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestError(
            f"error opening post list: {path} does not exist",
            error_code="MANIFEST_NOT_FOUND",
            context=context,
            cause=e,
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(
            f"error opening post list: {path}: {e}",
            error_code="MANIFEST_READ_FAILED",
            context=context,
            cause=e,
        )

    references = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        reference = parse_manifest_line(line, line_number)
        if reference is not None:
            references.append(reference)

    logger.info(f"Read {len(references)} entries from post list {path}")
    return references

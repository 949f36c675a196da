"""Helpers shared by every size strategy.

Both strategies walk depth-first and treat failures the same way: a root
that cannot be listed aborts the walk, anything below it is recorded in the
report and skipped.
"""

import logging
from pathlib import Path

from bytetools.errors import EntryAccessError, TraversalError
from bytetools.models import FileSystemEntry, SizeReport
from bytetools.protocols import FileSystem

logger = logging.getLogger(__name__)


def list_root(root: Path, filesystem: FileSystem) -> list[FileSystemEntry]:
    """List the walk root.

    Raises:
        TraversalError: root is missing, not a directory or unreadable
    """
    try:
        return list(filesystem.list_dir(root))
    except OSError as exc:
        raise TraversalError(root, exc) from exc


def list_children(
    directory: Path, filesystem: FileSystem, report: SizeReport
) -> list[FileSystemEntry]:
    """List a directory below the root, or record why it could not be listed."""
    try:
        return list(filesystem.list_dir(directory))
    except OSError as exc:
        report.traversal_errors.append(TraversalError(directory, exc))
        logger.warning(f"Skipping directory {directory}: {exc}")
        return []


def entry_size(
    entry: FileSystemEntry, filesystem: FileSystem, report: SizeReport
) -> int:
    """Return the size of one entry, or 0 when its metadata cannot be read."""
    try:
        size = filesystem.size_of(entry)
    except OSError as exc:
        report.entry_errors.append(EntryAccessError(entry.path, exc))
        logger.warning(f"Skipping {entry.path}: {exc}")
        return 0

    logger.debug(f"  {entry.path} ({entry.kind.value}) {size} bytes")
    return size

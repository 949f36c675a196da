"""Local disk backend built on ``os.scandir``."""

import os
from pathlib import Path
from typing import Iterator

from bytetools.models import EntryKind, FileSystemEntry


class LocalFileSystem:
    """Read-only view of the local filesystem.

    Symbolic links below the walk root are never followed: a link is
    reported as ``EntryKind.OTHER`` whatever it points to, and its size is
    the size of the link itself. This keeps walks free of cycles and broken
    links from raising. The root is the one exception: a root given as a
    link to a directory is resolved, both for listing and for its own size.
    """

    def list_dir(self, path: Path) -> Iterator[FileSystemEntry]:
        """Yield children of ``path`` sorted by name."""
        with os.scandir(path) as it:
            children = sorted(it, key=lambda child: child.name)

        for child in children:
            yield FileSystemEntry(path=Path(child.path), kind=self._classify(child))

    def size_of(self, entry: FileSystemEntry) -> int:
        # Only a root passed in as DIRECTORY can still be a link here
        follow = entry.kind is not EntryKind.OTHER
        return os.stat(entry.path, follow_symlinks=follow).st_size

    @staticmethod
    def _classify(child: os.DirEntry) -> EntryKind:
        try:
            if child.is_symlink():
                return EntryKind.OTHER
            if child.is_dir(follow_symlinks=False):
                return EntryKind.DIRECTORY
            if child.is_file(follow_symlinks=False):
                return EntryKind.FILE
        except OSError:
            # Unknown type; size_of will report the failure if it persists
            pass
        return EntryKind.OTHER

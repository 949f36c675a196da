"""Protocol for the host filesystem as seen by the size aggregator."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from bytetools.models import FileSystemEntry


@runtime_checkable
class FileSystem(Protocol):
    """Read-only directory listing and metadata access.

    The default implementation talks to the local disk; tests swap in an
    in-memory tree. Uses structural subtyping - no inheritance required.
    """

    def list_dir(self, path: Path) -> Iterator[FileSystemEntry]:
        """Yield the direct children of ``path``.

        Raises OSError when ``path`` is missing, not a directory or unreadable.
        """
        ...

    def size_of(self, entry: FileSystemEntry) -> int:
        """Return the size the filesystem reports for ``entry``.

        Raises OSError when the metadata cannot be read.
        """
        ...

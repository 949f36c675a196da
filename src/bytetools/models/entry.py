"""Core data models for filesystem entries and size reports."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from bytetools.errors import EntryAccessError, TraversalError


class EntryKind(str, Enum):
    """Classification of a filesystem node."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"  # symlinks, devices, sockets, fifos


@dataclass(frozen=True)
class FileSystemEntry:
    """A single node seen while listing a directory."""

    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class SizeReport:
    """Accumulated size of a directory tree plus the errors skipped on the way."""

    root: Path
    strategy: str
    total_bytes: int = 0
    entries_visited: int = 0
    entry_errors: list[EntryAccessError] = field(default_factory=list)
    traversal_errors: list[TraversalError] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.entry_errors) + len(self.traversal_errors)

    @property
    def complete(self) -> bool:
        """True when nothing was skipped."""
        return self.skipped == 0

    def add(self, size: int) -> None:
        self.total_bytes += size

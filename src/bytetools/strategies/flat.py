"""Single-pass walk that counts every entry, directories included."""

from pathlib import Path

from bytetools.models import EntryKind, FileSystemEntry, SizeReport
from bytetools.protocols import FileSystem
from bytetools.strategies.walk import entry_size, list_children, list_root


class FlatWalkStrategy:
    """Walk the whole subtree once and add the size of every visited entry.

    Directories, the root included, contribute the size the filesystem
    reports for the directory node itself, so the total is larger than the
    sum of file contents. Symlinks and other special entries contribute
    their own size.
    """

    name = "flat"

    def measure(self, root: Path, filesystem: FileSystem) -> SizeReport:
        """Sum entries below ``root`` in depth-first pre-order.

        Raises:
            TraversalError: root cannot be listed
        """
        report = SizeReport(root=root, strategy=self.name)

        # Stack holds siblings reversed so they pop in listing order
        stack = list(reversed(list_root(root, filesystem)))

        report.entries_visited += 1
        report.add(entry_size(FileSystemEntry(root, EntryKind.DIRECTORY), filesystem, report))

        while stack:
            entry = stack.pop()
            report.entries_visited += 1
            report.add(entry_size(entry, filesystem, report))

            if entry.is_dir:
                stack.extend(reversed(list_children(entry.path, filesystem, report)))

        return report

"""Level-by-level walk that sums regular files only."""

from pathlib import Path

from bytetools.models import SizeReport
from bytetools.protocols import FileSystem
from bytetools.strategies.walk import entry_size, list_children, list_root


class NestedRecursiveStrategy:
    """Descend into directories and add up regular file sizes.

    Directory nodes contribute nothing themselves, and neither do symlinks,
    devices or other special entries. Descent uses an explicit stack, so
    tree depth is not limited by the interpreter's recursion limit.
    """

    name = "nested"

    def measure(self, root: Path, filesystem: FileSystem) -> SizeReport:
        """Sum regular files below ``root``.

        Raises:
            TraversalError: root cannot be listed
        """
        report = SizeReport(root=root, strategy=self.name)

        # Siblings reversed so they pop in listing order
        stack = list(reversed(list_root(root, filesystem)))
        while stack:
            entry = stack.pop()
            report.entries_visited += 1
            if entry.is_file:
                report.add(entry_size(entry, filesystem, report))
            elif entry.is_dir:
                stack.extend(reversed(list_children(entry.path, filesystem, report)))

        return report

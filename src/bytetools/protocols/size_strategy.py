"""Protocol for directory size aggregation strategies."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from bytetools.models import SizeReport
from bytetools.protocols.filesystem import FileSystem


@runtime_checkable
class SizeStrategy(Protocol):
    """Protocol for the ways a directory tree can be summed up.

    ``measure`` always returns a report; errors below the root are recorded
    in it instead of being raised.
    """

    @property
    def name(self) -> str:
        """Return identifier for this strategy (e.g., 'flat', 'nested')."""
        ...

    def measure(self, root: Path, filesystem: FileSystem) -> SizeReport:
        """Walk ``root`` and sum its entries.

        Raises TraversalError when ``root`` itself cannot be listed.
        """
        ...

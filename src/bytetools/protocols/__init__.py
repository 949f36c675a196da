"""Protocol definitions for extensible components."""

from bytetools.protocols.filesystem import FileSystem
from bytetools.protocols.size_strategy import SizeStrategy

__all__ = ["FileSystem", "SizeStrategy"]

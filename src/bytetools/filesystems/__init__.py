"""Filesystem backends for the size aggregator."""

from bytetools.filesystems.local import LocalFileSystem

__all__ = ["LocalFileSystem"]

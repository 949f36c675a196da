"""Data models for bytetools."""

from bytetools.models.entry import EntryKind, FileSystemEntry, SizeReport
from bytetools.models.result import Err, Ok, Result

__all__ = ["EntryKind", "FileSystemEntry", "SizeReport", "Ok", "Err", "Result"]

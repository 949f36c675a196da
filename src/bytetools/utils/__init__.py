"""Utility functions for bytetools."""

from bytetools.utils.size import format_size

__all__ = ["format_size"]

"""Error types for bytetools.

These are raised by ``Result.unwrap()`` and carried as values inside
``Err`` results and size reports.
"""

from pathlib import Path
from typing import Optional


class BytetoolsError(Exception):
    """Base class for all bytetools errors."""


class InvalidEncodingInput(BytetoolsError):
    """Hex text that cannot be decoded (odd length or a non-hex character)."""

    def __init__(
        self,
        reason: str,
        text_length: int,
        position: Optional[int] = None,
        character: Optional[str] = None,
    ):
        self.reason = reason
        self.text_length = text_length
        self.position = position
        self.character = character
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.character is not None:
            return f"{self.reason}: {self.character!r} at position {self.position}"
        return f"{self.reason} (length {self.text_length})"


class EncodingInternalError(BytetoolsError):
    """Formatting bytes as hex failed unexpectedly."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Cannot encode data as hex: {cause}")


class TraversalError(BytetoolsError):
    """A directory could not be walked (missing, not a directory, unreadable)."""

    def __init__(self, path: Path | str, cause: Exception | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot walk {self.path}: {cause}")


class EntryAccessError(BytetoolsError):
    """Metadata of a single entry could not be read."""

    def __init__(self, path: Path | str, cause: Exception | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot read size of {self.path}: {cause}")

"""bytetools - hex codec and directory size utilities."""

from bytetools.aggregator import DirectorySizeAggregator, directory_size
from bytetools.codec import HexCodec, decode_hex, encode_hex
from bytetools.errors import (
    BytetoolsError,
    EncodingInternalError,
    EntryAccessError,
    InvalidEncodingInput,
    TraversalError,
)
from bytetools.models import EntryKind, Err, FileSystemEntry, Ok, Result, SizeReport

__version__ = "0.1.0"

__all__ = [
    "HexCodec",
    "encode_hex",
    "decode_hex",
    "DirectorySizeAggregator",
    "directory_size",
    "BytetoolsError",
    "InvalidEncodingInput",
    "EncodingInternalError",
    "TraversalError",
    "EntryAccessError",
    "EntryKind",
    "FileSystemEntry",
    "SizeReport",
    "Ok",
    "Err",
    "Result",
]

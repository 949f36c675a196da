"""Hexadecimal encoding and decoding of byte sequences."""

import logging
import string
from typing import Iterable, Union

from bytetools.errors import EncodingInternalError, InvalidEncodingInput
from bytetools.models import Err, Ok, Result

logger = logging.getLogger(__name__)

ByteSequence = Union[bytes, bytearray, memoryview, Iterable[int]]

HEX_DIGITS = frozenset(string.hexdigits)


class HexCodec:
    """Lossless conversion between bytes and two-digits-per-byte hex text.

    Decoding accepts either case; encoding case is chosen per call.
    """

    def encode(
        self, data: ByteSequence, uppercase: bool = True
    ) -> Result[str, EncodingInternalError]:
        """Encode ``data`` as hex text.

        Args:
            data: Bytes, or any iterable of ints in 0..255
            uppercase: Use A-F instead of a-f

        Returns:
            Ok(text), where an empty input gives Ok(""); Err when ``data``
            cannot be read as bytes
        """
        try:
            raw = self._as_bytes(data)
        except (TypeError, ValueError) as exc:
            logger.error(f"Error encoding data as hex: {exc}")
            return Err(EncodingInternalError(exc))

        text = raw.hex()
        return Ok(text.upper() if uppercase else text)

    def decode(self, text: str) -> Result[bytes, InvalidEncodingInput]:
        """Decode hex text back to bytes.

        Every character must be a hex digit (no whitespace or prefixes) and
        the length must be even.

        Returns:
            Ok(bytes), where an empty string gives Ok(b""); Err describing
            the first problem found otherwise
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        for position, character in enumerate(text):
            if character not in HEX_DIGITS:
                return self._reject(
                    InvalidEncodingInput(
                        "Invalid hex digit",
                        text_length=len(text),
                        position=position,
                        character=character,
                    )
                )

        if len(text) % 2:
            return self._reject(
                InvalidEncodingInput(
                    "Odd number of hex digits",
                    text_length=len(text),
                    position=len(text),
                )
            )

        return Ok(bytes.fromhex(text))

    @staticmethod
    def is_hex(text: str) -> bool:
        """Check whether ``text`` would decode successfully."""
        return len(text) % 2 == 0 and all(c in HEX_DIGITS for c in text)

    @staticmethod
    def _as_bytes(data: ByteSequence) -> bytes:
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        # bytes() would read these as a length or a text
        if isinstance(data, (int, str)):
            raise TypeError(f"Expected a byte sequence, got {type(data).__name__}")
        return bytes(data)

    @staticmethod
    def _reject(error: InvalidEncodingInput) -> Err[InvalidEncodingInput]:
        logger.debug(f"Rejected hex input: {error}")
        return Err(error)


_default_codec = HexCodec()


def encode_hex(
    data: ByteSequence, uppercase: bool = True
) -> Result[str, EncodingInternalError]:
    """Encode ``data`` with a shared codec. See ``HexCodec.encode``."""
    return _default_codec.encode(data, uppercase)


def decode_hex(text: str) -> Result[bytes, InvalidEncodingInput]:
    """Decode ``text`` with a shared codec. See ``HexCodec.decode``."""
    return _default_codec.decode(text)

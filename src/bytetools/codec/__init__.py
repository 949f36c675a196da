"""Binary-to-text codecs."""

from bytetools.codec.hex_codec import HexCodec, decode_hex, encode_hex

__all__ = ["HexCodec", "encode_hex", "decode_hex"]

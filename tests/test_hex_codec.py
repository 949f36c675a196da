import pytest

from bytetools import (
    EncodingInternalError,
    Err,
    HexCodec,
    InvalidEncodingInput,
    Ok,
    decode_hex,
    encode_hex,
)


@pytest.fixture
def codec() -> HexCodec:
    return HexCodec()


def test_encode_known_value(codec: HexCodec):
    assert codec.encode(bytes([0xBA, 0xAD, 0xF0, 0x0D])) == Ok("BAADF00D")
    assert codec.encode(bytes([0xBA, 0xAD, 0xF0, 0x0D]), uppercase=False) == Ok("baadf00d")


def test_encode_zero_pads_each_byte(codec: HexCodec):
    assert codec.encode([0x0A, 0x00, 0x01]).unwrap() == "0A0001"


@pytest.mark.parametrize(
    "data", [b"\x01\xfe", bytearray(b"\x01\xfe"), memoryview(b"\x01\xfe"), [1, 254], (1, 254)]
)
def test_encode_accepts_byte_sequences(codec: HexCodec, data):
    assert codec.encode(data).unwrap() == "01FE"


def test_encode_empty_is_ok_not_error(codec: HexCodec):
    result = codec.encode(b"")
    assert result.is_ok
    assert result.value == ""


@pytest.mark.parametrize("data", [[256], [-1], [1.5], "text", 3])
def test_encode_reports_unformattable_input(codec: HexCodec, data):
    result = codec.encode(data)
    assert result.is_err
    assert isinstance(result.error, EncodingInternalError)
    with pytest.raises(EncodingInternalError):
        result.unwrap()


def test_decode_known_value(codec: HexCodec):
    assert codec.decode("BAADF00D") == Ok(bytes([0xBA, 0xAD, 0xF0, 0x0D]))


def test_decode_is_case_insensitive(codec: HexCodec):
    expected = bytes([0xBA, 0xAD])
    assert codec.decode("BAAD").unwrap() == expected
    assert codec.decode("baad").unwrap() == expected
    assert codec.decode("bAaD").unwrap() == expected


def test_decode_empty_is_ok_not_error(codec: HexCodec):
    result = codec.decode("")
    assert result.is_ok
    assert result.value == b""


def test_decode_rejects_odd_length(codec: HexCodec):
    result = codec.decode("ABC")
    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidEncodingInput)
    assert result.error.text_length == 3
    assert result.error.character is None


def test_decode_rejects_non_hex_character(codec: HexCodec):
    result = codec.decode("ZZ")
    assert result.is_err
    assert result.error.position == 0
    assert result.error.character == "Z"


def test_decode_reports_position_of_first_bad_character(codec: HexCodec):
    error = codec.decode("00ff0g11").error
    assert error.position == 5
    assert error.character == "g"
    assert "'g'" in str(error)


@pytest.mark.parametrize("text", ["0A 0B", "0x0A", " 0A", "0A\n", "０Ａ"])
def test_decode_does_not_tolerate_extra_characters(codec: HexCodec, text: str):
    assert codec.decode(text).is_err


def test_decode_rejects_non_string(codec: HexCodec):
    with pytest.raises(TypeError):
        codec.decode(b"0A")


def test_unwrap_or_falls_back_only_on_error(codec: HexCodec):
    assert codec.decode("zz").unwrap_or(b"fallback") == b"fallback"
    assert codec.decode("").unwrap_or(b"fallback") == b""


@pytest.mark.parametrize("uppercase", [True, False])
def test_round_trip_every_byte_value(codec: HexCodec, uppercase: bool):
    data = bytes(range(256))
    encoded = codec.encode(data, uppercase=uppercase).unwrap()
    assert len(encoded) == 2 * len(data)
    assert codec.decode(encoded).unwrap() == data


def test_is_hex(codec: HexCodec):
    assert codec.is_hex("")
    assert codec.is_hex("00aAfF")
    assert not codec.is_hex("abc")
    assert not codec.is_hex("xy")


def test_module_level_helpers():
    assert encode_hex(b"\xde\xad", uppercase=False) == Ok("dead")
    assert decode_hex("DEAD") == Ok(b"\xde\xad")

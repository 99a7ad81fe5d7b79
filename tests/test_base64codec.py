import base64

import pytest

from nibblecipher.base64codec import Base64Error, decode, encode


@pytest.mark.parametrize(
    "data",
    [b"", b"a", b"ab", b"abc", b"abcd", bytes(range(256)), b"\x00\x00\x00\xff"],
)
def test_encode_matches_standard_base64(data):
    assert encode(data) == base64.b64encode(data).decode("ascii")


@pytest.mark.parametrize(
    "data", [b"a", b"ab", b"abc", b"hello world", bytes(range(256)), b"\x00"]
)
def test_round_trip(data):
    assert decode(encode(data)) == data


def test_known_value():
    assert encode(b"Man") == "TWFu"
    assert decode("TWFu") == b"Man"


def test_decode_empty():
    assert decode("") == b""


def test_encode_empty():
    assert encode(b"") == ""


@pytest.mark.parametrize("data", [b"x", b"xy", b"xyz", b"wxyz"])
def test_encoded_length_is_multiple_of_four(data):
    assert len(encode(data)) % 4 == 0


def test_invalid_character_raises():
    with pytest.raises(Base64Error):
        decode("AB$D")


def test_bad_length_raises():
    with pytest.raises(Base64Error):
        decode("ABC")


def test_base64error_is_value_error():
    with pytest.raises(ValueError):
        decode("!!!!")


def test_padding_sets_length():
    assert len(decode(encode(b"q"))) == 1
    assert len(decode(encode(b"qr"))) == 2
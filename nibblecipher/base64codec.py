"""Base64 encoding and a lenient decoder that treats '=' as a zero sextet."""

from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
PAD = "="

_VALUES = {char: index for index, char in enumerate(ALPHABET)}


class Base64Error(ValueError):
    """Raised when text cannot be decoded as Base64."""


def encode(data: bytes) -> str:
    """Encode bytes as padded Base64 text."""
    data = bytes(data)
    chars = []
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        triple = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        chars.extend(ALPHABET[(triple >> shift) & 0x3F] for shift in (18, 12, 6, 0))
    padding = (3 - len(data) % 3) % 3
    if padding:
        chars[-padding:] = PAD * padding
    return "".join(chars)


def _sextet(char: str) -> int:
    if char == PAD:
        return 0
    try:
        return _VALUES[char]
    except KeyError:
        raise Base64Error(f"invalid Base64 character: {char!r}") from None


def decode(text: str) -> bytes:
    """Decode Base64 text.

    Any '=' decodes as a zero sextet; the output length is set by the '='
    characters in the last two positions.
    """
    if not text:
        return b""
    if len(text) % 4:
        raise Base64Error("Base64 text length must be a multiple of 4")
    padding = (text[-1] == PAD) + (text[-2] == PAD)
    length = len(text) // 4 * 3 - padding
    output = bytearray()
    for start in range(0, len(text), 4):
        triple = 0
        for char in text[start:start + 4]:
            triple = (triple << 6) | _sextet(char)
        output.extend(triple.to_bytes(3, "big"))
    return bytes(output[:length])
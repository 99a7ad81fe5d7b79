"""Command-line front end: encrypt or decrypt a string with the byte cipher."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from enum import Enum

from .base64codec import Base64Error, decode, encode
from .modes import CipherError, ctr_decrypt, ctr_encrypt, ecb_decrypt, ecb_encrypt

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_KEY_PATTERN = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class Mode(Enum):
    """Supported cipher modes of operation."""

    ECB = "ECB"
    CBC = "CBC"
    CTR = "CTR"


def _coerce_mode(mode: Mode | str) -> Mode:
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(mode)
    except ValueError:
        raise CipherError(f"Unsupported mode: {mode}") from None


def encrypt_data(data: bytes, key: int, mode: Mode | str) -> bytes:
    """Encrypt ``data`` with ``key`` in the given mode."""
    selected = _coerce_mode(mode)
    if selected is Mode.ECB:
        return ecb_encrypt(data, key)
    if selected is Mode.CTR:
        return ctr_encrypt(data, key)
    raise CipherError("CBC mode is not implemented")


def decrypt_data(data: bytes, key: int, mode: Mode | str) -> bytes:
    """Decrypt ``data`` with ``key`` in the given mode."""
    selected = _coerce_mode(mode)
    if selected is Mode.ECB:
        return ecb_decrypt(data, key)
    if selected is Mode.CTR:
        return ctr_decrypt(data, key)
    raise CipherError("CBC mode is not implemented")


def parse_key(text: str) -> int:
    """Read a hexadecimal key prefix leniently and reduce it to one byte."""
    match = _KEY_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    if sign == "-":
        value = -value
    value = max(min(value, _LONG_MAX), _LONG_MIN)
    return value & 0xFF


def _hex_line(data: bytes) -> str:
    return "".join(f"{value:02x} " for value in data)


def _as_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


_USAGE = "Usage: {prog} <operation> <input_string> <key> <mode>\noperation: -e or -d"


def _encrypt(text: str, key: int, mode: str) -> int:
    try:
        encrypted = encrypt_data(os.fsencode(text), key, mode)
    except CipherError as err:
        print(err, file=sys.stderr)
        print("Encryption failed", file=sys.stderr)
        return 1
    if _coerce_mode(mode) is Mode.CTR:
        print(f"Counter value: {encrypted[-1]}")
    print(f"Input: {text}")
    print(f"Encrypted: {encode(encrypted)}")
    print(f"Hex: {_hex_line(encrypted)}")
    return 0


def _decrypt(text: str, key: int, mode: str) -> int:
    try:
        decoded = decode(text)
    except Base64Error:
        decoded = b""
    if not decoded:
        print("Base64 decoding failed", file=sys.stderr)
        return 1
    print(f"Decoded input: {_hex_line(decoded)}")
    try:
        if _coerce_mode(mode) is Mode.CTR:
            print(f"Counter value: {decoded[-1]}")
        decrypted = decrypt_data(decoded, key, mode)
    except CipherError as err:
        print(err, file=sys.stderr)
        print("Decryption failed", file=sys.stderr)
        return 1
    print(f"Input: {text}")
    print(f"Decrypted: {_as_text(decrypted)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``<operation> <input_string> <key> <mode>`` and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(_USAGE.format(prog="encryption"), file=sys.stderr)
        return 1
    operation, text, key_text, mode = args[:4]
    if operation not in ("-e", "-d"):
        print(f"Invalid operation: {operation}", file=sys.stderr)
        return 1
    key = parse_key(key_text)
    if operation == "-d":
        return _decrypt(text, key, mode)
    return _encrypt(text, key, mode)


if __name__ == "__main__":
    sys.exit(main())
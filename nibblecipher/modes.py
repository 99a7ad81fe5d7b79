"""Byte-string modes of operation (ECB and counter) over the 8-bit block cipher."""

from __future__ import annotations

import random

from .block import decrypt_block, encrypt_block


class CipherError(ValueError):
    """Raised when data or parameters cannot be used by a cipher mode."""


def ctr_keystream_byte(value: int, counter: int, key: int) -> int:
    """Combine one byte with the encrypted counter."""
    return encrypt_block(counter, key) ^ value


def ctr_encrypt(data: bytes, key: int, counter: int | None = None) -> bytes:
    """Encrypt in counter mode.

    The counter starts at ``counter`` (random when omitted) and advances by one
    per byte; its final value is appended as the last byte of the result.
    """
    if counter is None:
        counter = random.randrange(256)
    elif not 0 <= counter <= 0xFF:
        raise CipherError(f"counter must be a byte, got {counter}")
    output = bytearray()
    for value in bytes(data):
        output.append(ctr_keystream_byte(value, counter, key))
        counter = (counter + 1) & 0xFF
    output.append(counter)
    return bytes(output)


def ctr_decrypt(data: bytes, key: int) -> bytes:
    """Decrypt counter-mode output whose last byte is the final counter value."""
    data = bytes(data)
    if not data:
        raise CipherError("Invalid input length in counter mode decryption")
    body, final_counter = data[:-1], data[-1]
    counter = (final_counter - len(body)) & 0xFF
    output = bytearray()
    for value in body:
        output.append(ctr_keystream_byte(value, counter, key))
        counter = (counter + 1) & 0xFF
    return bytes(output)


def ecb_encrypt(data: bytes, key: int) -> bytes:
    """Encrypt each byte independently."""
    return bytes(encrypt_block(value, key) for value in bytes(data))


def ecb_decrypt(data: bytes, key: int) -> bytes:
    """Decrypt each byte independently."""
    return bytes(decrypt_block(value, key) for value in bytes(data))
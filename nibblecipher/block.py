"""An 8-bit block cipher built from a 4-bit substitution-permutation round."""

from __future__ import annotations

from collections.abc import Sequence

SBOX = (
    0x9, 0x4, 0x0, 0xD,
    0x8, 0x5, 0x1, 0xC,
    0xB, 0x6, 0x2, 0xF,
    0xA, 0x7, 0x3, 0xE,
)

INVERSE_SBOX = (
    0x2, 0x6, 0xA, 0xE,
    0x1, 0x5, 0x9, 0xD,
    0x4, 0x0, 0xC, 0x8,
    0x7, 0x3, 0xF, 0xB,
)

PERMUTATION1 = (2, 0, 3, 1)
INVERSE_PERMUTATION1 = (1, 3, 0, 2)

PERMUTATION2 = (3, 2, 0, 1)
INVERSE_PERMUTATION2 = (2, 3, 1, 0)

ROUNDS = 4
ROUND_CONSTANT = 0x1B


def permute(order: Sequence[int], value: int) -> int:
    """Rearrange the four bits of a nibble; bit i (from the top) takes bit order[i]."""
    output = 0
    for position, source in enumerate(order):
        output |= ((value >> (3 - source)) & 1) << (3 - position)
    return output


def round_function(value: int, key: int) -> int:
    """Permute, substitute, mix in the key and permute again."""
    nibble = SBOX[permute(PERMUTATION1, value)]
    nibble ^= key & 0x0F
    return permute(PERMUTATION2, nibble)


def inverse_round_function(value: int, key: int) -> int:
    """Undo :func:`round_function`."""
    nibble = permute(INVERSE_PERMUTATION2, value) ^ (key & 0x0F)
    nibble = INVERSE_SBOX[nibble]
    return permute(INVERSE_PERMUTATION1, nibble)


def feistel_round(value: int, key: int) -> int:
    """Apply one round to a byte split into left and right nibbles."""
    left = (value >> 4) & 0x0F
    right = value & 0x0F
    mixed = left ^ round_function(left ^ right, key & 0x0F)
    return (mixed << 4) | left


def inverse_feistel_round(value: int, key: int) -> int:
    """Undo :func:`feistel_round`."""
    left = (value >> 4) & 0x0F
    right = value & 0x0F
    original_right = right ^ inverse_round_function(left ^ right, key & 0x0F)
    return (right << 4) | original_right


def key_schedule(key: int, round_index: int) -> int:
    """Derive the 4-bit round key for ``round_index``."""
    return (key ^ (round_index * ROUND_CONSTANT)) & 0x0F


def encrypt_block(value: int, key: int) -> int:
    """Encrypt one byte."""
    output = value & 0xFF
    for round_index in range(ROUNDS):
        output = feistel_round(output, key_schedule(key, round_index))
    return output


def decrypt_block(value: int, key: int) -> int:
    """Decrypt one byte."""
    output = value & 0xFF
    for round_index in reversed(range(ROUNDS)):
        output = inverse_feistel_round(output, key_schedule(key, round_index))
    return output
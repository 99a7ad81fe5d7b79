"""Arithmetic in GF(2^n) and generation of the cipher's 4-bit S-box tables."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

IRREDUCIBLE_POLY = 0x13  # x^4 + x + 1
AFFINE_MULTIPLIER = 0xD  # x^3 + x^2 + 1
INPUT_MASK = 0x9
OUTPUT_MASK = 0x6
TABLE_SIZE = 16

_WORD_MASK = 0xFFFFFFFF


def degree(poly: int) -> int:
    """Return the degree of a polynomial given as a bit mask (0 for 0 and 1)."""
    return max((poly & _WORD_MASK).bit_length() - 1, 0)


def _field_degree(irr_poly: int) -> int:
    n = degree(irr_poly)
    if n < 1:
        raise ValueError("irreducible polynomial must have degree of at least 1")
    return n


def multiply_x(value: int, irr_poly: int) -> int:
    """Multiply ``value`` by x modulo ``irr_poly``."""
    n = _field_degree(irr_poly)
    result = value << 1
    if value & (1 << (n - 1)):
        result ^= irr_poly
    return result & ((1 << n) - 1)


def multiply(a: int, b: int, irr_poly: int) -> int:
    """Multiply two field elements modulo ``irr_poly``."""
    n = _field_degree(irr_poly)
    result = 0
    power = a
    for bit in range(n):
        if (b >> bit) & 1:
            result ^= power
        power = multiply_x(power, irr_poly)
    return result


def inverse(value: int, irr_poly: int) -> int:
    """Return the multiplicative inverse of ``value`` modulo ``irr_poly``."""
    if value == 0:
        raise ValueError("zero has no multiplicative inverse")
    s, r, v, u = irr_poly, value, 0, 1
    while degree(r) > 0:
        delta = degree(s) - degree(r)
        if delta < 0:
            s, r = r, s
            v, u = u, v
            delta = -delta
        s ^= r << delta
        v ^= u << delta
    return u


def _term(power: int) -> str:
    if power == 0:
        return "1"
    if power == 1:
        return "x"
    return f"x^{power}"


def format_polynomial(value: int, width: int) -> str:
    """Render the low ``width`` bits of ``value`` as a polynomial in x."""
    if value == 0:
        return "0"
    terms = (_term(power) for power in reversed(range(width)) if value & (1 << power))
    return " + ".join(terms)


def format_binary(value: int, width: int) -> str:
    """Render the low ``width`` bits of ``value`` as a binary string."""
    return "".join(str((value >> power) & 1) for power in reversed(range(width)))


def format_hex(value: int) -> str:
    """Render ``value`` in hexadecimal with at least two digits."""
    return f"0x{value:02x}"


def describe(value: int, width: int) -> str:
    """Describe ``value`` in decimal, hexadecimal, binary and polynomial form."""
    return "\n".join(
        (
            f"Decimal: {value}",
            f"Hexadecimal: {format_hex(value)}",
            f"Binary: {format_binary(value, width)}",
            f"Polynomial: {format_polynomial(value, width)}",
        )
    )


def generate_sbox() -> list[int]:
    """Build the S-box: ((i ^ 0x9) * (x^3 + x^2 + 1)) ^ 0x6 over GF(16)."""
    return [
        multiply(i ^ INPUT_MASK, AFFINE_MULTIPLIER, IRREDUCIBLE_POLY) ^ OUTPUT_MASK
        for i in range(TABLE_SIZE)
    ]


def generate_inverse_sbox() -> list[int]:
    """Build the inverse S-box by undoing each step of :func:`generate_sbox`."""
    factor = inverse(AFFINE_MULTIPLIER, IRREDUCIBLE_POLY)
    return [
        multiply(i ^ OUTPUT_MASK, factor, IRREDUCIBLE_POLY) ^ INPUT_MASK
        for i in range(TABLE_SIZE)
    ]


def format_sbox(title: str, table: Iterable[int]) -> str:
    """Lay out a table four entries per row under a title line."""
    parts = [f"{title}:\n"]
    for position, entry in enumerate(table, 1):
        parts.append(f"0x{entry:X}, ")
        if position % 4 == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


_USAGE = (
    "Usage: {prog} <option>\n"
    "Options:\n"
    " -g Generates the s-box\n"
    " -i Generates the inverse s-box"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the S-box (-g) or the inverse S-box (-i)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_USAGE.format(prog="sbox"), file=sys.stderr)
        return 1
    option = args[0]
    if option == "-g":
        print(format_sbox("S-Box", generate_sbox()), end="")
    elif option == "-i":
        print(format_sbox("Inverse S-Box", generate_inverse_sbox()), end="")
    else:
        print(f"Invalid option: {option}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
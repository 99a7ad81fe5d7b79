# nibblecipher

A small teaching cipher that works on single bytes. Each byte is split into
two nibbles and run through four Feistel-style rounds built from a 4-bit
S-box and two bit permutations. Each round key is 4 bits wide, derived from
the low nibble of the key. Text can be encrypted in ECB or CTR mode, and the
ciphertext is shown as Base64 and hex.

It is meant for study and experimentation. It is **not** secure and must not
be used to protect real data.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Encrypting and decrypting from the command line

```
nibblecipher <operation> <input_string> <key> <mode>
```

- `operation` is `-e` to encrypt or `-d` to decrypt.
- `key` is read as a hexadecimal number (an optional `0x` prefix is
  accepted, reading stops at the first non-hex character) and reduced to one
  byte, for example `3`, `a5` or `0x3`.
- `mode` is `ECB` or `CTR`.

The command exits with status 0 on success and 1 on any error, with a
message on standard error.

Encrypt a string:

```
nibblecipher -e hello 3 ECB
```

This prints the input, the ciphertext as Base64 (`Encrypted:`) and the
ciphertext bytes in hex (`Hex:`).

In CTR mode a random starting counter is chosen and advanced by one per byte.
The counter value after the last byte is printed and appended to the
ciphertext, so the Base64 output already carries everything needed to
decrypt it:

```
nibblecipher -e hello 3 CTR
```

To decrypt, pass the Base64 text printed by the encryption step together with
the same key and mode:

```
nibblecipher -d <base64-text> 3 ECB
```

The decoded bytes are printed in hex, followed by the input and the recovered
plaintext (shown up to the first zero byte). In CTR mode the counter value
read from the last byte is printed as well.

## Generating the S-box

The S-box is derived from arithmetic in GF(2^4) with the irreducible
polynomial x^4 + x + 1: each entry is `((i ^ 0x9) * (x^3 + x^2 + 1)) ^ 0x6`.
Print it, or its inverse, four entries per row:

```
nibblecipher-sbox -g
nibblecipher-sbox -i
```

## Using the library

```python
from nibblecipher.block import encrypt_block, decrypt_block
from nibblecipher.modes import ecb_encrypt, ecb_decrypt, ctr_encrypt, ctr_decrypt
from nibblecipher.base64codec import encode, decode

key = 0x3
ciphertext = ecb_encrypt(b"hello", key)
assert ecb_decrypt(ciphertext, key) == b"hello"

sealed = ctr_encrypt(b"hello", key, counter=0x10)  # counter is random when omitted
assert ctr_decrypt(sealed, key) == b"hello"

text = encode(ciphertext)
assert decode(text) == ciphertext

assert decrypt_block(encrypt_block(0x41, key), key) == 0x41
```

Modules:

- `nibblecipher.block` – the byte cipher: `encrypt_block`, `decrypt_block`,
  the round building blocks (`permute`, `round_function`,
  `feistel_round`, `key_schedule` and their inverses) and the `SBOX` and
  `INVERSE_SBOX` tables.
- `nibblecipher.modes` – `ecb_encrypt`, `ecb_decrypt`, `ctr_encrypt`,
  `ctr_decrypt` and `ctr_keystream_byte`. Invalid input (an empty CTR
  ciphertext, a counter outside 0–255) raises `CipherError`, a `ValueError`.
- `nibblecipher.base64codec` – `encode` and `decode`. The decoder is lenient:
  any `=` decodes as a zero sextet and only the last two positions decide the
  output length. Text whose length is not a multiple of 4, or that holds a
  character outside the Base64 alphabet, raises `Base64Error`.
- `nibblecipher.galois` – field arithmetic (`degree`, `multiply_x`,
  `multiply`, `inverse`), `generate_sbox`, `generate_inverse_sbox`,
  `format_sbox`, and display helpers `format_polynomial`, `format_binary`,
  `format_hex` and `describe`.
- `nibblecipher.cli` – the command-line front end, with `encrypt_data` and
  `decrypt_data` (taking a `Mode` or its name) and `parse_key`.

## What it does not do

- CBC mode is listed in `Mode` but not implemented: selecting it raises
  `CipherError` and the command reports that encryption or decryption failed.
- The cipher has a 4-bit effective key; only the low nibble of the key
  affects the result.
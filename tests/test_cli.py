import pytest

from nibblecipher.base64codec import decode, encode
from nibblecipher.cli import Mode, decrypt_data, encrypt_data, main, parse_key
from nibblecipher.modes import CipherError, ecb_encrypt


def _field(output, name):
    for line in output.splitlines():
        if line.startswith(f"{name}: "):
            return line[len(name) + 2:]
    raise AssertionError(f"no {name} line in output")


@pytest.mark.parametrize(
    "text, expected",
    [("1f", 0x1F), ("0x1F", 0x1F), ("A", 0xA), ("zz", 0), ("", 0), ("7g", 7), ("0x", 0)],
)
def test_parse_key(text, expected):
    assert parse_key(text) == expected


def test_parse_key_reduces_to_byte():
    assert parse_key("1ff") == 0xFF
    assert parse_key("-1") == 0xFF
    assert parse_key("  2a") == 0x2A


@pytest.mark.parametrize("mode", ["ECB", "CTR", Mode.ECB, Mode.CTR])
@pytest.mark.parametrize("key", [0x00, 0x3C, 0xFF])
def test_encrypt_decrypt_round_trip(mode, key):
    data = b"attack at dawn"
    assert decrypt_data(encrypt_data(data, key, mode), key, mode) == data


def test_ecb_matches_mode_function():
    assert encrypt_data(b"hello", 0x5A, "ECB") == ecb_encrypt(b"hello", 0x5A)


def test_ctr_appends_counter_byte():
    assert len(encrypt_data(b"hello", 0x12, "CTR")) == len(b"hello") + 1


@pytest.mark.parametrize("mode", ["XYZ", "ecb", "CBC", Mode.CBC])
def test_unsupported_modes_raise(mode):
    with pytest.raises(CipherError):
        encrypt_data(b"data", 1, mode)
    with pytest.raises(CipherError):
        decrypt_data(b"data", 1, mode)


def test_main_usage(capsys):
    assert main(["-e", "hello", "1f"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_invalid_operation(capsys):
    assert main(["-x", "hello", "1f", "ECB"]) == 1
    assert "Invalid operation: -x" in capsys.readouterr().err


def test_main_encrypt_ecb(capsys):
    assert main(["-e", "hello", "3c", "ECB"]) == 0
    out = capsys.readouterr().out
    expected = ecb_encrypt(b"hello", 0x3C)
    assert _field(out, "Input") == "hello"
    assert _field(out, "Encrypted") == encode(expected)
    assert _field(out, "Hex").split() == [f"{b:02x}" for b in expected]


@pytest.mark.parametrize("mode", ["ECB", "CTR"])
def test_main_round_trip(capsys, mode):
    assert main(["-e", "secret message", "a7", mode]) == 0
    ciphertext = _field(capsys.readouterr().out, "Encrypted")
    assert main(["-d", ciphertext, "a7", mode]) == 0
    out = capsys.readouterr().out
    assert _field(out, "Decrypted") == "secret message"
    assert _field(out, "Input") == ciphertext


def test_main_ctr_prints_counter(capsys):
    assert main(["-e", "abc", "01", "CTR"]) == 0
    out = capsys.readouterr().out
    ciphertext = decode(_field(out, "Encrypted"))
    assert int(_field(out, "Counter value")) == ciphertext[-1]


def test_main_bad_base64(capsys):
    assert main(["-d", "A$==", "01", "ECB"]) == 1
    assert "Base64 decoding failed" in capsys.readouterr().err


def test_main_empty_ciphertext(capsys):
    assert main(["-d", "", "01", "ECB"]) == 1
    assert "Base64 decoding failed" in capsys.readouterr().err


def test_main_unsupported_mode(capsys):
    assert main(["-e", "hello", "01", "OFB"]) == 1
    err = capsys.readouterr().err
    assert "Unsupported mode: OFB" in err
    assert "Encryption failed" in err


def test_main_cbc_decrypt_fails(capsys):
    assert main(["-d", encode(b"abc"), "01", "CBC"]) == 1
    assert "Decryption failed" in capsys.readouterr().err
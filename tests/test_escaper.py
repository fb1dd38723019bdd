import io
import pytest
from prc_keygen.escaper import (
    c_literal, write_c_string, encode_c_string, decode_c_string, parse_c_strings,
)

PEM = (
    b"-----BEGIN PUBLIC KEY-----\n"
    b"MFwwDQYJKoZIhvcNAQEBBQADSwAwSAJBAKj34GkxFhD90vcNLYLInFEX6Ppy1tPf\n"
    b"-----END PUBLIC KEY-----\n"
)


def _body_lines(text):
    return text.splitlines()


def test_pem_layout_breaks_literal_after_each_newline():
    text = encode_c_string(PEM, "prc_pubkey", 1)
    assert text == (
        "static const char * const prc_pubkey1_data =\n"
        "  \"-----BEGIN PUBLIC KEY-----\\n\"\n"
        "  \"MFwwDQYJKoZIhvcNAQEBBQADSwAwSAJBAKj34GkxFhD90vcNLYLInFEX6Ppy1tPf\\n\"\n"
        "  \"-----END PUBLIC KEY-----\\n\";\n"
        f"static const unsigned int prc_pubkey1_length = {len(PEM)};\n"
    )


def test_writes_to_supplied_stream():
    out = io.StringIO()
    out.write("// header\n")
    write_c_string(out, b"abc", "sym", 7)
    assert out.getvalue().startswith("// header\nstatic const char * const sym7_data =")
    assert "sym7_length = 3;" in out.getvalue()


def test_all_byte_values_roundtrip():
    data = bytes(range(256)) * 3
    text = encode_c_string(data, "blob", 0)
    assert parse_c_strings(text) == {"blob0": data}


def test_output_is_printable_ascii_only():
    data = bytes(range(256))
    text = encode_c_string(data, "blob", 0)
    for line in _body_lines(text):
        assert "\t" not in line
        assert all(0x20 <= ord(c) <= 0x7E for c in line)


def test_length_counts_source_bytes_not_escapes():
    data = b"\x00\x01\t\n\xff" * 10
    text = encode_c_string(data, "k", 2)
    assert "k2_length = 50;" in text
    assert len(decode_c_string(text.split("=", 1)[1])) == 50


def test_control_bytes_use_hex_escapes():
    assert '"\\x00\\x7f\\xff"' in encode_c_string(b"\x00\x7f\xff", "k", 1)


def test_hex_escape_followed_by_hex_digit_splits_literal():
    text = encode_c_string(b"\x01a\x02g", "k", 1)
    assert '"\\x01" "a\\x02g"' in text
    assert parse_c_strings(text)["k1"] == b"\x01a\x02g"


def test_quote_and_backslash_are_escaped():
    data = b'say "hi" \\ bye'
    text = encode_c_string(data, "k", 1)
    assert '\\"hi\\"' in text and "\\\\" in text
    assert parse_c_strings(text)["k1"] == data


def test_trailing_newline_does_not_open_empty_literal():
    text = encode_c_string(b"a\n", "k", 1)
    assert '"a\\n";' in text
    assert '""' not in text


def test_empty_payload():
    text = encode_c_string(b"", "k", 3)
    assert 'k3_data =\n  "";' in text
    assert "k3_length = 0;" in text
    assert parse_c_strings(text) == {"k3": b""}


def test_multi_kilobyte_payload_not_truncated():
    data = (PEM * 40) + bytes(range(256))
    assert len(data) > 4096
    assert parse_c_strings(encode_c_string(data, "big", 1))["big1"] == data


def test_length_mismatch_is_rejected():
    text = encode_c_string(b"abc", "k", 1).replace("k1_length = 3", "k1_length = 4")
    with pytest.raises(ValueError):
        parse_c_strings(text)


@pytest.mark.parametrize("data", [b"??=", b"a??/b", b"???", b"?\n?"])
def test_trigraph_sequences_never_reach_the_literal(data):
    text = encode_c_string(data, "k", 1)
    body = text.split("=", 1)[1]
    assert "??" not in body.split(";")[0]
    assert parse_c_strings(text)["k1"] == data


def test_c_literal_single_line():
    assert c_literal(b"plain") == '"plain"'
    assert c_literal(b'my"key') == '"my\\"key"'
    assert c_literal("clé".encode("utf-8")) == '"cl\\xc3\\xa9"'
    assert c_literal(b"a\nb") == '"a\\nb"'
    assert decode_c_string(c_literal(b"\x01f??")) == b"\x01f??"

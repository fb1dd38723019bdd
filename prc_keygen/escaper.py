"""
prc_keygen.escaper
------------------
Turns an opaque byte buffer (a PEM key blob) into a C/C++ string constant
plus a length constant, and parses that text back into bytes.

The emitted literal breaks after every newline in the payload so that a
generated file diffs line by line like the PEM it embeds:

    static const char * const prc_pubkey1_data =
      "-----BEGIN PUBLIC KEY-----\\n"
      "MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEA...\\n"
      "-----END PUBLIC KEY-----\\n";
    static const unsigned int prc_pubkey1_length = 451;
"""

from __future__ import annotations
import io, re
from typing import Dict, TextIO

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

_SIMPLE_ESCAPES = {
    ord("\t"): "\\t",
    ord('"'): '\\"',
    ord("\\"): "\\\\",
}

_DATA_RE = re.compile(
    r"static\s+const\s+char\s*\*\s*const\s+(\w+?)_data\s*=\s*((?:\"(?:[^\"\\\n]|\\.)*\"\s*)*);"
)
_LENGTH_RE = re.compile(r"static\s+const\s+unsigned\s+int\s+(\w+?)_length\s*=\s*(\d+)\s*;")
_LITERAL_RE = re.compile(r"\"((?:[^\"\\\n]|\\.)*)\"")
_ESCAPE_RE = re.compile(r"\\(x[0-9a-fA-F]{2}|.)")
_UNESCAPES = {"n": "\n", "t": "\t", "?": "?", '"': '"', "\\": "\\"}


def _write_escaped(out: TextIO, data: bytes, line_break: str = "") -> None:
    # line_break is written before any byte that follows a newline
    last_nl = False
    last_hex = False
    last_q = False
    for b in data:
        if b == 0x0A:
            out.write("\\n")
            last_nl = True
            last_hex = last_q = False
            continue

        if last_nl:
            out.write(line_break)
            last_nl = False
        elif last_hex and b in _HEX_DIGITS:
            # keep the next digit out of the previous \x escape
            out.write("\" \"")

        if b == 0x3F and last_q:
            # no "??" pair may reach the compiler (trigraphs)
            out.write("\\?")
        elif b in _SIMPLE_ESCAPES:
            out.write(_SIMPLE_ESCAPES[b])
        elif 0x20 <= b <= 0x7E:
            out.write(chr(b))
        else:
            out.write(f"\\x{b:02x}")
        last_hex = b not in _SIMPLE_ESCAPES and not 0x20 <= b <= 0x7E
        last_q = b == 0x3F


def c_literal(data: bytes) -> str:
    """Single-line C string literal, quotes included, for ``data``."""
    buf = io.StringIO()
    buf.write("\"")
    _write_escaped(buf, data)
    buf.write("\"")
    return buf.getvalue()


def write_c_string(out: TextIO, data: bytes, symbol_base: str, index: int) -> None:
    """Write ``{symbol_base}{index}_data`` and ``{symbol_base}{index}_length``
    definitions for ``data`` to ``out``."""
    out.write(f"static const char * const {symbol_base}{index}_data =\n  \"")
    _write_escaped(out, data, line_break="\"\n  \"")
    out.write(f"\";\nstatic const unsigned int {symbol_base}{index}_length = {len(data)};\n")


def encode_c_string(data: bytes, symbol_base: str, index: int) -> str:
    buf = io.StringIO()
    write_c_string(buf, data, symbol_base, index)
    return buf.getvalue()


def _unescape(literal: str) -> bytes:
    def repl(m: re.Match) -> str:
        esc = m.group(1)
        if esc[0] == "x" and len(esc) == 3:
            return chr(int(esc[1:], 16))
        if esc not in _UNESCAPES:
            raise ValueError(f"unsupported escape sequence \\{esc}")
        return _UNESCAPES[esc]

    return _ESCAPE_RE.sub(repl, literal).encode("latin-1")


def decode_c_string(text: str) -> bytes:
    """Decode the concatenated string literals of one ``_data`` definition
    (or any run of adjacent literals) back into the original bytes."""
    return b"".join(_unescape(m.group(1)) for m in _LITERAL_RE.finditer(text))


def parse_c_strings(text: str) -> Dict[str, bytes]:
    """Find every ``<name>_data`` constant in generated source and return
    ``{name: bytes}``. A ``<name>_length`` constant that disagrees with the
    decoded payload raises ValueError."""
    lengths = {m.group(1): int(m.group(2)) for m in _LENGTH_RE.finditer(text)}
    found: Dict[str, bytes] = {}
    for m in _DATA_RE.finditer(text):
        name = m.group(1)
        data = decode_c_string(m.group(2))
        if name in lengths and lengths[name] != len(data):
            raise ValueError(
                f"{name}_length is {lengths[name]} but {name}_data holds {len(data)} bytes"
            )
        found[name] = data
    return found

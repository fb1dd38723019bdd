"""
prc_keygen.writers
------------------
Emits the two kinds of generated source:

- the public key table compiled into the verifier (one file per run)
- one signing program source per trust level holding that level's private key

Each file is opened, written in full, and closed before anything else is
touched; nothing is patched in place.
"""

from __future__ import annotations
from typing import Optional, TextIO
import io, logging, os

from .constants import (
    PRIVKEY_SYMBOL, PUBKEY_COUNT, PUBKEY_SYMBOL, PUBKEY_TABLE,
    REGISTRY_HEADER, SIGN_TEMPLATE, TOOL_NAME,
)
from .crypto import CryptoProvider, KeyPair
from .errors import KeyFileIOError
from .escaper import c_literal, write_c_string
from .naming import ResolvedName
from .registry import KeyRegistry

log = logging.getLogger("prc_keygen.writers")


def _write_output(path: str, text: str) -> None:
    log.info("Rewriting %s", path, extra={"path": path})
    try:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(text)
    except (OSError, UnicodeEncodeError) as e:
        reason = getattr(e, "strerror", None) or e
        raise KeyFileIOError(f"Unable to write {path}: {reason}", path) from e


def render_public_keys(out: TextIO, registry: KeyRegistry) -> None:
    out.write(
        "\n"
        f"// This file was generated by {TOOL_NAME}.  It defines the public keys\n"
        "// that will be used to validate signed prc files.\n"
        "\n"
        f"#include \"{REGISTRY_HEADER}\"\n"
        "\n"
    )

    for entry in registry:
        if not entry.is_empty:
            write_c_string(out, entry.public_key, PUBKEY_SYMBOL, entry.index)
            out.write("\n")

    count = len(registry)
    out.write(f"static PrcKeyRegistry::KeyDef const {PUBKEY_TABLE}[{count}] = {{\n")
    for entry in registry:
        if entry.is_empty:
            out.write("  { nullptr, 0, 0 },\n")
        else:
            i = entry.index
            out.write(
                f"  {{ {PUBKEY_SYMBOL}{i}_data, {PUBKEY_SYMBOL}{i}_length, {entry.generated_at} }},\n"
            )
    out.write("};\n" f"static const int {PUBKEY_COUNT} = {count};\n\n")


def write_public_keys(registry: KeyRegistry, path: str) -> None:
    """Rewrite ``path`` with every key slot in ``registry``."""
    out = io.StringIO()
    render_public_keys(out, registry)
    _write_output(path, out.getvalue())
    log.info("Wrote %d key slots to %s", len(registry), path, extra={"path": path})


def write_private_key(key_pair: KeyPair, resolved: ResolvedName, level: int,
                      generated_at: int, passphrase: Optional[str],
                      provider: CryptoProvider) -> None:
    """Write the signing program source for trust level ``level``.

    The whole file is rendered before it is opened, so a provider failure
    leaves no half-written file behind.
    """
    pem = provider.encode_private_key_pkcs8(key_pair, passphrase)
    unencrypted = passphrase == ""
    if unencrypted:
        log.warning("Private key %d is stored unencrypted in %s", level, resolved.path,
                    extra={"path": resolved.path})

    out = io.StringIO()
    out.write(
        "\n"
        f"// This file was generated by {TOOL_NAME}.  It can be compiled against\n"
        f"// dtool to produce a program that will sign a prc file using key number {level}.\n"
    )
    if unencrypted:
        out.write("// The private key below is NOT encrypted; no pass phrase is required.\n")
    out.write("\n")

    write_c_string(out, pem, PRIVKEY_SYMBOL, level)

    out.write(
        "\n\n"
        f"#define KEY_NUMBER {level}\n"
        f"#define KEY_DATA {PRIVKEY_SYMBOL}{level}_data\n"
        f"#define KEY_LENGTH {PRIVKEY_SYMBOL}{level}_length\n"
        f"#define PROGNAME {c_literal(os.fsencode(resolved.progname))}\n"
        f"#define GENERATED_TIME {generated_at}\n\n"
        f"#include \"{SIGN_TEMPLATE}\"\n\n"
    )
    _write_output(resolved.path, out.getvalue())

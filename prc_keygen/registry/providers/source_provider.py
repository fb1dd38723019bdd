"""
Registry backed by a previously generated public key file.

This is the file the verifier was compiled with; reading it back lets a new
run add or replace trust levels while keeping every other key intact.
"""

from __future__ import annotations
from typing import List
import logging, os, re

from prc_keygen.constants import PUBKEY_SYMBOL, PUBKEY_TABLE
from prc_keygen.errors import KeyFileIOError
from prc_keygen.escaper import parse_c_strings
from prc_keygen.registry.models import KeyRegistryEntry
from prc_keygen.registry.provider import RegistryProvider

log = logging.getLogger("prc_keygen.registry")

_TABLE_RE = re.compile(
    r"KeyDef\s+const\s+" + PUBKEY_TABLE + r"\[\s*(\d+)\s*\]\s*=\s*\{(.*?)\};", re.S
)
_ROW_RE = re.compile(r"\{\s*(nullptr|NULL|0|(\w+?)_data)\s*,\s*\w+\s*,\s*(\d+)\s*\}")


class SourceFileRegistry(RegistryProvider):
    def __init__(self, path: str):
        self.path = path

    def load_existing(self) -> List[KeyRegistryEntry]:
        if not os.path.exists(self.path):
            log.info("No existing public key file at %s; starting empty", self.path)
            return []

        try:
            with open(self.path, "r", encoding="ascii") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise KeyFileIOError(f"Unable to read {self.path}: {e}", self.path) from e

        try:
            return self._parse(text)
        except ValueError as e:
            raise KeyFileIOError(f"Cannot parse public keys in {self.path}: {e}", self.path) from e

    def _parse(self, text: str) -> List[KeyRegistryEntry]:
        table = _TABLE_RE.search(text)
        if not table:
            raise ValueError(f"no {PUBKEY_TABLE} table found")
        count = int(table.group(1))
        rows = _ROW_RE.findall(table.group(2))
        if len(rows) != count:
            raise ValueError(f"{PUBKEY_TABLE} declares {count} entries but lists {len(rows)}")

        blobs = parse_c_strings(text)
        entries: List[KeyRegistryEntry] = []
        for index, (_, name, generated_at) in enumerate(rows):
            if not name:
                entries.append(KeyRegistryEntry(index=index))
                continue
            if name != f"{PUBKEY_SYMBOL}{index}":
                raise ValueError(f"slot {index} refers to {name}_data")
            if name not in blobs:
                raise ValueError(f"{name}_data is not defined")
            entries.append(KeyRegistryEntry(index, blobs[name], int(generated_at)))

        log.info("Loaded %d existing key slots from %s", len(entries), self.path)
        return entries

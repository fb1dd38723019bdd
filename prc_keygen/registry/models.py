# prc_keygen/registry/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class KeyRegistryEntry:
    """
    One slot of the public key table.

    ``index`` is the trust level itself, so slot 0 is never populated.
    An entry with ``public_key`` None is an empty placeholder.
    """
    index: int
    public_key: Optional[bytes] = None   # PEM SubjectPublicKeyInfo
    generated_at: int = 0

    @property
    def is_empty(self) -> bool:
        return self.public_key is None


@dataclass
class KeyRegistry:
    """Dense, zero-based table of public keys, loaded once and written once per run."""
    entries: List[KeyRegistryEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def _grow(self, count: int) -> None:
        while len(self.entries) < count:
            self.entries.append(KeyRegistryEntry(index=len(self.entries)))

    def set_key(self, index: int, public_key: bytes, generated_at: int) -> None:
        if index < 0:
            raise ValueError(f"registry index must be non-negative, got {index}")
        self._grow(index + 1)
        self.entries[index] = KeyRegistryEntry(index, public_key, generated_at)

    def get_entry(self, index: int) -> KeyRegistryEntry:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return KeyRegistryEntry(index=index)

    def record_keys(self, entries: Iterable[KeyRegistryEntry]) -> None:
        """Fold previously known keys in; empty placeholders only extend the table."""
        for e in entries:
            if e.is_empty:
                self._grow(e.index + 1)
            else:
                self.set_key(e.index, e.public_key, e.generated_at)

"""
prc_keygen.generator
--------------------
Runs one batch: a fresh key pair per requested trust level, a signing
program source per level, then the merged public key table.

Levels are processed strictly in order. If a level fails, the files of
the levels before it stay on disk and the public key table is not written.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

from .crypto import CryptoProvider, KeyPairGenerator
from .keyspec import KeySpec
from .naming import OutputPattern
from .registry import KeyRegistry
from .utils import now_epoch
from .writers import write_private_key, write_public_keys

log = logging.getLogger("prc_keygen.generator")


@dataclass
class GenerationResult:
    public_path: str
    private_paths: List[str] = field(default_factory=list)
    generated_at: int = 0


def generate_keys(key_specs: Sequence[KeySpec], private_pattern: str, public_path: str,
                  registry: KeyRegistry, provider: Optional[CryptoProvider] = None,
                  now: Optional[int] = None) -> GenerationResult:
    provider = provider or CryptoProvider()
    now = now_epoch() if now is None else now
    # every key of one run carries the same timestamp
    generator = KeyPairGenerator(provider, clock=lambda: now)
    pattern = OutputPattern.from_path(private_pattern)

    result = GenerationResult(public_path=public_path, generated_at=now)
    for spec in key_specs:
        key_pair = generator.generate()
        registry.set_key(spec.level, provider.encode_public_key(key_pair), key_pair.generated_at)

        resolved = pattern.resolve(spec.level)
        write_private_key(key_pair, resolved, spec.level, key_pair.generated_at,
                          spec.passphrase, provider)
        result.private_paths.append(resolved.path)
        if not resolved.explicit_suffix:
            log.info("Key %d written without a level number in its name", spec.level,
                     extra={"path": resolved.path})
        log.info("Generated key %d -> %s", spec.level, resolved.path, extra={"path": resolved.path})

    write_public_keys(registry, public_path)
    return result

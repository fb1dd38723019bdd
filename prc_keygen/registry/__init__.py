# prc_keygen/registry/__init__.py

from __future__ import annotations
from .models import KeyRegistryEntry, KeyRegistry
from .provider import RegistryProvider
from .providers.memory_provider import InMemoryRegistry
from .providers.source_provider import SourceFileRegistry
from prc_keygen.errors import InvalidArgument
import os


def load_registry_provider(config: dict | None = None) -> RegistryProvider:
    """
    Factory resolver for the registry of previously known public keys.

    For now:
        - source (default when a public key file is named)
        - memory
    """
    config = config or {}
    path = config.get("source_path") or os.getenv("PRC_PUBLIC_KEYS_FILENAME")
    provider = config.get("provider") or os.getenv(
        "PRC_REGISTRY_PROVIDER", "source" if path else "memory"
    )

    if provider == "memory":
        return InMemoryRegistry()

    if provider == "source":
        if not path:
            raise InvalidArgument("source registry provider needs a public key file path")
        return SourceFileRegistry(path)

    raise InvalidArgument(f"Unknown registry provider: {provider}")


__all__ = [
    "KeyRegistryEntry",
    "KeyRegistry",
    "RegistryProvider",
    "InMemoryRegistry",
    "SourceFileRegistry",
    "load_registry_provider",
]

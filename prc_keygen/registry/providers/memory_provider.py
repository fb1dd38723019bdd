from typing import Iterable, List, Optional
from prc_keygen.registry.models import KeyRegistryEntry
from prc_keygen.registry.provider import RegistryProvider


class InMemoryRegistry(RegistryProvider):
    def __init__(self, entries: Optional[Iterable[KeyRegistryEntry]] = None):
        self.entries = list(entries or [])

    def load_existing(self) -> List[KeyRegistryEntry]:
        return list(self.entries)

from typing import List
from prc_keygen.registry.models import KeyRegistryEntry


class RegistryProvider:
    # Interface
    def load_existing(self) -> List[KeyRegistryEntry]: ...

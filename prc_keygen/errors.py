from __future__ import annotations
from typing import List, Optional


class PrcKeyError(Exception):
    pass


class InvalidArgument(PrcKeyError, ValueError):
    pass


class CryptoProviderError(PrcKeyError):
    """Raised when key generation or key encoding fails.

    ``messages`` holds the diagnostic strings reported by the provider.
    """

    def __init__(self, message: str, messages: Optional[List[str]] = None):
        super().__init__(message)
        self.messages = list(messages or [])


class KeyFileIOError(PrcKeyError):
    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path

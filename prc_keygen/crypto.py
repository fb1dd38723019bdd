"""
prc_keygen.crypto
-----------------
Cryptographic collaborator for prc_keygen, backed by ``cryptography``:

- RSA key pair generation
- PEM SubjectPublicKeyInfo encoding of public keys
- PEM PKCS8 encoding of private keys, optionally passphrase-encrypted

Failures never terminate the process here; they are collected and raised as
CryptoProviderError for the command line layer to report.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional
import getpass, logging, time

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .constants import KEY_BITS, PUBLIC_EXPONENT
from .errors import CryptoProviderError

log = logging.getLogger("prc_keygen.crypto")


@dataclass(frozen=True)
class KeyPair:
    private_key: rsa.RSAPrivateKey
    generated_at: int

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self.private_key.public_key()


def prompt_passphrase(prompt: str = "Enter pass phrase: ") -> str:
    """Interactive default used when no pass phrase was supplied."""
    first = getpass.getpass(prompt)
    second = getpass.getpass("Verifying - " + prompt)
    if first != second:
        raise CryptoProviderError("Verify failure", ["pass phrases do not match"])
    return first


class CryptoProvider:
    def __init__(self, prompt: Callable[[], str] = prompt_passphrase):
        self._prompt = prompt
        self._errors: List[str] = []

    def _fail(self, what: str, exc: Exception) -> CryptoProviderError:
        self._errors.append(f"{type(exc).__name__}: {exc}")
        return CryptoProviderError(what, self.last_error_messages())

    def last_error_messages(self) -> List[str]:
        """Return and clear the diagnostics collected since the last call."""
        errors, self._errors = self._errors, []
        return errors

    def generate_key_pair(self, bits: int, public_exponent: int, generated_at: int) -> KeyPair:
        try:
            sk = rsa.generate_private_key(public_exponent=public_exponent, key_size=bits)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise self._fail("RSA key generation failed", e) from e
        return KeyPair(private_key=sk, generated_at=generated_at)

    def encode_public_key(self, key_pair: KeyPair) -> bytes:
        try:
            return key_pair.public_key.public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        except (ValueError, UnsupportedAlgorithm) as e:
            raise self._fail("Public key encoding failed", e) from e

    def encode_private_key_pkcs8(self, key_pair: KeyPair, passphrase: Optional[str]) -> bytes:
        """PEM PKCS8 encoding of the private half.

        passphrase None prompts interactively; "" writes the key unencrypted.
        """
        if passphrase is None:
            passphrase = self._prompt()
            if not passphrase:
                raise CryptoProviderError(
                    "Private key encryption failed", ["empty pass phrase entered at prompt"]
                )

        if passphrase == "":
            encryption = serialization.NoEncryption()
        else:
            encryption = serialization.BestAvailableEncryption(passphrase.encode("utf-8"))

        try:
            return key_pair.private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=encryption,
            )
        except (ValueError, UnsupportedAlgorithm) as e:
            raise self._fail("Private key encoding failed", e) from e


class KeyPairGenerator:
    """Produces one fresh RSA key pair per call, stamped from ``clock``."""

    def __init__(self, provider: CryptoProvider, clock: Callable[[], float] = time.time,
                 bits: int = KEY_BITS, public_exponent: int = PUBLIC_EXPONENT):
        self.provider = provider
        self.clock = clock
        self.bits = bits
        self.public_exponent = public_exponent

    def generate(self) -> KeyPair:
        generated_at = int(self.clock())
        log.debug("Generating %d-bit RSA key", self.bits)
        return self.provider.generate_key_pair(self.bits, self.public_exponent, generated_at)

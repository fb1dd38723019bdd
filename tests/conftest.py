import pytest
from prc_keygen.crypto import CryptoProvider, KeyPairGenerator


@pytest.fixture(scope="session")
def key_pair():
    return KeyPairGenerator(CryptoProvider(), clock=lambda: 1700000000).generate()


@pytest.fixture
def no_prompt():
    """Provider whose interactive prompt must never be reached."""
    def prompt():
        raise AssertionError("unexpected pass phrase prompt")
    return CryptoProvider(prompt=prompt)

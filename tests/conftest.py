"""Pytest fixtures for primcrypt tests."""
import pytest
from Crypto.PublicKey import RSA
from Crypto.Random import get_random_bytes


@pytest.fixture
def aes_key():
    """Generates a 16-byte AES-128 key for testing."""
    return get_random_bytes(16)


@pytest.fixture
def gcm_iv():
    """Generates a 12-byte GCM IV for testing."""
    return get_random_bytes(12)


@pytest.fixture(scope="session")
def rsa_private_key():
    """Generates one 1024-bit RSA key pair shared by the RSA tests."""
    return RSA.generate(1024)


@pytest.fixture(scope="session")
def rsa_spki_der(rsa_private_key):
    """SubjectPublicKeyInfo DER for the shared key pair."""
    return rsa_private_key.publickey().export_key('DER')

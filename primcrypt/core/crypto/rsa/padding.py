"""
Nonzero padding-byte sources for PKCS#1 v1.5 Type 2 encryption.

RSAService asks a PaddingSource for the PS string, so the generator can be
swapped without touching DER parsing or the modular exponentiation.
"""
from abc import ABC, abstractmethod

from Crypto.Random import get_random_bytes

from ...logging import get_logger

logger = get_logger(__name__)

_MASK = 0xFFFFFFFF


class PaddingSource(ABC):
    """Abstract base class for padding-byte sources."""
    
    @abstractmethod
    def nonzero_bytes(self, length: int, message: bytes) -> bytes:
        """Returns length bytes, none of them zero."""
        pass


class DeterministicPaddingSource(PaddingSource):
    """
    Linear congruential generator seeded from the message.
    
    INSECURE: the same message always gets the same padding, so
    ciphertexts are reproducible and guessable. Use it only for
    reproducible tests; real use needs SecurePaddingSource.
    """
    
    def __init__(self):
        logger.warning(
            "DeterministicPaddingSource is not cryptographically secure; "
            "use SecurePaddingSource outside of tests"
        )
    
    def nonzero_bytes(self, length: int, message: bytes) -> bytes:
        """Generates padding from an LCG seeded with the message bytes."""
        state = 0
        for b in message:
            state = (state * 31 + b) & _MASK
        state ^= 0xDEADBEEF
        
        out = bytearray(length)
        for i in range(length):
            state = (state * 1103515245 + 12345) & _MASK
            out[i] = ((state >> 16) & 0xFF) or 1
        return bytes(out)


class SecurePaddingSource(PaddingSource):
    """Padding drawn from pycryptodome's CSPRNG, zero bytes rejected."""
    
    def nonzero_bytes(self, length: int, message: bytes) -> bytes:
        """Generates length random nonzero bytes."""
        out = bytearray()
        while len(out) < length:
            out += bytes(b for b in get_random_bytes(length - len(out)) if b)
        return bytes(out)

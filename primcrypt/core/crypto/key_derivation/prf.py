"""TLS 1.2 pseudorandom function (RFC 5246, section 5) using Strategy Pattern."""
from abc import ABC, abstractmethod
from typing import Union

from ..hashing.hmac_sha256 import hmac_sha256
from ..utils.key_utils import BytesLike, ensure_bytes
from ...logging import get_logger

logger = get_logger(__name__)


def p_hash(secret: BytesLike, seed: BytesLike, out_len: int) -> bytes:
    """
    P_SHA256 data expansion.
    
    A(0) = seed, A(i) = HMAC(secret, A(i-1)); the output is
    HMAC(secret, A(1) + seed) + HMAC(secret, A(2) + seed) + ...
    truncated to out_len bytes.
    """
    if out_len < 0:
        raise ValueError("Output length cannot be negative")
    secret = bytes(secret)
    seed = bytes(seed)
    
    output = bytearray()
    a = hmac_sha256(secret, seed)
    while len(output) < out_len:
        output += hmac_sha256(secret, a + seed)
        a = hmac_sha256(secret, a)
    return bytes(output[:out_len])


def prf(
    secret: BytesLike,
    label: Union[str, BytesLike],
    seed: BytesLike,
    out_len: int
) -> bytes:
    """
    TLS 1.2 PRF: P_SHA256(secret, label + seed).
    
    Args:
        secret: PRF secret (e.g. the pre-master secret)
        label: ASCII label such as "master secret"
        seed: Seed bytes (e.g. client_random + server_random)
        out_len: Number of bytes to produce
        
    Returns:
        out_len pseudorandom bytes
    """
    label = label.encode('ascii') if isinstance(label, str) else bytes(label)
    logger.debug(f"prf(): label={label!r}, seed_len={len(seed)}, out_len={out_len}")
    return p_hash(secret, label + bytes(seed), out_len)


class KeyDeriver(ABC):
    """Abstract base class for key derivation."""
    
    @abstractmethod
    def derive(self, secret: bytes, label: Union[str, bytes], seed: bytes, length: int) -> bytes:
        """Derives length bytes of key material."""
        pass


class Tls12PrfDeriver(KeyDeriver):
    """Key derivation with the TLS 1.2 SHA-256 PRF."""
    
    def derive(self, secret: bytes, label: Union[str, bytes], seed: bytes, length: int) -> bytes:
        """Derives key material with PRF(secret, label, seed)."""
        return prf(ensure_bytes(secret), label, ensure_bytes(seed), length)

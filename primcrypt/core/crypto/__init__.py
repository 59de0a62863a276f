"""Crypto module - pure-Python primitives behind a function API."""
from functools import lru_cache
from typing import Optional

from .bigint import BigInt
from .utils import HexEncoder, to_hex_str, constant_time_equals
from .utils.key_utils import BytesLike
from .hashing import sha256, checksum_hex, hmac_sha256
from .key_derivation import prf, p_hash, KeyDeriver, Tls12PrfDeriver
from .aes import (
    AESCrypto,
    aes128_encrypt,
    aes128_decrypt,
    gcm_encrypt,
    gcm_decrypt,
)
from .rsa import (
    RSAService,
    RSAKeyDecoder,
    RsaPublicKey,
    PaddingSource,
    DeterministicPaddingSource,
    SecurePaddingSource,
    parse_public_key,
)
from ..exceptions import MessageTooLongError
from ..logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _default_rsa_service() -> RSAService:
    return RSAService()


def rsa_parse_public_key(der: BytesLike) -> Optional[RsaPublicKey]:
    """Parses a DER RSA public key; None if malformed."""
    return parse_public_key(der)


def rsa_encrypt(
    key: RsaPublicKey,
    plaintext: BytesLike,
    padding_source: Optional[PaddingSource] = None
) -> Optional[bytes]:
    """
    Encrypts with RSA PKCS#1 v1.5 Type 2 padding.
    
    Without an explicit padding_source the default (deterministic) one is
    used. Returns None if the message is too long for the key.
    """
    service = RSAService(padding_source=padding_source) if padding_source else _default_rsa_service()
    try:
        return service.encrypt(key, plaintext)
    except MessageTooLongError as e:
        logger.debug(f"rsa_encrypt(): {e}")
        return None


def rsa_verify(key: RsaPublicKey, digest: BytesLike, signature: BytesLike) -> bool:
    """Verifies an RSA PKCS#1 v1.5 SHA-256 signature over a 32-byte digest."""
    return _default_rsa_service().verify(key, digest, signature)


__all__ = [
    # Function API
    'sha256',
    'to_hex_str',
    'checksum_hex',
    'hmac_sha256',
    'prf',
    'p_hash',
    'aes128_encrypt',
    'aes128_decrypt',
    'gcm_encrypt',
    'gcm_decrypt',
    'rsa_parse_public_key',
    'rsa_encrypt',
    'rsa_verify',
    'constant_time_equals',
    # Classes
    'BigInt',
    'HexEncoder',
    'AESCrypto',
    'KeyDeriver',
    'Tls12PrfDeriver',
    'RSAService',
    'RSAKeyDecoder',
    'RsaPublicKey',
    'PaddingSource',
    'DeterministicPaddingSource',
    'SecurePaddingSource',
]

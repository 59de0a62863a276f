"""RSA public-key module."""
from .rsa_service import RSAService, SHA256_DIGEST_INFO_PREFIX
from .rsa_key_decoder import RSAKeyDecoder, RsaPublicKey, DerReader, parse_public_key
from .padding import PaddingSource, DeterministicPaddingSource, SecurePaddingSource

__all__ = [
    'RSAService',
    'SHA256_DIGEST_INFO_PREFIX',
    'RSAKeyDecoder',
    'RsaPublicKey',
    'DerReader',
    'parse_public_key',
    'PaddingSource',
    'DeterministicPaddingSource',
    'SecurePaddingSource',
]

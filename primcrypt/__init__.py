"""
primcrypt - Pure-Python cryptographic primitives.

BigInt arithmetic, SHA-256, HMAC-SHA256, the TLS 1.2 PRF, AES-128 and
AES-128-GCM, and RSA public-key operations (PKCS#1 v1.5).

Usage:
    >>> from primcrypt import sha256, to_hex_str
    >>> to_hex_str(sha256(b"abc"))
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""
from .core import (
    CryptoConfig,
    CryptoException,
    PreconditionError,
    DivisionByZeroError,
    DerDecodeError,
    AuthenticationError,
    MessageTooLongError,
)
from .core.crypto import (
    sha256,
    to_hex_str,
    checksum_hex,
    hmac_sha256,
    prf,
    aes128_encrypt,
    aes128_decrypt,
    gcm_encrypt,
    gcm_decrypt,
    rsa_parse_public_key,
    rsa_encrypt,
    rsa_verify,
    BigInt,
    AESCrypto,
    Tls12PrfDeriver,
    RSAService,
    RSAKeyDecoder,
    RsaPublicKey,
    DeterministicPaddingSource,
    SecurePaddingSource,
)
from .core.logging import setup_logging

__version__ = '1.0.0'

__all__ = [
    'sha256',
    'to_hex_str',
    'checksum_hex',
    'hmac_sha256',
    'prf',
    'aes128_encrypt',
    'aes128_decrypt',
    'gcm_encrypt',
    'gcm_decrypt',
    'rsa_parse_public_key',
    'rsa_encrypt',
    'rsa_verify',
    'BigInt',
    'AESCrypto',
    'Tls12PrfDeriver',
    'RSAService',
    'RSAKeyDecoder',
    'RsaPublicKey',
    'DeterministicPaddingSource',
    'SecurePaddingSource',
    'CryptoConfig',
    'CryptoException',
    'PreconditionError',
    'DivisionByZeroError',
    'DerDecodeError',
    'AuthenticationError',
    'MessageTooLongError',
    'setup_logging',
]

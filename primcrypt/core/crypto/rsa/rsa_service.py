"""RSA PKCS#1 v1.5 encryption and SHA-256 signature verification service."""
from typing import Optional, Union

from .padding import PaddingSource
from .rsa_key_decoder import RsaPublicKey
from ..bigint import BigInt
from ..hashing.sha256 import DIGEST_SIZE, sha256
from ..utils.key_utils import BytesLike
from ...config import CryptoConfig
from ...exceptions import MessageTooLongError
from ...logging import get_logger

logger = get_logger(__name__)

# DER DigestInfo header for SHA-256 (RFC 8017, section 9.2 note 1)
SHA256_DIGEST_INFO_PREFIX = bytes.fromhex('3031300d060960864801650304020105000420')

# 00 || 02 || PS (at least 8 bytes) || 00
PKCS1_OVERHEAD = 11
MIN_PADDING_LENGTH = 8


class RSAService:
    """RSA public-key operations: Type 2 encryption and Type 1 verification."""
    
    def __init__(
        self,
        config: Optional[CryptoConfig] = None,
        padding_source: Optional[PaddingSource] = None
    ):
        """
        Initializes RSA service.
        
        Args:
            config: Crypto configuration (default padding when omitted)
            padding_source: Explicit padding source, overrides config
        """
        self.config = config or CryptoConfig.default()
        self.padding_source = padding_source or self.config.create_padding_source()
    
    def encrypt(self, key: RsaPublicKey, plaintext: BytesLike) -> bytes:
        """
        Encrypts a message with PKCS#1 v1.5 Type 2 padding.
        
        Args:
            key: Recipient public key
            plaintext: Message, at most k - 11 bytes
            
        Returns:
            Ciphertext of exactly k bytes
            
        Raises:
            MessageTooLongError: If the message does not fit the modulus
        """
        plaintext = bytes(plaintext)
        k = key.size_in_bytes
        if k < len(plaintext) + PKCS1_OVERHEAD:
            max_length = max(k - PKCS1_OVERHEAD, 0)
            raise MessageTooLongError(
                f"Message of {len(plaintext)} bytes exceeds {max_length} bytes for a {k}-byte modulus",
                max_length=max_length
            )
        
        ps = self.padding_source.nonzero_bytes(k - len(plaintext) - 3, plaintext)
        em = b'\x00\x02' + ps + b'\x00' + plaintext
        logger.debug(f"encrypt(): k={k}, msg_len={len(plaintext)}, ps_len={len(ps)}")
        
        c = BigInt.mod_pow(BigInt.from_bytes(em), key.e, key.n)
        return c.to_bytes(k)
    
    def verify(self, key: RsaPublicKey, digest: BytesLike, signature: BytesLike) -> bool:
        """
        Verifies a PKCS#1 v1.5 SHA-256 signature over a precomputed digest.
        
        Returns:
            True only if EM is exactly 00 01 FF..FF 00 DigestInfo || digest
        """
        digest = bytes(digest)
        signature = bytes(signature)
        k = key.size_in_bytes
        
        if len(signature) != k:
            logger.debug(f"verify(): signature length {len(signature)} != {k}")
            return False
        if len(digest) != DIGEST_SIZE:
            logger.debug(f"verify(): digest length {len(digest)} != {DIGEST_SIZE}")
            return False
        if k < PKCS1_OVERHEAD + len(SHA256_DIGEST_INFO_PREFIX) + DIGEST_SIZE:
            return False
        
        s = BigInt.from_bytes(signature)
        if s >= key.n:
            return False
        em = BigInt.mod_pow(s, key.e, key.n).to_bytes(k)
        
        if em[0] != 0x00 or em[1] != 0x01:
            return False
        i = 2
        while i < k and em[i] == 0xFF:
            i += 1
        if i - 2 < MIN_PADDING_LENGTH or i >= k or em[i] != 0x00:
            logger.debug("verify(): malformed padding")
            return False
        
        return em[i + 1:] == SHA256_DIGEST_INFO_PREFIX + digest
    
    def verify_message(
        self,
        key: RsaPublicKey,
        message: Union[str, BytesLike],
        signature: BytesLike
    ) -> bool:
        """Hashes message with SHA-256 and verifies the signature over it."""
        return self.verify(key, sha256(message), signature)

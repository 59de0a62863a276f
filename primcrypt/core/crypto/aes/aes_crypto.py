"""AES-128 crypto class bound to one key."""
from typing import Tuple

from .block_cipher import KEY_SIZE, aes128_decrypt, aes128_encrypt
from .gcm import gcm_decrypt, gcm_encrypt
from ...exceptions import AuthenticationError


class AESCrypto:
    """
    AES-128 operations with a fixed key.
    
    Only the key is stored; the round keys are expanded on each call.
    """
    
    def __init__(self, key: bytes):
        """Initializes AES crypto with a 16-byte key."""
        if not key:
            raise ValueError("Key cannot be empty")
        if len(key) != KEY_SIZE:
            raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
        self.key = bytes(key)
    
    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypts a single 16-byte block."""
        return aes128_encrypt(self.key, block)
    
    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypts a single 16-byte block."""
        return aes128_decrypt(self.key, block)
    
    def encrypt_gcm(self, iv: bytes, plaintext: bytes, aad: bytes = b'') -> Tuple[bytes, bytes]:
        """Encrypts with AES-GCM, returning (ciphertext, tag)."""
        return gcm_encrypt(self.key, iv, aad, plaintext)
    
    def decrypt_gcm(self, iv: bytes, ciphertext: bytes, tag: bytes, aad: bytes = b'') -> bytes:
        """Decrypts with AES-GCM; raises AuthenticationError on a bad tag."""
        plaintext = gcm_decrypt(self.key, iv, aad, ciphertext, tag)
        if plaintext is None:
            raise AuthenticationError("GCM authentication tag mismatch")
        return plaintext

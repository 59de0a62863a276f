"""HMAC-SHA256 (RFC 2104)."""
from typing import Union

from .sha256 import BLOCK_SIZE, sha256
from ..utils.key_utils import BytesLike, ensure_bytes

_IPAD = 0x36
_OPAD = 0x5c


def hmac_sha256(key: Union[str, BytesLike], data: Union[str, BytesLike]) -> bytes:
    """
    Computes HMAC-SHA256 of data under key.
    
    Keys longer than the 64-byte hash block are hashed first; the key is
    then zero-padded to the block size. Any key or data length is valid.
    
    Args:
        key: MAC key
        data: Message
        
    Returns:
        32-byte MAC
    """
    key = ensure_bytes(key)
    data = ensure_bytes(data)
    
    if len(key) > BLOCK_SIZE:
        key = sha256(key)
    key_block = key.ljust(BLOCK_SIZE, b'\0')
    
    inner_pad = bytes(b ^ _IPAD for b in key_block)
    outer_pad = bytes(b ^ _OPAD for b in key_block)
    
    inner_hash = sha256(inner_pad + data)
    return sha256(outer_pad + inner_hash)

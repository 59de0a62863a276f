"""
Hashing utilities.
"""
from .sha256 import BLOCK_SIZE, DIGEST_SIZE, sha256, checksum_hex
from .hmac_sha256 import hmac_sha256
from ..utils.encoding import to_hex_str

__all__ = [
    'BLOCK_SIZE',
    'DIGEST_SIZE',
    'sha256',
    'checksum_hex',
    'hmac_sha256',
    'to_hex_str',
]

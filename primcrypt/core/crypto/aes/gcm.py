"""
AES-128-GCM authenticated encryption (NIST SP 800-38D).

GCTR is AES in counter mode with a 32-bit counter in the last four bytes
of the block; GHASH is the polynomial hash over GF(2^128) reduced by
x^128 + x^7 + x^2 + x + 1.
"""
import struct
from typing import List, Optional, Tuple

from .block_cipher import BLOCK_SIZE, encrypt_block, expand_key
from ..utils.key_utils import BytesLike, constant_time_equals
from ...logging import get_logger

logger = get_logger(__name__)

TAG_SIZE = 16
IV_SIZE = 12

# R = 11100001 || 0^120
_R = 0xE1 << 120


def gf_mult(x: bytes, y: bytes) -> bytes:
    """Multiplies two 16-byte blocks in GF(2^128), bit 0 being the MSB of byte 0."""
    xi = int.from_bytes(x, 'big')
    v = int.from_bytes(y, 'big')
    z = 0
    for i in range(127, -1, -1):
        if (xi >> i) & 1:
            z ^= v
        if v & 1:
            v = (v >> 1) ^ _R
        else:
            v >>= 1
    return z.to_bytes(BLOCK_SIZE, 'big')


def ghash(h: bytes, data: bytes) -> bytes:
    """GHASH_H over data, which must be a whole number of blocks."""
    if len(data) % BLOCK_SIZE:
        raise ValueError("GHASH input must be a multiple of 16 bytes")
    y = bytes(BLOCK_SIZE)
    for offset in range(0, len(data), BLOCK_SIZE):
        block = data[offset:offset + BLOCK_SIZE]
        y = gf_mult(bytes(a ^ b for a, b in zip(y, block)), h)
    return y


def inc32(block: bytes) -> bytes:
    """Increments the rightmost 32 bits of a counter block modulo 2^32."""
    counter = (struct.unpack('>L', block[12:])[0] + 1) & 0xFFFFFFFF
    return block[:12] + struct.pack('>L', counter)


def _gctr(round_keys: List[List[int]], icb: bytes, data: bytes) -> bytes:
    out = bytearray()
    cb = icb
    for offset in range(0, len(data), BLOCK_SIZE):
        keystream = encrypt_block(round_keys, cb)
        chunk = data[offset:offset + BLOCK_SIZE]
        out += bytes(a ^ b for a, b in zip(chunk, keystream))
        cb = inc32(cb)
    return bytes(out)


def gctr(key: BytesLike, icb: bytes, data: BytesLike) -> bytes:
    """
    AES-CTR keystream XOR starting at counter block icb.

    The final partial block uses only the leading keystream bytes.
    """
    return _gctr(expand_key(key), bytes(icb), bytes(data))


def _zero_pad(data: bytes) -> bytes:
    return data + bytes(-len(data) % BLOCK_SIZE)


def _pre_counter_block(h: bytes, iv: bytes) -> bytes:
    """Derives J0 from the IV."""
    if len(iv) == IV_SIZE:
        return iv + b'\x00\x00\x00\x01'
    return ghash(h, _zero_pad(iv) + struct.pack('>QQ', 0, len(iv) * 8))


def _compute_tag(round_keys, h: bytes, j0: bytes, aad: bytes, ciphertext: bytes) -> bytes:
    lengths = struct.pack('>QQ', len(aad) * 8, len(ciphertext) * 8)
    s = ghash(h, _zero_pad(aad) + _zero_pad(ciphertext) + lengths)
    return _gctr(round_keys, j0, s)


def _setup(key: BytesLike, iv: BytesLike):
    if not iv:
        raise ValueError("IV cannot be empty")
    round_keys = expand_key(key)
    h = encrypt_block(round_keys, bytes(BLOCK_SIZE))
    j0 = _pre_counter_block(h, bytes(iv))
    return round_keys, h, j0


def gcm_encrypt(
    key: BytesLike,
    iv: BytesLike,
    aad: BytesLike,
    plaintext: BytesLike
) -> Tuple[bytes, bytes]:
    """
    Encrypts and authenticates with AES-128-GCM.

    Args:
        key: 16-byte AES key
        iv: IV of any non-zero length (12 bytes is the fast path)
        aad: Additional authenticated data (may be empty)
        plaintext: Data to encrypt (may be empty)

    Returns:
        (ciphertext, 16-byte tag)
    """
    aad = bytes(aad)
    plaintext = bytes(plaintext)
    round_keys, h, j0 = _setup(key, iv)
    logger.debug(f"gcm_encrypt(): iv_len={len(iv)}, aad_len={len(aad)}, pt_len={len(plaintext)}")

    ciphertext = _gctr(round_keys, inc32(j0), plaintext)
    tag = _compute_tag(round_keys, h, j0, aad, ciphertext)
    return ciphertext, tag


def gcm_decrypt(
    key: BytesLike,
    iv: BytesLike,
    aad: BytesLike,
    ciphertext: BytesLike,
    tag: BytesLike
) -> Optional[bytes]:
    """
    Verifies and decrypts AES-128-GCM data.

    The expected tag is recomputed and compared in constant time before
    any plaintext is produced.

    Args:
        key: 16-byte AES key
        iv: IV used for encryption
        aad: Additional authenticated data
        ciphertext: Data to decrypt
        tag: 16-byte authentication tag

    Returns:
        Plaintext, or None if authentication fails
    """
    aad = bytes(aad)
    ciphertext = bytes(ciphertext)
    round_keys, h, j0 = _setup(key, iv)
    logger.debug(f"gcm_decrypt(): iv_len={len(iv)}, aad_len={len(aad)}, ct_len={len(ciphertext)}")

    expected = _compute_tag(round_keys, h, j0, aad, ciphertext)
    if len(tag) != TAG_SIZE or not constant_time_equals(expected, bytes(tag)):
        logger.debug("gcm_decrypt(): authentication tag mismatch")
        return None

    return _gctr(round_keys, inc32(j0), ciphertext)

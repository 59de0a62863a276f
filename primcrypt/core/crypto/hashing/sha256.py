"""SHA-256 (FIPS 180-4)."""
import struct
from typing import Union

from ..utils.encoding import to_hex_str
from ..utils.key_utils import BytesLike, ensure_bytes

BLOCK_SIZE = 64
DIGEST_SIZE = 32

_MASK = 0xFFFFFFFF

# Initial hash value H(0)
_IV = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants K
_K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _big_sigma0(x):
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _big_sigma1(x):
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def _small_sigma0(x):
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _small_sigma1(x):
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _ch(x, y, z):
    return (x & y) ^ (~x & z)


def _maj(x, y, z):
    return (x & y) ^ (x & z) ^ (y & z)


def _pad(message: bytes) -> bytes:
    """Appends 0x80, zeros and the 64-bit big-endian bit length."""
    bit_length = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    zeros = (BLOCK_SIZE - (len(message) + 9) % BLOCK_SIZE) % BLOCK_SIZE
    return message + b'\x80' + b'\x00' * zeros + struct.pack('>Q', bit_length)


def _compress(state: list, block: bytes) -> None:
    """Runs the 64-round compression function over one 64-byte block."""
    w = list(struct.unpack('>16L', block))
    for t in range(16, 64):
        w.append((_small_sigma1(w[t - 2]) + w[t - 7] + _small_sigma0(w[t - 15]) + w[t - 16]) & _MASK)

    a, b, c, d, e, f, g, h = state
    for t in range(64):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + _K[t] + w[t]) & _MASK
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & _MASK
        h = g
        g = f
        f = e
        e = (d + t1) & _MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & _MASK

    for i, v in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + v) & _MASK


def sha256(data: Union[str, BytesLike]) -> bytes:
    """
    Computes the SHA-256 digest of data.

    Args:
        data: Message bytes; text is hashed as UTF-8

    Returns:
        32-byte digest
    """
    padded = _pad(ensure_bytes(data))
    state = list(_IV)
    for offset in range(0, len(padded), BLOCK_SIZE):
        _compress(state, padded[offset:offset + BLOCK_SIZE])
    return struct.pack('>8L', *state)


def checksum_hex(body: Union[str, BytesLike]) -> str:
    """Hex SHA-256 of a message body, as sent in an X-Content-SHA256 trailer."""
    return to_hex_str(sha256(body))

"""
AES-128 single-block cipher (FIPS 197).

The 16-byte state is kept as a flat list in column-major order, so
``state[r + 4*c]`` is row ``r`` of column ``c``, which is also the input
byte order. Round keys are expanded on every call.
"""
from typing import List

from ..utils.key_utils import BytesLike

BLOCK_SIZE = 16
KEY_SIZE = 16
ROUNDS = 10

S_BOX = (
    0x63, 0x7c, 0x77, 0x7b, 0xf2, 0x6b, 0x6f, 0xc5, 0x30, 0x01, 0x67, 0x2b, 0xfe, 0xd7, 0xab, 0x76,
    0xca, 0x82, 0xc9, 0x7d, 0xfa, 0x59, 0x47, 0xf0, 0xad, 0xd4, 0xa2, 0xaf, 0x9c, 0xa4, 0x72, 0xc0,
    0xb7, 0xfd, 0x93, 0x26, 0x36, 0x3f, 0xf7, 0xcc, 0x34, 0xa5, 0xe5, 0xf1, 0x71, 0xd8, 0x31, 0x15,
    0x04, 0xc7, 0x23, 0xc3, 0x18, 0x96, 0x05, 0x9a, 0x07, 0x12, 0x80, 0xe2, 0xeb, 0x27, 0xb2, 0x75,
    0x09, 0x83, 0x2c, 0x1a, 0x1b, 0x6e, 0x5a, 0xa0, 0x52, 0x3b, 0xd6, 0xb3, 0x29, 0xe3, 0x2f, 0x84,
    0x53, 0xd1, 0x00, 0xed, 0x20, 0xfc, 0xb1, 0x5b, 0x6a, 0xcb, 0xbe, 0x39, 0x4a, 0x4c, 0x58, 0xcf,
    0xd0, 0xef, 0xaa, 0xfb, 0x43, 0x4d, 0x33, 0x85, 0x45, 0xf9, 0x02, 0x7f, 0x50, 0x3c, 0x9f, 0xa8,
    0x51, 0xa3, 0x40, 0x8f, 0x92, 0x9d, 0x38, 0xf5, 0xbc, 0xb6, 0xda, 0x21, 0x10, 0xff, 0xf3, 0xd2,
    0xcd, 0x0c, 0x13, 0xec, 0x5f, 0x97, 0x44, 0x17, 0xc4, 0xa7, 0x7e, 0x3d, 0x64, 0x5d, 0x19, 0x73,
    0x60, 0x81, 0x4f, 0xdc, 0x22, 0x2a, 0x90, 0x88, 0x46, 0xee, 0xb8, 0x14, 0xde, 0x5e, 0x0b, 0xdb,
    0xe0, 0x32, 0x3a, 0x0a, 0x49, 0x06, 0x24, 0x5c, 0xc2, 0xd3, 0xac, 0x62, 0x91, 0x95, 0xe4, 0x79,
    0xe7, 0xc8, 0x37, 0x6d, 0x8d, 0xd5, 0x4e, 0xa9, 0x6c, 0x56, 0xf4, 0xea, 0x65, 0x7a, 0xae, 0x08,
    0xba, 0x78, 0x25, 0x2e, 0x1c, 0xa6, 0xb4, 0xc6, 0xe8, 0xdd, 0x74, 0x1f, 0x4b, 0xbd, 0x8b, 0x8a,
    0x70, 0x3e, 0xb5, 0x66, 0x48, 0x03, 0xf6, 0x0e, 0x61, 0x35, 0x57, 0xb9, 0x86, 0xc1, 0x1d, 0x9e,
    0xe1, 0xf8, 0x98, 0x11, 0x69, 0xd9, 0x8e, 0x94, 0x9b, 0x1e, 0x87, 0xe9, 0xce, 0x55, 0x28, 0xdf,
    0x8c, 0xa1, 0x89, 0x0d, 0xbf, 0xe6, 0x42, 0x68, 0x41, 0x99, 0x2d, 0x0f, 0xb0, 0x54, 0xbb, 0x16,
)

INV_S_BOX = tuple(S_BOX.index(x) for x in range(256))

RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1b, 0x36)


def _xtime(a: int) -> int:
    """Multiply by 2 in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    return ((a << 1) ^ (0x1b if a & 0x80 else 0)) & 0xFF


def _gmul(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8)."""
    p = 0
    while b:
        if b & 1:
            p ^= a
        a = _xtime(a)
        b >>= 1
    return p


# MixColumns lookup tables
MUL_2 = tuple(_gmul(x, 2) for x in range(256))
MUL_3 = tuple(_gmul(x, 3) for x in range(256))
MUL_9 = tuple(_gmul(x, 9) for x in range(256))
MUL_11 = tuple(_gmul(x, 11) for x in range(256))
MUL_13 = tuple(_gmul(x, 13) for x in range(256))
MUL_14 = tuple(_gmul(x, 14) for x in range(256))


def _check_sizes(key: BytesLike, block: BytesLike) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")


def expand_key(key: BytesLike) -> List[List[int]]:
    """Expands a 16-byte key into the 11 round keys of AES-128."""
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
    w = list(key) + [0] * (BLOCK_SIZE * ROUNDS)
    for i in range(4, 4 * (ROUNDS + 1)):
        t0, t1, t2, t3 = w[(i - 1) * 4:i * 4]
        if i % 4 == 0:
            # RotWord, SubWord, Rcon
            t0, t1, t2, t3 = (
                S_BOX[t1] ^ RCON[i // 4 - 1],
                S_BOX[t2],
                S_BOX[t3],
                S_BOX[t0],
            )
        base = (i - 4) * 4
        w[i * 4] = w[base] ^ t0
        w[i * 4 + 1] = w[base + 1] ^ t1
        w[i * 4 + 2] = w[base + 2] ^ t2
        w[i * 4 + 3] = w[base + 3] ^ t3
    return [w[r * 16:(r + 1) * 16] for r in range(ROUNDS + 1)]


def _add_round_key(state: List[int], round_key: List[int]) -> None:
    for i in range(16):
        state[i] ^= round_key[i]


def _sub_bytes(state: List[int]) -> None:
    for i in range(16):
        state[i] = S_BOX[state[i]]


def _inv_sub_bytes(state: List[int]) -> None:
    for i in range(16):
        state[i] = INV_S_BOX[state[i]]


def _shift_rows(state: List[int]) -> None:
    # row 1: shift left by 1
    state[1], state[5], state[9], state[13] = state[5], state[9], state[13], state[1]
    # row 2: shift left by 2
    state[2], state[10] = state[10], state[2]
    state[6], state[14] = state[14], state[6]
    # row 3: shift left by 3
    state[3], state[7], state[11], state[15] = state[15], state[3], state[7], state[11]


def _inv_shift_rows(state: List[int]) -> None:
    state[1], state[5], state[9], state[13] = state[13], state[1], state[5], state[9]
    state[2], state[10] = state[10], state[2]
    state[6], state[14] = state[14], state[6]
    state[3], state[7], state[11], state[15] = state[7], state[11], state[15], state[3]


def _mix_columns(state: List[int]) -> None:
    for c in range(0, 16, 4):
        a0, a1, a2, a3 = state[c:c + 4]
        state[c] = MUL_2[a0] ^ MUL_3[a1] ^ a2 ^ a3
        state[c + 1] = a0 ^ MUL_2[a1] ^ MUL_3[a2] ^ a3
        state[c + 2] = a0 ^ a1 ^ MUL_2[a2] ^ MUL_3[a3]
        state[c + 3] = MUL_3[a0] ^ a1 ^ a2 ^ MUL_2[a3]


def _inv_mix_columns(state: List[int]) -> None:
    for c in range(0, 16, 4):
        a0, a1, a2, a3 = state[c:c + 4]
        state[c] = MUL_14[a0] ^ MUL_11[a1] ^ MUL_13[a2] ^ MUL_9[a3]
        state[c + 1] = MUL_9[a0] ^ MUL_14[a1] ^ MUL_11[a2] ^ MUL_13[a3]
        state[c + 2] = MUL_13[a0] ^ MUL_9[a1] ^ MUL_14[a2] ^ MUL_11[a3]
        state[c + 3] = MUL_11[a0] ^ MUL_13[a1] ^ MUL_9[a2] ^ MUL_14[a3]


def aes128_encrypt(key: BytesLike, block: BytesLike) -> bytes:
    """
    Encrypts one 16-byte block with AES-128.

    Args:
        key: 16-byte key
        block: 16-byte plaintext block

    Returns:
        16-byte ciphertext block
    """
    _check_sizes(key, block)
    return encrypt_block(expand_key(key), block)


def encrypt_block(round_keys: List[List[int]], block: BytesLike) -> bytes:
    """Encrypts one block with an already expanded key schedule."""
    state = list(block)

    _add_round_key(state, round_keys[0])
    for r in range(1, ROUNDS):
        _sub_bytes(state)
        _shift_rows(state)
        _mix_columns(state)
        _add_round_key(state, round_keys[r])
    _sub_bytes(state)
    _shift_rows(state)
    _add_round_key(state, round_keys[ROUNDS])
    return bytes(state)


def aes128_decrypt(key: BytesLike, block: BytesLike) -> bytes:
    """
    Decrypts one 16-byte block with AES-128.

    Args:
        key: 16-byte key
        block: 16-byte ciphertext block

    Returns:
        16-byte plaintext block
    """
    _check_sizes(key, block)
    return decrypt_block(expand_key(key), block)


def decrypt_block(round_keys: List[List[int]], block: BytesLike) -> bytes:
    """Decrypts one block with an already expanded key schedule."""
    state = list(block)

    _add_round_key(state, round_keys[ROUNDS])
    for r in range(ROUNDS - 1, 0, -1):
        _inv_shift_rows(state)
        _inv_sub_bytes(state)
        _add_round_key(state, round_keys[r])
        _inv_mix_columns(state)
    _inv_shift_rows(state)
    _inv_sub_bytes(state)
    _add_round_key(state, round_keys[0])
    return bytes(state)

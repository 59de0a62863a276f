"""Byte-buffer helpers shared by the primitives."""
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def ensure_bytes(data: Union[str, BytesLike]) -> bytes:
    """Returns data as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XORs two buffers up to the length of the shorter one."""
    return bytes(x ^ y for x, y in zip(a, b))


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """
    Compares two buffers without an early exit.

    Every byte pair is XOR-accumulated and the result is branched on once.
    Lengths are treated as public.
    """
    if len(a) != len(b):
        return False
    diff = 0
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0

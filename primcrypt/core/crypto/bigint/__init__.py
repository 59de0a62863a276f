"""Arbitrary-precision unsigned arithmetic."""
from .bigint import BigInt

__all__ = [
    'BigInt',
]

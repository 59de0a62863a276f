"""Shared utilities for the crypto module."""
from .encoding import HexEncoder, to_hex_str
from .key_utils import constant_time_equals, ensure_bytes, xor_bytes

__all__ = [
    'HexEncoder',
    'to_hex_str',
    'constant_time_equals',
    'ensure_bytes',
    'xor_bytes',
]

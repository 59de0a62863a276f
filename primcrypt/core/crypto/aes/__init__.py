"""
AES-128 block cipher and GCM mode.
"""
from .block_cipher import aes128_encrypt, aes128_decrypt, expand_key
from .gcm import gcm_encrypt, gcm_decrypt, ghash, gctr, gf_mult, inc32
from .aes_crypto import AESCrypto

__all__ = [
    'aes128_encrypt',
    'aes128_decrypt',
    'expand_key',
    'gcm_encrypt',
    'gcm_decrypt',
    'ghash',
    'gctr',
    'gf_mult',
    'inc32',
    'AESCrypto',
]

"""
Key derivation.
"""
from .prf import KeyDeriver, Tls12PrfDeriver, prf, p_hash

__all__ = [
    'KeyDeriver',
    'Tls12PrfDeriver',
    'prf',
    'p_hash',
]

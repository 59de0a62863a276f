"""Arbitrary-precision unsigned integers on 32-bit limbs."""
import string
from typing import List, Optional, Tuple

from ...exceptions import DivisionByZeroError, PreconditionError

# Word size parameters
bs = 32
bx2 = 1 << bs
bm = bx2 - 1

_HEX_DIGITS = frozenset(string.hexdigits)


def zclip(r: List[int]) -> List[int]:
    """Trim high-order zero words; zero becomes the empty list."""
    n = len(r)
    while n > 0 and r[n - 1] == 0:
        n -= 1
    return r[:n]


def nbits(x: List[int]) -> int:
    """Return the bit length of trimmed limbs x."""
    if not x:
        return 0
    return (len(x) - 1) * bs + x[-1].bit_length()


def bcmp(a: List[int], b: List[int]) -> int:
    """Compare trimmed limbs: limb count first, then from the top limb down."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def badd(a: List[int], b: List[int]) -> List[int]:
    """Add multi-precision integers a and b (little-endian limbs)."""
    if len(a) < len(b):
        a, b = b, a
    r = []
    carry = 0
    for i in range(len(a)):
        s = a[i] + (b[i] if i < len(b) else 0) + carry
        r.append(s & bm)
        carry = s >> bs
    if carry:
        r.append(carry)
    return r


def bsub(a: List[int], b: List[int]) -> Optional[List[int]]:
    """Subtract multi-precision b from a; return None if negative."""
    if len(b) > len(a):
        return None
    r = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - (b[i] if i < len(b) else 0) - borrow
        if diff < 0:
            diff += bx2
            borrow = 1
        else:
            borrow = 0
        r.append(diff)
    if borrow:
        return None
    return zclip(r)


def bmul(x: List[int], y: List[int]) -> List[int]:
    """Schoolbook multiplication (HAC 14.12) with per-limb carries."""
    if not x or not y:
        return []
    n, t = len(x), len(y)
    r = [0] * (n + t)
    for i in range(n):
        xi = x[i]
        c = 0
        for j in range(t):
            p = xi * y[j] + r[i + j] + c
            r[i + j] = p & bm
            c = p >> bs
        r[i + t] = c
    return zclip(r)


def bdivmod(a: List[int], b: List[int]) -> Tuple[List[int], List[int]]:
    """
    Binary long division of a by b.

    Walks the dividend bits from the most significant one, shifting each
    into a remainder accumulator and subtracting the divisor whenever the
    accumulator reaches it; every subtraction sets one quotient bit.
    """
    if not b:
        raise DivisionByZeroError("BigInt division by zero")
    if bcmp(a, b) < 0:
        return [], list(a)

    total = nbits(a)
    q = [0] * ((total + bs - 1) // bs)
    r: List[int] = []
    for i in range(total - 1, -1, -1):
        # r = (r << 1) | bit i of a
        carry = (a[i >> 5] >> (i & 31)) & 1
        for j in range(len(r)):
            v = r[j]
            r[j] = ((v << 1) & bm) | carry
            carry = v >> 31
        if carry:
            r.append(carry)

        if bcmp(r, b) >= 0:
            r = bsub(r, b)
            q[i >> 5] |= 1 << (i & 31)
    return zclip(q), r


class BigInt:
    """
    Unsigned integer of unbounded size.

    Stored as 32-bit limbs, least significant first, with no most
    significant zero limb; zero is the empty limb list. Instances are
    values: no operation mutates its operands.
    """

    __slots__ = ('_limbs',)

    def __init__(self, value: int = 0):
        """Builds a BigInt from a non-negative Python int."""
        if value < 0:
            raise ValueError("BigInt is unsigned")
        limbs = []
        while value:
            limbs.append(value & bm)
            value >>= bs
        self._limbs = limbs

    @classmethod
    def _from_limbs(cls, limbs: List[int]) -> 'BigInt':
        result = cls.__new__(cls)
        result._limbs = zclip(limbs)
        return result

    @property
    def limbs(self) -> Tuple[int, ...]:
        """Little-endian 32-bit limbs."""
        return tuple(self._limbs)

    # Byte and hex conversion

    @classmethod
    def from_bytes(cls, data: bytes) -> 'BigInt':
        """Reads a big-endian byte string."""
        data = bytes(data)
        n = len(data)
        limbs = [0] * ((n + 3) // 4)
        for i in range(n):
            limbs[i >> 2] |= data[n - 1 - i] << ((i & 3) * 8)
        return cls._from_limbs(limbs)

    def to_bytes(self, length: Optional[int] = None) -> bytes:
        """
        Writes the value big-endian into exactly ``length`` bytes.

        The output is zero-padded on the left. A value wider than
        ``length`` keeps only its low-order bytes; sizing the output is
        the caller's job.

        Args:
            length: Output size in bytes (defaults to byte_length())

        Returns:
            Big-endian bytes
        """
        if length is None:
            length = self.byte_length()
        out = bytearray(length)
        for i, limb in enumerate(self._limbs):
            for b in range(4):
                idx = i * 4 + b
                if idx >= length:
                    break
                out[length - 1 - idx] = (limb >> (b * 8)) & 0xFF
        return bytes(out)

    def byte_length(self) -> int:
        """Number of bytes needed to hold the value."""
        return (self.bit_length() + 7) // 8

    @classmethod
    def from_hex(cls, text: str) -> 'BigInt':
        """Parses a hex string (either case, no prefix)."""
        if any(c not in _HEX_DIGITS for c in text):
            raise ValueError(f"Invalid hex string: {text!r}")
        if len(text) % 2:
            text = '0' + text
        return cls.from_bytes(bytes.fromhex(text))

    def to_hex(self) -> str:
        """Lowercase hex without leading zeros ("0" for zero)."""
        if not self._limbs:
            return '0'
        top = len(self._limbs) - 1
        parts = ['%x' % self._limbs[top]]
        for i in range(top - 1, -1, -1):
            parts.append('%08x' % self._limbs[i])
        return ''.join(parts)

    # Bits

    def is_zero(self) -> bool:
        return not self._limbs

    def bit_length(self) -> int:
        return nbits(self._limbs)

    def get_bit(self, n: int) -> bool:
        """Returns bit n, counting from the least significant bit."""
        limb_idx, bit_idx = divmod(n, bs)
        if limb_idx >= len(self._limbs):
            return False
        return bool((self._limbs[limb_idx] >> bit_idx) & 1)

    # Comparison

    def compare(self, other: 'BigInt') -> int:
        """Returns -1, 0 or 1."""
        return bcmp(self._limbs, other._limbs)

    def __eq__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self):
        return hash(tuple(self._limbs))

    def __bool__(self):
        return bool(self._limbs)

    # Arithmetic

    def __add__(self, other: 'BigInt') -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        return BigInt._from_limbs(badd(self._limbs, other._limbs))

    def __sub__(self, other: 'BigInt') -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        r = bsub(self._limbs, other._limbs)
        if r is None:
            raise PreconditionError("BigInt subtraction underflow")
        return BigInt._from_limbs(r)

    def __mul__(self, other: 'BigInt') -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        return BigInt._from_limbs(bmul(self._limbs, other._limbs))

    def __divmod__(self, other: 'BigInt') -> Tuple['BigInt', 'BigInt']:
        if not isinstance(other, BigInt):
            return NotImplemented
        q, r = bdivmod(self._limbs, other._limbs)
        return BigInt._from_limbs(q), BigInt._from_limbs(r)

    def __floordiv__(self, other: 'BigInt') -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        return divmod(self, other)[0]

    def __mod__(self, other: 'BigInt') -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        return divmod(self, other)[1]

    def __lshift__(self, bits: int) -> 'BigInt':
        if bits < 0:
            raise ValueError("negative shift count")
        if not self._limbs or bits == 0:
            return self
        limb_shift, bit_shift = divmod(bits, bs)
        r = [0] * (len(self._limbs) + limb_shift + 1)
        for i, limb in enumerate(self._limbs):
            val = limb << bit_shift
            r[i + limb_shift] |= val & bm
            r[i + limb_shift + 1] |= val >> bs
        return BigInt._from_limbs(r)

    def __rshift__(self, bits: int) -> 'BigInt':
        if bits < 0:
            raise ValueError("negative shift count")
        if not self._limbs or bits == 0:
            return self
        limb_shift, bit_shift = divmod(bits, bs)
        limbs = self._limbs
        if limb_shift >= len(limbs):
            return BigInt()
        r = []
        for i in range(len(limbs) - limb_shift):
            val = limbs[i + limb_shift] >> bit_shift
            if bit_shift and i + limb_shift + 1 < len(limbs):
                val |= (limbs[i + limb_shift + 1] << (bs - bit_shift)) & bm
            r.append(val)
        return BigInt._from_limbs(r)

    @staticmethod
    def mod_pow(base: 'BigInt', exp: 'BigInt', mod: 'BigInt') -> 'BigInt':
        """
        Computes base^exp mod mod by left-to-right square-and-multiply.

        Returns zero when mod is zero.
        """
        if mod.is_zero():
            return BigInt()
        result = BigInt(1) % mod
        b = base % mod
        for i in range(exp.bit_length() - 1, -1, -1):
            result = (result * result) % mod
            if exp.get_bit(i):
                result = (result * b) % mod
        return result

    def __int__(self):
        value = 0
        for limb in reversed(self._limbs):
            value = (value << bs) | limb
        return value

    def __repr__(self):
        return f"BigInt(0x{self.to_hex()})"

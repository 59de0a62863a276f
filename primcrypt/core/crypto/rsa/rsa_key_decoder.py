"""RSA public key decoder from DER (PKCS#1 RSAPublicKey or SubjectPublicKeyInfo)."""
from dataclasses import dataclass
from typing import Optional

from ..bigint import BigInt
from ...exceptions import DerDecodeError
from ...logging import get_logger

logger = get_logger(__name__)

TAG_INTEGER = 0x02
TAG_BIT_STRING = 0x03
TAG_SEQUENCE = 0x30

MAX_LENGTH_OCTETS = 4


@dataclass(frozen=True)
class RsaPublicKey:
    """RSA public key (modulus n, public exponent e)."""
    n: BigInt
    e: BigInt
    
    @property
    def size_in_bytes(self) -> int:
        """Modulus length k in bytes."""
        return self.n.byte_length()


class DerReader:
    """Minimal ASN.1 DER reader over a byte buffer."""
    
    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.pos = 0
    
    def _fail(self, message: str):
        raise DerDecodeError(message, offset=self.pos)
    
    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos
    
    def peek_tag(self) -> int:
        """Returns the next tag byte without consuming it."""
        if self.pos >= len(self.data):
            self._fail("Unexpected end of data while reading tag")
        return self.data[self.pos]
    
    def read_tag(self, expected: int) -> None:
        """Consumes a tag byte, which must equal expected."""
        tag = self.peek_tag()
        if tag != expected:
            self._fail(f"Expected tag 0x{expected:02x}, got 0x{tag:02x}")
        self.pos += 1
    
    def read_length(self) -> int:
        """Reads a short- or long-form length and checks it against the buffer."""
        if self.pos >= len(self.data):
            self._fail("Unexpected end of data while reading length")
        first = self.data[self.pos]
        self.pos += 1
        if first < 0x80:
            length = first
        else:
            num_octets = first & 0x7F
            if num_octets > MAX_LENGTH_OCTETS or num_octets > self.remaining:
                self._fail(f"Unsupported or truncated length ({num_octets} octets)")
            length = int.from_bytes(self.data[self.pos:self.pos + num_octets], 'big')
            self.pos += num_octets
        if length > self.remaining:
            self._fail(f"Length {length} exceeds remaining {self.remaining} bytes")
        return length
    
    def read_sequence(self) -> int:
        """Enters a SEQUENCE and returns its content length."""
        self.read_tag(TAG_SEQUENCE)
        return self.read_length()
    
    def read_integer(self) -> BigInt:
        """Reads an unsigned INTEGER, dropping one leading sign byte."""
        self.read_tag(TAG_INTEGER)
        length = self.read_length()
        content = self.data[self.pos:self.pos + length]
        self.pos += length
        if content[:1] == b'\x00':
            content = content[1:]
        return BigInt.from_bytes(content)
    
    def skip(self, length: int) -> None:
        if length > self.remaining:
            self._fail(f"Cannot skip {length} bytes")
        self.pos += length


class RSAKeyDecoder:
    """Decodes RSA public keys from DER."""
    
    @staticmethod
    def decode(der: bytes) -> RsaPublicKey:
        """
        Decodes a DER public key.
        
        The tag following the outer SEQUENCE picks the shape: another
        SEQUENCE means SubjectPublicKeyInfo (AlgorithmIdentifier, then a
        BIT STRING wrapping RSAPublicKey); anything else is read as a bare
        RSAPublicKey { INTEGER n, INTEGER e }.
        
        Args:
            der: DER-encoded key
            
        Returns:
            Parsed RsaPublicKey
            
        Raises:
            DerDecodeError: If the structure is malformed or truncated
        """
        reader = DerReader(der)
        reader.read_sequence()
        
        if reader.peek_tag() == TAG_SEQUENCE:
            logger.debug("decode(): SubjectPublicKeyInfo")
            algorithm_length = reader.read_sequence()
            reader.skip(algorithm_length)
            
            reader.read_tag(TAG_BIT_STRING)
            bit_string_length = reader.read_length()
            if bit_string_length < 1:
                reader._fail("Empty BIT STRING")
            reader.skip(1)  # unused-bits octet
            reader.read_sequence()
        else:
            logger.debug("decode(): bare RSAPublicKey")
        
        n = reader.read_integer()
        e = reader.read_integer()
        logger.debug(f"decode(): modulus bits={n.bit_length()}, exponent bits={e.bit_length()}")
        return RsaPublicKey(n=n, e=e)


def parse_public_key(der: bytes) -> Optional[RsaPublicKey]:
    """Parses a DER public key, returning None if it is malformed."""
    try:
        return RSAKeyDecoder.decode(der)
    except DerDecodeError as e:
        logger.debug(f"parse_public_key(): {e} (offset {e.offset})")
        return None

"""Tests for hex encoding utilities."""
import pytest

from primcrypt.core.crypto.utils.encoding import HexEncoder, to_hex_str


class TestHexEncoder:
    """Test suite for HexEncoder."""
    
    def test_encode_lowercase(self):
        """Test encoding gives two lowercase digits per byte."""
        assert HexEncoder.encode(b"\x00\xab\xff") == "00abff"
    
    def test_decode_either_case(self):
        """Test decoding accepts upper and lower case."""
        assert HexEncoder.decode("00ABff") == b"\x00\xab\xff"
    
    def test_decode_invalid(self):
        """Test invalid hex raises ValueError."""
        with pytest.raises(ValueError):
            HexEncoder.decode("zz")
    
    def test_roundtrip(self):
        """Test encode/decode roundtrip."""
        data = bytes(range(256))
        
        assert HexEncoder.decode(HexEncoder.encode(data)) == data
    
    def test_to_hex_str_bytearray(self):
        """Test to_hex_str accepts bytearray."""
        assert to_hex_str(bytearray(b"\x10\x20")) == "1020"

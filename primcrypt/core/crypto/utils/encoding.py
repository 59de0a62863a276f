"""Encoding utilities."""


class HexEncoder:
    """Lowercase hex encoder/decoder."""
    
    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes as lowercase hex, two characters per byte."""
        return bytes(data).hex()

    @staticmethod
    def decode(data: str) -> bytes:
        """Decodes hex (either case, whitespace ignored)."""
        return bytes.fromhex(data)


def to_hex_str(data: bytes) -> str:
    """Renders bytes as lowercase hex; empty input gives an empty string."""
    return HexEncoder.encode(data)

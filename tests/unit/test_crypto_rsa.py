"""Tests for RSA key decoding, encryption and signature verification."""
import logging

import pytest
from Crypto.Cipher import PKCS1_v1_5
from Crypto.Hash import SHA256
from Crypto.Signature import pkcs1_15
from Crypto.Util.asn1 import DerSequence
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    PublicFormat,
    load_der_public_key,
)

from primcrypt.core.config import CryptoConfig
from primcrypt.core.crypto import rsa_encrypt, rsa_parse_public_key, rsa_verify
from primcrypt.core.crypto.bigint import BigInt
from primcrypt.core.crypto.hashing import sha256
from primcrypt.core.crypto.rsa import (
    DeterministicPaddingSource,
    RSAKeyDecoder,
    RSAService,
    RsaPublicKey,
    SecurePaddingSource,
    SHA256_DIGEST_INFO_PREFIX,
)
from primcrypt.core.exceptions import DerDecodeError, MessageTooLongError

SENTINEL = b"decryption failed"


def flip_bit(data, index=0, bit=0):
    out = bytearray(data)
    out[index] ^= 1 << bit
    return bytes(out)


@pytest.fixture(scope="module")
def public_key(rsa_spki_der):
    return RSAKeyDecoder.decode(rsa_spki_der)


class TestRSAKeyDecoder:
    """Test suite for DER public key parsing."""
    
    def test_subject_public_key_info(self, rsa_private_key, rsa_spki_der):
        """Test parsing SubjectPublicKeyInfo from pycryptodome."""
        key = RSAKeyDecoder.decode(rsa_spki_der)
        
        assert int(key.n) == rsa_private_key.n
        assert int(key.e) == rsa_private_key.e
        assert key.size_in_bytes == 128
    
    def test_bare_pkcs1_from_cryptography(self, rsa_private_key, rsa_spki_der):
        """Test parsing a bare RSAPublicKey exported by cryptography."""
        der = load_der_public_key(rsa_spki_der).public_bytes(Encoding.DER, PublicFormat.PKCS1)
        
        key = RSAKeyDecoder.decode(der)
        
        assert int(key.n) == rsa_private_key.n
        assert int(key.e) == rsa_private_key.e
    
    def test_bare_pkcs1_small_integers(self):
        """Test short-form lengths and sign-byte stripping."""
        der = DerSequence([0xC5F1, 3]).encode()
        
        key = RSAKeyDecoder.decode(der)
        
        assert key == RsaPublicKey(n=BigInt(0xC5F1), e=BigInt(3))
    
    @pytest.mark.parametrize("der", [
        b"",
        b"\x30",
        b"\x31\x03\x02\x01\x05",
        b"\x30\x85\x00\x00\x00\x00\x05",
        b"\x30\x06\x02\x01\x05\x02\x05\x01",
        b"\x30\x03\x04\x01\x05",
    ])
    def test_malformed(self, der):
        """Test malformed DER raises DerDecodeError."""
        with pytest.raises(DerDecodeError) as exc_info:
            RSAKeyDecoder.decode(der)
        
        assert exc_info.value.offset is not None
    
    def test_truncated_spki(self, rsa_spki_der):
        """Test a truncated key fails to parse."""
        with pytest.raises(DerDecodeError):
            RSAKeyDecoder.decode(rsa_spki_der[:-10])
    
    def test_function_api_returns_none(self):
        """Test rsa_parse_public_key returns None on bad input."""
        assert rsa_parse_public_key(b"\x30\x00") is None
    
    def test_function_api_parses(self, rsa_private_key, rsa_spki_der):
        """Test rsa_parse_public_key returns the key."""
        key = rsa_parse_public_key(rsa_spki_der)
        
        assert int(key.n) == rsa_private_key.n


class TestRSAEncrypt:
    """Test suite for PKCS#1 v1.5 Type 2 encryption."""
    
    def test_decrypts_with_pycryptodome(self, rsa_private_key, public_key):
        """Test ciphertext decrypts with pycryptodome PKCS1_v1_5."""
        message = b"pre-master secret bytes"
        
        ciphertext = RSAService().encrypt(public_key, message)
        
        assert len(ciphertext) == public_key.size_in_bytes
        assert PKCS1_v1_5.new(rsa_private_key).decrypt(ciphertext, SENTINEL) == message
    
    def test_encoded_message_layout(self, rsa_private_key, public_key):
        """Test EM is 00 02 PS 00 M with the deterministic padding."""
        message = b"layout"
        k = public_key.size_in_bytes
        
        ciphertext = RSAService().encrypt(public_key, message)
        em = pow(int.from_bytes(ciphertext, 'big'), rsa_private_key.d, rsa_private_key.n).to_bytes(k, 'big')
        ps = DeterministicPaddingSource().nonzero_bytes(k - len(message) - 3, message)
        
        assert em == b"\x00\x02" + ps + b"\x00" + message
    
    def test_deterministic_padding_is_reproducible(self, public_key):
        """Test the default padding gives identical ciphertexts."""
        service = RSAService()
        
        assert service.encrypt(public_key, b"same") == service.encrypt(public_key, b"same")
    
    def test_secure_padding(self, rsa_private_key, public_key):
        """Test secure padding randomizes ciphertexts that still decrypt."""
        service = RSAService(config=CryptoConfig.secure())
        
        c1 = service.encrypt(public_key, b"same")
        c2 = service.encrypt(public_key, b"same")
        
        assert isinstance(service.padding_source, SecurePaddingSource)
        assert c1 != c2
        assert PKCS1_v1_5.new(rsa_private_key).decrypt(c2, SENTINEL) == b"same"
    
    def test_max_length_message(self, rsa_private_key, public_key):
        """Test a k - 11 byte message fits."""
        message = b"\x42" * (public_key.size_in_bytes - 11)
        
        ciphertext = RSAService().encrypt(public_key, message)
        
        assert PKCS1_v1_5.new(rsa_private_key).decrypt(ciphertext, SENTINEL) == message
    
    def test_empty_message(self, rsa_private_key, public_key):
        """Test an empty message encrypts."""
        ciphertext = RSAService().encrypt(public_key, b"")
        
        assert PKCS1_v1_5.new(rsa_private_key).decrypt(ciphertext, SENTINEL) == b""
    
    def test_message_too_long(self, public_key):
        """Test a k - 10 byte message raises MessageTooLongError."""
        message = b"\x42" * (public_key.size_in_bytes - 10)
        
        with pytest.raises(MessageTooLongError) as exc_info:
            RSAService().encrypt(public_key, message)
        
        assert exc_info.value.max_length == public_key.size_in_bytes - 11
    
    def test_function_api_too_long_returns_none(self, public_key):
        """Test rsa_encrypt returns None for oversized messages."""
        assert rsa_encrypt(public_key, b"\x00" * 200) is None
    
    def test_function_api_custom_padding(self, rsa_private_key, public_key):
        """Test rsa_encrypt with an explicit padding source."""
        ciphertext = rsa_encrypt(public_key, b"hello", padding_source=SecurePaddingSource())
        
        assert PKCS1_v1_5.new(rsa_private_key).decrypt(ciphertext, SENTINEL) == b"hello"


class TestRSAVerify:
    """Test suite for PKCS#1 v1.5 SHA-256 signature verification."""
    
    @pytest.fixture(scope="class")
    def signed(self, rsa_private_key):
        message = b"ServerKeyExchange params"
        signature = pkcs1_15.new(rsa_private_key).sign(SHA256.new(message))
        return message, signature
    
    def test_valid_signature(self, public_key, signed):
        """Test a pycryptodome signature verifies."""
        message, signature = signed
        
        assert rsa_verify(public_key, sha256(message), signature) is True
        assert RSAService().verify_message(public_key, message, signature) is True
    
    def test_hash_bit_flip(self, public_key, signed):
        """Test a flipped hash bit fails."""
        message, signature = signed
        
        assert rsa_verify(public_key, flip_bit(sha256(message), 31), signature) is False
    
    def test_signature_bit_flip(self, public_key, signed):
        """Test a flipped signature bit fails."""
        message, signature = signed
        
        assert rsa_verify(public_key, sha256(message), flip_bit(signature, 64, 2)) is False
    
    def test_wrong_signature_length(self, public_key, signed):
        """Test signatures of the wrong length fail."""
        message, signature = signed
        digest = sha256(message)
        
        assert rsa_verify(public_key, digest, signature[1:]) is False
        assert rsa_verify(public_key, digest, signature + signature) is False
        assert rsa_verify(public_key, digest, b"") is False
    
    def test_wrong_digest_length(self, public_key, signed):
        """Test a digest that is not 32 bytes fails."""
        message, signature = signed
        
        assert rsa_verify(public_key, sha256(message)[:20], signature) is False
    
    def test_other_message(self, public_key, signed):
        """Test the signature does not verify another message."""
        _, signature = signed
        
        assert RSAService().verify_message(public_key, b"other", signature) is False
    
    def test_missing_separator_rejected(self, rsa_private_key, public_key):
        """Test EM without the 00 separator after the FF run fails."""
        k = public_key.size_in_bytes
        digest = sha256(b"message")
        tail = b"\x01" + SHA256_DIGEST_INFO_PREFIX + digest
        em = b"\x00\x01" + b"\xff" * (k - 2 - len(tail)) + tail
        forged = pow(int.from_bytes(em, 'big'), rsa_private_key.d, rsa_private_key.n).to_bytes(k, 'big')
        
        assert rsa_verify(public_key, digest, forged) is False
    
    def test_wrong_block_type_rejected(self, rsa_private_key, public_key):
        """Test a Type 2 block is not accepted as a signature."""
        k = public_key.size_in_bytes
        digest = sha256(b"message")
        tail = b"\x00" + SHA256_DIGEST_INFO_PREFIX + digest
        em = b"\x00\x02" + b"\xff" * (k - 3 - len(tail) + 1) + tail
        forged = pow(int.from_bytes(em, 'big'), rsa_private_key.d, rsa_private_key.n).to_bytes(k, 'big')
        
        assert len(em) == k
        assert rsa_verify(public_key, digest, forged) is False
    
    def test_hand_built_signature(self, rsa_private_key, public_key):
        """Test a correctly hand-built EM verifies."""
        k = public_key.size_in_bytes
        digest = sha256(b"message")
        tail = b"\x00" + SHA256_DIGEST_INFO_PREFIX + digest
        em = b"\x00\x01" + b"\xff" * (k - 2 - len(tail)) + tail
        signature = pow(int.from_bytes(em, 'big'), rsa_private_key.d, rsa_private_key.n).to_bytes(k, 'big')
        
        assert rsa_verify(public_key, digest, signature) is True


class TestPaddingSources:
    """Test suite for padding sources."""
    
    def test_deterministic_nonzero(self):
        """Test deterministic padding has no zero bytes."""
        ps = DeterministicPaddingSource().nonzero_bytes(500, b"seed message")
        
        assert len(ps) == 500
        assert 0 not in ps
    
    def test_deterministic_depends_on_message(self):
        """Test the padding is seeded by the message."""
        source = DeterministicPaddingSource()
        
        assert source.nonzero_bytes(32, b"a") == source.nonzero_bytes(32, b"a")
        assert source.nonzero_bytes(32, b"a") != source.nonzero_bytes(32, b"b")
    
    def test_deterministic_logs_warning(self, caplog):
        """Test the insecure source logs a warning."""
        with caplog.at_level(logging.WARNING):
            DeterministicPaddingSource()
        
        assert "not cryptographically secure" in caplog.text
    
    def test_secure_nonzero(self):
        """Test secure padding has no zero bytes."""
        ps = SecurePaddingSource().nonzero_bytes(1000, b"")
        
        assert len(ps) == 1000
        assert 0 not in ps

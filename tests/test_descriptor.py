"""Tests for the IpSecAlgorithm descriptor."""

import dataclasses

import pytest

from ipsec_algorithm import (
    AUTH_CRYPT_CHACHA20_POLY1305,
    AUTH_HMAC_SHA256,
    AUTH_HMAC_SHA512,
    CRYPT_AES_CBC,
    AlgorithmIdentifier,
    IpSecAlgorithm,
)


class TestConstruction:
    """Descriptor construction."""

    def test_name_resolved_to_identifier(self, make_key):
        """Raw names are stored as AlgorithmIdentifier members."""
        algo = IpSecAlgorithm("hmac(sha512)", make_key(512), 256)
        assert algo.name is AlgorithmIdentifier.AUTH_HMAC_SHA512
        assert algo.name == "hmac(sha512)"

    def test_fields(self, make_key):
        """Key and truncation length are kept."""
        key = make_key(256)
        algo = IpSecAlgorithm(AUTH_HMAC_SHA256, key, 128)
        assert algo.key == key
        assert algo.key_length_bits == 256
        assert algo.truncation_length_bits == 128

    def test_key_copied(self, make_key):
        """Mutating the caller's buffer does not affect the descriptor."""
        buffer = bytearray(make_key(256))
        algo = IpSecAlgorithm(CRYPT_AES_CBC, buffer)
        original = bytes(buffer)
        buffer[0] ^= 0xFF
        assert isinstance(algo.key, bytes)
        assert algo.key == original

    def test_immutable(self, make_key):
        """Fields cannot be reassigned."""
        algo = IpSecAlgorithm(CRYPT_AES_CBC, make_key(128))
        with pytest.raises(dataclasses.FrozenInstanceError):
            algo.key = b"\x00" * 16
        with pytest.raises(dataclasses.FrozenInstanceError):
            algo.truncation_length_bits = 96


class TestClassification:
    """Transform class helpers."""

    def test_encryption(self, make_key):
        """AES-CBC is encryption only."""
        algo = IpSecAlgorithm(CRYPT_AES_CBC, make_key(128))
        assert algo.is_encryption()
        assert not algo.is_authentication()
        assert not algo.is_aead()

    def test_authentication(self, make_key):
        """HMAC is authentication only."""
        algo = IpSecAlgorithm(AUTH_HMAC_SHA256, make_key(256), 96)
        assert algo.is_authentication()
        assert not algo.is_encryption()
        assert not algo.is_aead()

    def test_aead(self, make_key):
        """ChaCha20-Poly1305 is AEAD."""
        algo = IpSecAlgorithm(AUTH_CRYPT_CHACHA20_POLY1305, make_key(288), 128)
        assert algo.is_aead()
        assert not algo.is_encryption()
        assert not algo.is_authentication()


class TestEquality:
    """Equality and hashing."""

    def test_equal(self, make_key):
        """Same parameters compare equal and hash equal."""
        a = IpSecAlgorithm(AUTH_HMAC_SHA512, make_key(512), 256)
        b = IpSecAlgorithm("hmac(sha512)", bytearray(make_key(512)), 256)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_key(self, make_key):
        """Different key bytes are not equal."""
        a = IpSecAlgorithm(CRYPT_AES_CBC, bytes(16))
        b = IpSecAlgorithm(CRYPT_AES_CBC, b"\x01" + bytes(15))
        assert a != b

    def test_different_trunc_len(self, make_key):
        """Different truncation lengths are not equal."""
        a = IpSecAlgorithm(AUTH_HMAC_SHA512, make_key(512), 256)
        b = IpSecAlgorithm(AUTH_HMAC_SHA512, make_key(512), 512)
        assert a != b

    def test_not_equal_to_other_types(self, make_key):
        """Comparison with unrelated objects is False."""
        algo = IpSecAlgorithm(CRYPT_AES_CBC, make_key(128))
        assert algo != "cbc(aes)"
        assert algo != (algo.name, algo.key, None)


class TestRepr:
    """Key material stays out of repr()."""

    def test_key_hidden(self):
        """repr shows the key length, not the key."""
        key = b"\xab" * 64
        algo = IpSecAlgorithm(AUTH_HMAC_SHA512, key, 256)
        text = repr(algo)
        assert "<hidden 64 bytes>" in text
        assert "hmac(sha512)" in text
        assert "256" in text
        assert repr(key) not in text

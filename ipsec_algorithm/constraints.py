"""
Per-algorithm key and truncation length rules.

HMAC key lengths and maximum truncation lengths follow the digest size of
the underlying hash (RFC 2104 / RFC 4868). Counter-mode and AEAD keys carry
a trailing 32-bit nonce or salt (RFC 3686, RFC 4106, RFC 7634).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from cryptography.hazmat.primitives import hashes

from ipsec_algorithm.algorithms import AlgorithmIdentifier
from ipsec_algorithm.errors import UnknownAlgorithmError

SALT_BITS = 32  # Nonce/salt appended to CTR, GCM and ChaCha20-Poly1305 keys

AES_KEY_BITS = frozenset({128, 192, 256})


@dataclass(frozen=True)
class KeyConstraint:
    """Permitted key bit-lengths for an algorithm."""

    bit_lengths: frozenset[int]

    def permits(self, key_bits: int) -> bool:
        return key_bits in self.bit_lengths

    def describe(self) -> str:
        return ", ".join(str(bits) for bits in sorted(self.bit_lengths))


@dataclass(frozen=True)
class TruncationConstraint:
    """Inclusive truncation-length bounds, in bits.

    ``step_bits`` restricts accepted values to ``min_bits + n * step_bits``,
    which is how algorithms with a few discrete tag sizes are expressed.
    """

    min_bits: int
    max_bits: int
    step_bits: int = 1

    def permits(self, truncation_length_bits: int) -> bool:
        if not self.min_bits <= truncation_length_bits <= self.max_bits:
            return False
        return (truncation_length_bits - self.min_bits) % self.step_bits == 0

    def describe(self) -> str:
        if self.min_bits == self.max_bits:
            return str(self.min_bits)
        if self.step_bits == 1:
            return f"{self.min_bits}-{self.max_bits}"
        values = range(self.min_bits, self.max_bits + 1, self.step_bits)
        return ", ".join(str(bits) for bits in values)


def _hmac(hash_cls: type[hashes.HashAlgorithm], min_trunc_bits: int) -> tuple[KeyConstraint, TruncationConstraint]:
    digest_bits = hash_cls.digest_size * 8
    return (
        KeyConstraint(frozenset({digest_bits})),
        TruncationConstraint(min_trunc_bits, digest_bits),
    )


def _salted(key_bits: frozenset[int]) -> KeyConstraint:
    return KeyConstraint(frozenset(bits + SALT_BITS for bits in key_bits))


_HMAC_MD5 = _hmac(hashes.MD5, 96)
_HMAC_SHA1 = _hmac(hashes.SHA1, 96)
_HMAC_SHA256 = _hmac(hashes.SHA256, 96)
_HMAC_SHA384 = _hmac(hashes.SHA384, 192)
_HMAC_SHA512 = _hmac(hashes.SHA512, 256)

KEY_CONSTRAINTS: Mapping[AlgorithmIdentifier, KeyConstraint] = MappingProxyType({
    AlgorithmIdentifier.CRYPT_AES_CBC: KeyConstraint(AES_KEY_BITS),
    AlgorithmIdentifier.CRYPT_AES_CTR: _salted(AES_KEY_BITS),
    AlgorithmIdentifier.AUTH_HMAC_MD5: _HMAC_MD5[0],
    AlgorithmIdentifier.AUTH_HMAC_SHA1: _HMAC_SHA1[0],
    AlgorithmIdentifier.AUTH_HMAC_SHA256: _HMAC_SHA256[0],
    AlgorithmIdentifier.AUTH_HMAC_SHA384: _HMAC_SHA384[0],
    AlgorithmIdentifier.AUTH_HMAC_SHA512: _HMAC_SHA512[0],
    AlgorithmIdentifier.AUTH_AES_XCBC: KeyConstraint(frozenset({128})),
    AlgorithmIdentifier.AUTH_AES_CMAC: KeyConstraint(frozenset({128})),
    AlgorithmIdentifier.AUTH_CRYPT_AES_GCM: _salted(AES_KEY_BITS),
    AlgorithmIdentifier.AUTH_CRYPT_CHACHA20_POLY1305: _salted(frozenset({256})),
})

# Crypt-only algorithms have no entry
TRUNCATION_CONSTRAINTS: Mapping[AlgorithmIdentifier, TruncationConstraint] = MappingProxyType({
    AlgorithmIdentifier.AUTH_HMAC_MD5: _HMAC_MD5[1],
    AlgorithmIdentifier.AUTH_HMAC_SHA1: _HMAC_SHA1[1],
    AlgorithmIdentifier.AUTH_HMAC_SHA256: _HMAC_SHA256[1],
    AlgorithmIdentifier.AUTH_HMAC_SHA384: _HMAC_SHA384[1],
    AlgorithmIdentifier.AUTH_HMAC_SHA512: _HMAC_SHA512[1],
    AlgorithmIdentifier.AUTH_AES_XCBC: TruncationConstraint(96, 96),
    AlgorithmIdentifier.AUTH_AES_CMAC: TruncationConstraint(96, 96),
    AlgorithmIdentifier.AUTH_CRYPT_AES_GCM: TruncationConstraint(64, 128, step_bits=32),
    AlgorithmIdentifier.AUTH_CRYPT_CHACHA20_POLY1305: TruncationConstraint(128, 128),
})


def _require_known(algorithm: AlgorithmIdentifier) -> AlgorithmIdentifier:
    try:
        return AlgorithmIdentifier(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(
            f"No constraints for unrecognized algorithm: {algorithm!r}",
            algorithm=str(algorithm),
        ) from None


def key_constraint_of(algorithm: AlgorithmIdentifier) -> KeyConstraint:
    """
    Look up the permitted key lengths for an algorithm.

    Raises:
        UnknownAlgorithmError: If the algorithm is not recognized
    """
    return KEY_CONSTRAINTS[_require_known(algorithm)]


def truncation_constraint_of(algorithm: AlgorithmIdentifier) -> TruncationConstraint | None:
    """
    Look up the truncation-length bounds for an algorithm.

    Returns None for encryption-only algorithms.

    Raises:
        UnknownAlgorithmError: If the algorithm is not recognized
    """
    return TRUNCATION_CONSTRAINTS.get(_require_known(algorithm))

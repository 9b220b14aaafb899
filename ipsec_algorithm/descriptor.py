"""
IPsec algorithm descriptor.

An IpSecAlgorithm holds everything needed to configure one transform of a
security association: the algorithm, its key material and, for
authentication and AEAD algorithms, the ICV truncation length. Instances
can only be built from parameters that pass validation and cannot be
modified afterwards.

Example:
    auth = IpSecAlgorithm(AUTH_HMAC_SHA256, key_32_bytes, 128)
    crypt = IpSecAlgorithm(CRYPT_AES_CBC, key_16_bytes)
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass

from ipsec_algorithm.algorithms import AlgorithmIdentifier
from ipsec_algorithm.validation import ensure_valid


@dataclass(frozen=True, eq=False, repr=False)
class IpSecAlgorithm:
    """
    Validated, immutable IPsec transform algorithm.

    Args:
        name: Kernel algorithm name or AlgorithmIdentifier
        key: Key material (copied)
        truncation_length_bits: ICV truncation length; required for
            authentication and AEAD algorithms, dropped for encryption-only ones

    Raises:
        InvalidNameError: Unrecognized algorithm name
        MissingTruncationLengthError: Truncation length required but not given
        InvalidKeyLengthError: Key bit-length not permitted for the algorithm
        InvalidTruncationLengthError: Truncation length out of bounds
    """

    name: AlgorithmIdentifier
    key: bytes
    truncation_length_bits: int | None = None

    def __post_init__(self):
        algorithm = ensure_valid(self.name, self.key, self.truncation_length_bits)
        object.__setattr__(self, "name", algorithm)
        object.__setattr__(self, "key", bytes(self.key))
        if algorithm.is_encryption():
            object.__setattr__(self, "truncation_length_bits", None)

    @classmethod
    def _trusted(
        cls,
        name: AlgorithmIdentifier,
        key: bytes,
        truncation_length_bits: int | None,
    ) -> IpSecAlgorithm:
        """Build without bound checks, for already-validated wire input."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "name", AlgorithmIdentifier(name))
        object.__setattr__(instance, "key", bytes(key))
        object.__setattr__(instance, "truncation_length_bits", truncation_length_bits)
        return instance

    @property
    def key_length_bits(self) -> int:
        return len(self.key) * 8

    def is_encryption(self) -> bool:
        return self.name.is_encryption()

    def is_authentication(self) -> bool:
        return self.name.is_authentication()

    def is_aead(self) -> bool:
        return self.name.is_aead()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpSecAlgorithm):
            return NotImplemented
        return (
            self.name == other.name
            and self.truncation_length_bits == other.truncation_length_bits
            and hmac.compare_digest(self.key, other.key)
        )

    def __hash__(self) -> int:
        # Key bytes stay out of the hash
        return hash((self.name.value, len(self.key), self.truncation_length_bits))

    def __repr__(self) -> str:
        return (
            f"IpSecAlgorithm(name={self.name.value!r}, "
            f"key=<hidden {len(self.key)} bytes>, "
            f"truncation_length_bits={self.truncation_length_bits!r})"
        )

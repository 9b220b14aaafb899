"""
Validation of IPsec algorithm parameters.

Checks run in a fixed order and stop at the first failure:

1. the name must be a recognized algorithm
2. authentication and AEAD algorithms must have a truncation length
3. the key bit-length must be one the algorithm permits
4. the truncation length must fall within the algorithm's bounds

Encryption-only algorithms ignore any truncation length they are given.
"""

import logging
from typing import TYPE_CHECKING

from ipsec_algorithm.algorithms import AlgorithmIdentifier
from ipsec_algorithm.constraints import key_constraint_of, truncation_constraint_of
from ipsec_algorithm.errors import (
    InvalidKeyLengthError,
    InvalidNameError,
    InvalidTruncationLengthError,
    MissingTruncationLengthError,
    ValidationError,
)

if TYPE_CHECKING:
    from ipsec_algorithm.descriptor import IpSecAlgorithm

logger = logging.getLogger(__name__)

KEY_TYPES = (bytes, bytearray, memoryview)


def is_valid_algorithm_name(name: str) -> bool:
    """Check whether a name is a recognized algorithm."""
    try:
        AlgorithmIdentifier.from_name(name)
    except InvalidNameError:
        return False
    return True


def _check_types(key, truncation_length_bits) -> None:
    if not isinstance(key, KEY_TYPES):
        raise TypeError(f"Key must be bytes, got {type(key).__name__}")
    if truncation_length_bits is not None and (
        isinstance(truncation_length_bits, bool) or not isinstance(truncation_length_bits, int)
    ):
        raise TypeError(
            f"Truncation length must be an int, got {type(truncation_length_bits).__name__}"
        )


def check(
    name: str,
    key: bytes,
    truncation_length_bits: int | None = None,
) -> ValidationError | None:
    """
    Check algorithm parameters without constructing anything.

    Args:
        name: Kernel algorithm name (e.g., "hmac(sha256)")
        key: Key material
        truncation_length_bits: ICV truncation length, required for
            authentication and AEAD algorithms

    Returns:
        None if the parameters are valid, otherwise the error describing
        the first failed check

    Raises:
        TypeError: If key or truncation length has the wrong type
    """
    try:
        algorithm = AlgorithmIdentifier.from_name(name)
    except InvalidNameError as e:
        return e

    _check_types(key, truncation_length_bits)

    if algorithm.algorithm_class.requires_truncation_length and truncation_length_bits is None:
        return MissingTruncationLengthError(
            f"{algorithm.value} requires a truncation length",
            algorithm=algorithm.value,
        )

    key_bits = len(bytes(key)) * 8
    key_constraint = key_constraint_of(algorithm)
    if not key_constraint.permits(key_bits):
        return InvalidKeyLengthError(
            f"Invalid key length for {algorithm.value}: {key_bits} bits "
            f"(expected {key_constraint.describe()})",
            algorithm=algorithm.value,
            key_bits=key_bits,
        )

    trunc_constraint = truncation_constraint_of(algorithm)
    if (
        trunc_constraint is not None
        and truncation_length_bits is not None
        and not trunc_constraint.permits(truncation_length_bits)
    ):
        return InvalidTruncationLengthError(
            f"Invalid truncation length for {algorithm.value}: {truncation_length_bits} bits "
            f"(expected {trunc_constraint.describe()})",
            algorithm=algorithm.value,
            truncation_length_bits=truncation_length_bits,
        )

    return None


def validate(name: str, key: bytes, truncation_length_bits: int | None = None) -> "IpSecAlgorithm":
    """
    Validate parameters and build an algorithm descriptor.

    Args:
        name: Kernel algorithm name
        key: Key material
        truncation_length_bits: ICV truncation length

    Returns:
        IpSecAlgorithm

    Raises:
        ValidationError: If any check fails
        TypeError: If key or truncation length has the wrong type
    """
    from ipsec_algorithm.descriptor import IpSecAlgorithm

    return IpSecAlgorithm(name, key, truncation_length_bits)


def ensure_valid(name: str, key: bytes, truncation_length_bits: int | None = None) -> AlgorithmIdentifier:
    """Run check() and raise its error, returning the resolved identifier."""
    error = check(name, key, truncation_length_bits)
    if error is not None:
        logger.debug("Rejected IPsec algorithm %r: %s", error.algorithm, error.kind.value)
        raise error
    return AlgorithmIdentifier(name)

"""
Exception classes for IPsec algorithm descriptors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Distinguishable failure kinds."""
    INVALID_NAME = "invalid_name"
    MISSING_TRUNCATION_LENGTH = "missing_truncation_length"
    INVALID_KEY_LENGTH = "invalid_key_length"
    INVALID_TRUNCATION_LENGTH = "invalid_truncation_length"
    MALFORMED = "malformed"
    UNKNOWN_ALGORITHM = "unknown_algorithm"


class IpSecAlgorithmError(Exception):
    """Base exception for IPsec algorithm errors."""

    kind: ErrorKind

    def __init__(self, message: str, algorithm: str | None = None):
        super().__init__(message)
        self.algorithm = algorithm


class ValidationError(IpSecAlgorithmError, ValueError):
    """Algorithm parameters were rejected."""
    pass


class InvalidNameError(ValidationError):
    """Algorithm name is not recognized."""
    kind = ErrorKind.INVALID_NAME


class MissingTruncationLengthError(ValidationError):
    """Authentication or AEAD algorithm given without a truncation length."""
    kind = ErrorKind.MISSING_TRUNCATION_LENGTH


class InvalidKeyLengthError(ValidationError):
    """Key bit-length is not permitted for the algorithm."""
    kind = ErrorKind.INVALID_KEY_LENGTH

    def __init__(self, message: str, algorithm: str | None = None, key_bits: int | None = None):
        super().__init__(message, algorithm)
        self.key_bits = key_bits


class InvalidTruncationLengthError(ValidationError):
    """Truncation length is outside the algorithm's bounds."""
    kind = ErrorKind.INVALID_TRUNCATION_LENGTH

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        truncation_length_bits: int | None = None,
    ):
        super().__init__(message, algorithm)
        self.truncation_length_bits = truncation_length_bits


class DecodeError(IpSecAlgorithmError, ValueError):
    """Wire form could not be decoded."""
    kind = ErrorKind.MALFORMED


class MalformedEncodingError(DecodeError):
    """Wire form is truncated or internally inconsistent."""
    pass


class UnknownAlgorithmError(IpSecAlgorithmError, LookupError):
    """Table lookup on an identifier outside the recognized set.

    Raised only when a caller skips name validation; this is a programming
    error, not bad user input.
    """
    kind = ErrorKind.UNKNOWN_ALGORITHM

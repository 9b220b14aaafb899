"""
IPsec Algorithm - Validated transform descriptors for IPsec security associations.

This package validates and represents the algorithm, key material and
truncation length of an IPsec authentication, encryption or AEAD transform,
and reports which algorithms a platform build supports. It performs no
cryptographic operations itself.
"""

from ipsec_algorithm.algorithms import (
    AlgorithmClass,
    AlgorithmIdentifier,
    AUTH_AES_CMAC,
    AUTH_AES_XCBC,
    AUTH_CRYPT_AES_GCM,
    AUTH_CRYPT_CHACHA20_POLY1305,
    AUTH_HMAC_MD5,
    AUTH_HMAC_SHA1,
    AUTH_HMAC_SHA256,
    AUTH_HMAC_SHA384,
    AUTH_HMAC_SHA512,
    CRYPT_AES_CBC,
    CRYPT_AES_CTR,
)
from ipsec_algorithm.availability import (
    ALGO_TO_REQUIRED_FIRST_SDK,
    ALL_ALGORITHMS,
    get_supported_algorithms,
    load_algos,
    mandatory_set,
    optional_candidates,
    supported_set,
)
from ipsec_algorithm.constraints import (
    KeyConstraint,
    TruncationConstraint,
    key_constraint_of,
    truncation_constraint_of,
)
from ipsec_algorithm.descriptor import IpSecAlgorithm
from ipsec_algorithm.encoding import (
    decode,
    encode,
    from_base64,
    to_base64,
)
from ipsec_algorithm.errors import (
    DecodeError,
    ErrorKind,
    InvalidKeyLengthError,
    InvalidNameError,
    InvalidTruncationLengthError,
    IpSecAlgorithmError,
    MalformedEncodingError,
    MissingTruncationLengthError,
    UnknownAlgorithmError,
    ValidationError,
)
from ipsec_algorithm.sources import (
    ConfigSource,
    EnvSystemProperties,
    SettingsConfigSource,
    SystemProperties,
)
from ipsec_algorithm.validation import (
    check,
    is_valid_algorithm_name,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    # Identifiers
    "AlgorithmClass",
    "AlgorithmIdentifier",
    "CRYPT_AES_CBC",
    "CRYPT_AES_CTR",
    "AUTH_HMAC_MD5",
    "AUTH_HMAC_SHA1",
    "AUTH_HMAC_SHA256",
    "AUTH_HMAC_SHA384",
    "AUTH_HMAC_SHA512",
    "AUTH_AES_XCBC",
    "AUTH_AES_CMAC",
    "AUTH_CRYPT_AES_GCM",
    "AUTH_CRYPT_CHACHA20_POLY1305",
    # Constraints
    "KeyConstraint",
    "TruncationConstraint",
    "key_constraint_of",
    "truncation_constraint_of",
    # Descriptor and validation
    "IpSecAlgorithm",
    "check",
    "validate",
    "is_valid_algorithm_name",
    # Availability
    "ALGO_TO_REQUIRED_FIRST_SDK",
    "ALL_ALGORITHMS",
    "mandatory_set",
    "optional_candidates",
    "supported_set",
    "load_algos",
    "get_supported_algorithms",
    "ConfigSource",
    "SystemProperties",
    "EnvSystemProperties",
    "SettingsConfigSource",
    # Encoding
    "encode",
    "decode",
    "to_base64",
    "from_base64",
    # Errors
    "ErrorKind",
    "IpSecAlgorithmError",
    "ValidationError",
    "InvalidNameError",
    "MissingTruncationLengthError",
    "InvalidKeyLengthError",
    "InvalidTruncationLengthError",
    "DecodeError",
    "MalformedEncodingError",
    "UnknownAlgorithmError",
]

"""
IPsec algorithm identifiers.

Names match the Linux XFRM algorithm names so they can be handed to the
kernel unchanged. Each identifier belongs to exactly one class:

- crypt: encryption only, no truncation length
- auth: integrity only, truncation length required
- auth-crypt: combined AEAD, truncation length required
"""

from enum import Enum

from ipsec_algorithm.errors import InvalidNameError


class AlgorithmClass(str, Enum):
    """Transform class of an IPsec algorithm."""
    CRYPT = "crypt"
    AUTH = "auth"
    AUTH_CRYPT = "auth_crypt"

    @property
    def requires_truncation_length(self) -> bool:
        return self is not AlgorithmClass.CRYPT


class AlgorithmIdentifier(str, Enum):
    """Recognized IPsec transform algorithms."""

    # Encryption
    CRYPT_AES_CBC = "cbc(aes)"
    CRYPT_AES_CTR = "rfc3686(ctr(aes))"  # Key includes 32-bit nonce

    # Authentication
    AUTH_HMAC_MD5 = "hmac(md5)"
    AUTH_HMAC_SHA1 = "hmac(sha1)"
    AUTH_HMAC_SHA256 = "hmac(sha256)"
    AUTH_HMAC_SHA384 = "hmac(sha384)"
    AUTH_HMAC_SHA512 = "hmac(sha512)"
    AUTH_AES_XCBC = "xcbc(aes)"
    AUTH_AES_CMAC = "cmac(aes)"

    # AEAD
    AUTH_CRYPT_AES_GCM = "rfc4106(gcm(aes))"  # Key includes 32-bit salt
    AUTH_CRYPT_CHACHA20_POLY1305 = "rfc7539esp(chacha20,poly1305)"  # Key includes 32-bit salt

    @property
    def algorithm_class(self) -> AlgorithmClass:
        return _ALGORITHM_CLASSES[self]

    def is_encryption(self) -> bool:
        return self.algorithm_class is AlgorithmClass.CRYPT

    def is_authentication(self) -> bool:
        return self.algorithm_class is AlgorithmClass.AUTH

    def is_aead(self) -> bool:
        return self.algorithm_class is AlgorithmClass.AUTH_CRYPT

    @classmethod
    def from_name(cls, name: str) -> "AlgorithmIdentifier":
        """
        Resolve a kernel algorithm name.

        Args:
            name: Algorithm name (e.g., "cbc(aes)")

        Returns:
            Matching AlgorithmIdentifier

        Raises:
            InvalidNameError: If the name is not recognized
        """
        try:
            return cls(name)
        except ValueError:
            raise InvalidNameError(f"Unknown algorithm name: {name!r}", algorithm=name) from None


_ALGORITHM_CLASSES = {
    AlgorithmIdentifier.CRYPT_AES_CBC: AlgorithmClass.CRYPT,
    AlgorithmIdentifier.CRYPT_AES_CTR: AlgorithmClass.CRYPT,
    AlgorithmIdentifier.AUTH_HMAC_MD5: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_HMAC_SHA1: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_HMAC_SHA256: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_HMAC_SHA384: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_HMAC_SHA512: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_AES_XCBC: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_AES_CMAC: AlgorithmClass.AUTH,
    AlgorithmIdentifier.AUTH_CRYPT_AES_GCM: AlgorithmClass.AUTH_CRYPT,
    AlgorithmIdentifier.AUTH_CRYPT_CHACHA20_POLY1305: AlgorithmClass.AUTH_CRYPT,
}


# Module-level aliases, mirroring the platform constants
CRYPT_AES_CBC = AlgorithmIdentifier.CRYPT_AES_CBC
CRYPT_AES_CTR = AlgorithmIdentifier.CRYPT_AES_CTR
AUTH_HMAC_MD5 = AlgorithmIdentifier.AUTH_HMAC_MD5
AUTH_HMAC_SHA1 = AlgorithmIdentifier.AUTH_HMAC_SHA1
AUTH_HMAC_SHA256 = AlgorithmIdentifier.AUTH_HMAC_SHA256
AUTH_HMAC_SHA384 = AlgorithmIdentifier.AUTH_HMAC_SHA384
AUTH_HMAC_SHA512 = AlgorithmIdentifier.AUTH_HMAC_SHA512
AUTH_AES_XCBC = AlgorithmIdentifier.AUTH_AES_XCBC
AUTH_AES_CMAC = AlgorithmIdentifier.AUTH_AES_CMAC
AUTH_CRYPT_AES_GCM = AlgorithmIdentifier.AUTH_CRYPT_AES_GCM
AUTH_CRYPT_CHACHA20_POLY1305 = AlgorithmIdentifier.AUTH_CRYPT_CHACHA20_POLY1305

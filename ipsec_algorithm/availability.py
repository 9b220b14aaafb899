"""
Version-gated algorithm availability.

An algorithm is mandatory on every build whose vendor API level is at or
above the level it was introduced at. Below that level it is optional and
only supported when the build's allow-list names it. Names outside the
recognized set are dropped from the allow-list rather than rejected.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from ipsec_algorithm.algorithms import AlgorithmIdentifier
from ipsec_algorithm.sources import (
    OPTIONAL_ALGORITHMS_RESOURCE,
    ConfigSource,
    SettingsConfigSource,
    SystemProperties,
    vendor_api_level as read_vendor_api_level,
)

logger = logging.getLogger(__name__)

SDK_VERSION_ZERO = 0
SDK_VERSION_S = 31

# Minimum vendor API level at which each algorithm is mandatory. The keys
# are the complete set of recognized algorithms.
ALGO_TO_REQUIRED_FIRST_SDK: Mapping[AlgorithmIdentifier, int] = MappingProxyType({
    AlgorithmIdentifier.CRYPT_AES_CBC: SDK_VERSION_ZERO,
    AlgorithmIdentifier.AUTH_HMAC_MD5: SDK_VERSION_ZERO,
    AlgorithmIdentifier.AUTH_HMAC_SHA1: SDK_VERSION_ZERO,
    AlgorithmIdentifier.AUTH_HMAC_SHA256: SDK_VERSION_ZERO,
    AlgorithmIdentifier.AUTH_HMAC_SHA384: SDK_VERSION_ZERO,
    AlgorithmIdentifier.AUTH_HMAC_SHA512: SDK_VERSION_ZERO,
    AlgorithmIdentifier.AUTH_CRYPT_AES_GCM: SDK_VERSION_ZERO,
    AlgorithmIdentifier.CRYPT_AES_CTR: SDK_VERSION_S,
    AlgorithmIdentifier.AUTH_AES_XCBC: SDK_VERSION_S,
    AlgorithmIdentifier.AUTH_AES_CMAC: SDK_VERSION_S,
    AlgorithmIdentifier.AUTH_CRYPT_CHACHA20_POLY1305: SDK_VERSION_S,
})

ALL_ALGORITHMS: frozenset[AlgorithmIdentifier] = frozenset(ALGO_TO_REQUIRED_FIRST_SDK)


def mandatory_set(vendor_api_level: int) -> frozenset[AlgorithmIdentifier]:
    """Algorithms every build at this level must support."""
    return frozenset(
        algo for algo, first_sdk in ALGO_TO_REQUIRED_FIRST_SDK.items()
        if vendor_api_level >= first_sdk
    )


def optional_candidates(vendor_api_level: int) -> frozenset[AlgorithmIdentifier]:
    """Algorithms a build at this level may enable through its allow-list."""
    return ALL_ALGORITHMS - mandatory_set(vendor_api_level)


def supported_set(
    vendor_api_level: int,
    optional_allow_list: Iterable[str],
) -> frozenset[AlgorithmIdentifier]:
    """
    Reconcile the mandatory set with an optional-algorithm allow-list.

    Args:
        vendor_api_level: Vendor API level of the build
        optional_allow_list: Raw algorithm names enabled by configuration

    Returns:
        Mandatory algorithms plus the allow-listed optional ones

    Raises:
        TypeError: If the allow-list is a single string
    """
    if isinstance(optional_allow_list, (str, bytes)):
        raise TypeError("Allow-list must be an iterable of names, not a string")

    allowed = set()
    for name in optional_allow_list:
        try:
            allowed.add(AlgorithmIdentifier(name))
        except ValueError:
            logger.debug("Ignoring unrecognized optional algorithm: %r", name)

    return mandatory_set(vendor_api_level) | (optional_candidates(vendor_api_level) & allowed)


def load_algos(
    config_source: ConfigSource,
    vendor_api_level: int | None = None,
    system_properties: SystemProperties | None = None,
) -> frozenset[str]:
    """
    Compute the supported algorithm names from a configuration source.

    Args:
        config_source: Provides the optional-algorithm string array
        vendor_api_level: Explicit level; read from system_properties when omitted
        system_properties: Source of the vendor API level (env-backed default)

    Returns:
        Supported kernel algorithm names
    """
    if vendor_api_level is None:
        vendor_api_level = read_vendor_api_level(system_properties)

    optional = config_source.get_string_array(OPTIONAL_ALGORITHMS_RESOURCE)
    supported = frozenset(algo.value for algo in supported_set(vendor_api_level, optional))
    logger.debug(
        "Supported IPsec algorithms at vendor API level %d: %s",
        vendor_api_level,
        sorted(supported),
    )
    return supported


def get_supported_algorithms(
    config_source: ConfigSource | None = None,
    system_properties: SystemProperties | None = None,
) -> frozenset[str]:
    """
    Return the algorithm names supported on this build.

    Collaborators default to the IPSEC_* settings and are read on every call.
    """
    if config_source is None:
        config_source = SettingsConfigSource()
    return load_algos(config_source, system_properties=system_properties)

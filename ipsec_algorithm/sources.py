"""
Platform collaborators.

The availability registry needs two things from the platform: the vendor
API level of the build, and the list of optional algorithms the build
enables. Both are injected through the protocols below so callers can plug
in real system properties or resources; the defaults read library settings.
"""

from typing import Protocol, runtime_checkable

from ipsec_algorithm.config import DEFAULT_VENDOR_API_LEVEL, Settings

VENDOR_API_LEVEL_PROPERTY = "ro.vendor.api_level"
OPTIONAL_ALGORITHMS_RESOURCE = "config_optionalIpSecAlgorithms"


@runtime_checkable
class SystemProperties(Protocol):
    """Read access to integer build properties."""

    def get_int(self, key: str, default: int) -> int:
        ...


@runtime_checkable
class ConfigSource(Protocol):
    """Read access to string-array configuration resources."""

    def get_string_array(self, name: str) -> list[str]:
        ...


class EnvSystemProperties:
    """
    System properties backed by IPSEC_* settings.

    Settings are re-read on every call so changes to the environment are
    picked up without restarting.
    """

    def get_int(self, key: str, default: int) -> int:
        if key != VENDOR_API_LEVEL_PROPERTY:
            return default
        return Settings().vendor_api_level


class SettingsConfigSource:
    """Configuration resources backed by IPSEC_* settings."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings

    def get_string_array(self, name: str) -> list[str]:
        if name != OPTIONAL_ALGORITHMS_RESOURCE:
            raise KeyError(f"Unknown configuration resource: {name}")
        settings = self._settings if self._settings is not None else Settings()
        return list(settings.optional_algorithms)


def vendor_api_level(properties: SystemProperties | None = None) -> int:
    """Read the vendor API level, falling back to the latest level."""
    if properties is None:
        properties = EnvSystemProperties()
    return properties.get_int(VENDOR_API_LEVEL_PROPERTY, DEFAULT_VENDOR_API_LEVEL)

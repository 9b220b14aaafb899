"""Library configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# No vendor API level property means a current build: every algorithm is mandatory
DEFAULT_VENDOR_API_LEVEL = 10000


class Settings(BaseSettings):
    """Settings loaded from IPSEC_* environment variables."""

    # Platform version marker, stands in for ro.vendor.api_level
    vendor_api_level: int = DEFAULT_VENDOR_API_LEVEL

    # Kernel names enabled below their mandatory level. Set from the
    # environment as a JSON array, since names may contain commas
    # (e.g., IPSEC_OPTIONAL_ALGORITHMS='["rfc7539esp(chacha20,poly1305)"]').
    optional_algorithms: list[str] = Field(default_factory=list)

    model_config = SettingsConfigDict(env_prefix="IPSEC_", env_file=".env", extra="ignore")

    @field_validator("vendor_api_level")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("vendor_api_level must be non-negative")
        return value

    @field_validator("optional_algorithms")
    @classmethod
    def _strip_blanks(cls, value: list[str]) -> list[str]:
        return [name.strip() for name in value if name.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

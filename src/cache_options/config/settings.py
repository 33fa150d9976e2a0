"""Settings for cache option parsing.

Environment driven defaults used while cache options are parsed. Values
are read once per process; call ``get_settings.cache_clear()`` to reload.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OptionsSettings(BaseSettings):
    """Global cache option settings."""

    model_config = SettingsConfigDict(
        env_prefix="CACHE_OPTIONS_",
        case_sensitive=False,
        extra="ignore"
    )

    # Expiration
    default_ttl_interval: int = Field(
        default=3000,
        ge=0,
        description="Janitor sweep interval in milliseconds when only a default TTL is set"
    )

    # Process naming
    name_separator: str = Field(default="_", description="Separator between cache name and suffix")
    stats_suffix: str = Field(default="stats", min_length=1, description="Suffix of the stats hook name")
    janitor_suffix: str = Field(default="janitor", min_length=1, description="Suffix of the janitor name")
    manager_suffix: str = Field(default="manager", min_length=1, description="Suffix of the transaction manager name")


@lru_cache()
def get_settings() -> OptionsSettings:
    """Get cached settings instance."""
    return OptionsSettings()

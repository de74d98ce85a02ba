"""Hasher settings using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hasher configuration loaded from the environment.

    All settings are read from ``SECUREHASH_``-prefixed environment variables
    or a ``.env`` file. They only feed the composition root; the hashing core
    itself receives an explicit HasherConfig.

    Usage:
        settings = get_settings()
        print(settings.digest_algorithm)
        print(settings.hashing_rounds)
    """

    # Digest
    digest_algorithm: str = Field(default="sha256")
    hashing_rounds: int = Field(default=1, ge=1)

    # Salt
    salt_length: int = Field(default=8, ge=1)
    salt_retry_cap: int = Field(
        default=1000,
        ge=0,
        description="Number of redraws allowed after a salt collision before "
        "giving up with SaltExhaustedError.",
    )
    auto_register: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="SECUREHASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level is a standard logging level name."""
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: '{v}'")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the process lifetime.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()

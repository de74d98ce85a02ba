"""Composition root - where concrete implementations are wired together.

This is where we decide:
- Use hashlib for the digest round (not a third-party primitive)
- Use the OS CSPRNG via ``secrets`` for salts
- Use an in-memory set for the registry
- Use pydantic-core JSON for structured values
- Use Settings from environment (not hardcoded config)

The application layer doesn't know about these choices - it only knows about
interfaces and callables.
"""

from typing import Any

from pydantic import ValidationError

from securehash.application.dtos.hasher_config import HasherConfig, describe_validation_errors
from securehash.application.services.secure_hasher import SecureHasher
from securehash.domain.exceptions import InvalidConfigurationError
from securehash.domain.repositories.salt_registry import ISaltRegistry
from securehash.domain.services.random_source import IRandomSource
from securehash.domain.services.serializer import ISerializer
from securehash.infrastructure.config.settings import Settings, get_settings
from securehash.infrastructure.repositories.salt_registry_impl import InMemorySaltRegistry
from securehash.infrastructure.security.hashlib_digest import hashlib_round
from securehash.infrastructure.security.secrets_random_source import SecretsRandomSource
from securehash.infrastructure.serialization.pydantic_serializer import PydanticSerializer


def build_config(settings: Settings | None = None, **overrides: Any) -> HasherConfig:
    """
    Build a HasherConfig from settings, with keyword overrides.

    Args:
        settings: Settings to read (defaults to get_settings())
        **overrides: Any HasherConfig field, e.g. rounds=3 or round_fn=my_digest

    Returns:
        Validated HasherConfig

    Raises:
        InvalidConfigurationError: If the settings or the resulting
            configuration are invalid
    """
    try:
        settings = settings or get_settings()
    except ValidationError as exc:
        raise InvalidConfigurationError(
            f"Invalid securehash settings: {describe_validation_errors(exc)}"
        ) from exc

    values: dict[str, Any] = {
        "rounds": settings.hashing_rounds,
        "salt_length": settings.salt_length,
        "retry_cap": settings.salt_retry_cap,
        "auto_register": settings.auto_register,
    }
    values.update(overrides)
    if "round_fn" not in values:
        values["round_fn"] = hashlib_round(settings.digest_algorithm)

    return HasherConfig(**values)


def create_secure_hasher(
    settings: Settings | None = None,
    *,
    registry: ISaltRegistry | None = None,
    random_source: IRandomSource | None = None,
    serializer: ISerializer | None = None,
    **overrides: Any,
) -> SecureHasher:
    """
    Create a production SecureHasher.

    When no registry is passed the hasher gets a fresh one of its own; pass
    a registry to share it with other hashers or with code outside.

    Usage:
        hasher = create_secure_hasher(rounds=10_000)
        result = hasher.hash(b"correct horse battery staple")

    Args:
        settings: Settings to read (defaults to get_settings())
        registry: Registry of issued salts, shared by reference
        random_source: Salt byte source (defaults to SecretsRandomSource)
        serializer: Serializer for hash_value() (defaults to PydanticSerializer)
        **overrides: HasherConfig field overrides

    Returns:
        Configured SecureHasher
    """
    return SecureHasher(
        config=build_config(settings, **overrides),
        random_source=random_source or SecretsRandomSource(),
        registry=registry if registry is not None else InMemorySaltRegistry(),
        serializer=serializer or PydanticSerializer(),
    )

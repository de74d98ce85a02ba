"""Repository implementations - infrastructure layer."""

from securehash.infrastructure.repositories.salt_registry_impl import InMemorySaltRegistry

__all__ = ["InMemorySaltRegistry"]

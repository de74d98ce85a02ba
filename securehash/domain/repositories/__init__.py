"""Repository interfaces - domain layer."""

from securehash.domain.repositories.salt_registry import ISaltRegistry

__all__ = ["ISaltRegistry"]

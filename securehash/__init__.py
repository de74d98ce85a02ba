"""Salted, multi-round hashing with registry-enforced salt uniqueness."""

from securehash.application.dtos.hasher_config import HasherConfig
from securehash.application.services.salt_generator import SaltGenerator
from securehash.application.services.secure_hasher import SecureHasher
from securehash.composition import build_config, create_secure_hasher
from securehash.domain.entities.digest_result import DigestResult, Salt
from securehash.domain.exceptions import (
    HashingError,
    InvalidConfigurationError,
    NotSerializableError,
    NullValueError,
    SaltExhaustedError,
)
from securehash.domain.repositories.salt_registry import ISaltRegistry
from securehash.domain.services.digest_rounds import DigestRound, apply_rounds
from securehash.domain.services.random_source import IRandomSource
from securehash.domain.services.salting import (
    SaltingStrategy,
    concatenate,
    interleave,
    prepend,
)
from securehash.domain.services.serializer import ISerializer
from securehash.infrastructure.repositories.salt_registry_impl import InMemorySaltRegistry

__version__ = "1.0.0"

__all__ = [
    "DigestResult",
    "DigestRound",
    "HasherConfig",
    "HashingError",
    "IRandomSource",
    "ISaltRegistry",
    "ISerializer",
    "InMemorySaltRegistry",
    "InvalidConfigurationError",
    "NotSerializableError",
    "NullValueError",
    "Salt",
    "SaltExhaustedError",
    "SaltGenerator",
    "SaltingStrategy",
    "SecureHasher",
    "apply_rounds",
    "build_config",
    "concatenate",
    "create_secure_hasher",
    "interleave",
    "prepend",
]

"""Domain exceptions - hashing failures."""

from securehash.domain.exceptions.domain_exceptions import (
    HashingError,
    InvalidConfigurationError,
    NotSerializableError,
    NullValueError,
    SaltExhaustedError,
)

__all__ = [
    "HashingError",
    "SaltExhaustedError",
    "InvalidConfigurationError",
    "NotSerializableError",
    "NullValueError",
]

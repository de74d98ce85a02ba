"""Hasher configuration DTO using Pydantic."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from securehash.domain.exceptions import InvalidConfigurationError
from securehash.domain.services.digest_rounds import DigestRound
from securehash.domain.services.salting import DEFAULT_SALTING_STRATEGY, SaltingStrategy

DEFAULT_SALT_LENGTH = 8
DEFAULT_SALT_RETRY_CAP = 1000


def describe_validation_errors(exc: ValidationError) -> str:
    """Flatten pydantic errors into a single readable line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
        for error in exc.errors()
    )


class HasherConfig(BaseModel):
    """
    Immutable configuration for a SecureHasher.

    Validation:
    - round_fn: Must be callable (single-round digest, bytes -> bytes)
    - rounds: At least 1 (there is no default, the caller picks it)
    - salt_length: At least 1 byte
    - salting_strategy: Must be callable, defaults to concatenation
    - retry_cap: At least 0 (0 means a single draw)
    - auto_register: Record each issued salt in the registry

    Any violation is raised as InvalidConfigurationError at construction
    time, never later at hash time. This holds for the constructor,
    model_validate() and model_copy(update=...) alike.
    """

    round_fn: DigestRound
    rounds: Annotated[int, Field(ge=1)]
    salt_length: Annotated[int, Field(ge=1)] = DEFAULT_SALT_LENGTH
    salting_strategy: SaltingStrategy = DEFAULT_SALTING_STRATEGY
    retry_cap: Annotated[int, Field(ge=0)] = DEFAULT_SALT_RETRY_CAP
    auto_register: bool = True

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="wrap")
    @classmethod
    def reject_invalid_configuration(cls, data: Any, handler):
        try:
            return handler(data)
        except ValidationError as exc:
            raise InvalidConfigurationError(
                f"Invalid hasher configuration: {describe_validation_errors(exc)}"
            ) from exc

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False):
        """Copy the config; updated fields go through validation again."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**dict(self), **update})

    @property
    def salt_space(self) -> int:
        """Number of distinct salts of the configured length."""
        return 256**self.salt_length

"""Secure hasher - application layer orchestration of salting and digesting."""

import logging
import threading
from typing import Any

from securehash.application.dtos.hasher_config import HasherConfig
from securehash.application.services.salt_generator import SaltGenerator
from securehash.domain.entities.digest_result import DigestResult, Salt
from securehash.domain.exceptions import InvalidConfigurationError
from securehash.domain.repositories.salt_registry import ISaltRegistry
from securehash.domain.services.digest_rounds import apply_rounds
from securehash.domain.services.random_source import IRandomSource
from securehash.domain.services.serializer import ISerializer

logger = logging.getLogger(__name__)


class SecureHasher:
    """
    Salts and hashes payloads, never reusing a salt within its registry.

    This service:
    1. Depends on IRandomSource, ISaltRegistry and ISerializer abstractions
    2. Receives the digest round and salting strategy as plain callables
    3. Draws and reserves salts under the registry lock, digests outside it
    4. Returns immutable DigestResult values

    The registry is held by reference. If the caller shares it with other
    hashers or mutates it directly, those changes are visible to the next
    uniqueness check. Hashers sharing a registry also share its lock, so
    they never issue the same salt; code writing to the registry directly
    should take ``registry.lock`` as well.
    """

    def __init__(
        self,
        config: HasherConfig,
        random_source: IRandomSource,
        registry: ISaltRegistry,
        serializer: ISerializer | None = None,
    ):
        """
        Initialize hasher with configuration and collaborators.

        Args:
            config: Validated hasher configuration
            random_source: Source of salt bytes
            registry: Registry of issued salts (shared, not copied)
            serializer: Converts structured values for hash_value(); optional

        Raises:
            InvalidConfigurationError: If config is not a HasherConfig

        Example:
            # Production
            hasher = create_secure_hasher()

            # Testing
            hasher = SecureHasher(
                config=HasherConfig(round_fn=fake_digest, rounds=2),
                random_source=FakeRandomSource([b"\\x01" * 8]),
                registry=InMemorySaltRegistry(),
            )
        """
        if not isinstance(config, HasherConfig):
            raise InvalidConfigurationError(
                f"Expected HasherConfig, got {type(config).__name__}"
            )

        self._config = config
        self._serializer = serializer
        self._salt_generator = SaltGenerator(
            random_source=random_source,
            registry=registry,
            salt_length=config.salt_length,
            retry_cap=config.retry_cap,
        )
        self._lock = threading.Lock()

    @property
    def config(self) -> HasherConfig:
        return self._config

    @property
    def registry(self) -> ISaltRegistry:
        """The registry currently consulted for salt uniqueness."""
        return self._salt_generator.registry

    def hash(self, payload: bytes) -> DigestResult:
        """
        Salt and hash a byte payload.

        Steps:
        1. Generate a salt absent from the registry
        2. Combine payload and salt with the salting strategy
        3. Apply the digest round ``rounds`` times
        4. Register the salt if auto_register is enabled

        Drawing runs under the registry lock and the drawn salt is reserved
        before the lock is dropped, so two concurrent calls, on this hasher
        or on another one sharing the registry, can never be handed the same
        salt while the digest rounds themselves run unlocked. Either a
        complete result is returned or an exception propagates; a salt is
        only registered once its digest has been computed, and a failed
        digest releases its reservation.

        Args:
            payload: Bytes to hash

        Returns:
            DigestResult with the digest and the salt used

        Raises:
            TypeError: If payload is not bytes-like
            SaltExhaustedError: If no unique salt is found within the retry cap
        """
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"hash() expects bytes, got {type(payload).__name__}; "
                "use hash_value() for structured values"
            )

        # Hasher lock pins the registry reference; registry lock spans hashers.
        # Always acquired in this order.
        with self._lock:
            registry = self._salt_generator.registry
            with registry.lock:
                salt = self._salt_generator.generate()
                registry.reserve(salt)

        try:
            digest = self.compute(payload, salt)
            if self._config.auto_register:
                with registry.lock:
                    # No-op if an outside writer inserted it already
                    registry.add(salt)
        finally:
            registry.release(salt)

        return DigestResult(digest=digest, salt=salt)

    def hash_value(self, value: Any) -> DigestResult:
        """
        Serialize a structured value, then salt and hash its bytes.

        Args:
            value: Any value the configured serializer accepts

        Returns:
            DigestResult for the serialized bytes

        Raises:
            InvalidConfigurationError: If no serializer was configured
            NullValueError: If value is None (from the serializer)
            NotSerializableError: If value cannot be serialized (from the serializer)
            SaltExhaustedError: If no unique salt is found within the retry cap
        """
        if self._serializer is None:
            raise InvalidConfigurationError(
                "No serializer configured; cannot hash structured values"
            )

        return self.hash(self._serializer.serialize(value))

    def compute(self, payload: bytes, salt: Salt) -> bytes:
        """
        Compute the digest of a payload for a known salt.

        Neither the generator nor the registry is touched, which makes this
        the operation to use when recomputing a stored digest.

        Args:
            payload: Bytes to hash
            salt: Salt to combine with the payload

        Returns:
            The digest after all rounds
        """
        salted = self._config.salting_strategy(bytes(payload), bytes(salt))
        return apply_rounds(salted, self._config.round_fn, self._config.rounds)

    def replace_registry(self, new_registry: ISaltRegistry) -> None:
        """
        Swap the registry used for subsequent uniqueness checks.

        Salts already issued are not re-validated against the new registry.
        A hash() already past salt generation commits its salt to the
        registry it drew from.

        Args:
            new_registry: The full, updated registry of salts
        """
        with self._lock:
            self._salt_generator.registry = new_registry

        logger.debug(f"Salt registry replaced ({len(new_registry)} salts)")

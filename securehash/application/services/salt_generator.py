"""Salt generator - draws registry-unique salts with a bounded retry."""

import logging

from securehash.domain.entities.digest_result import Salt
from securehash.domain.exceptions import SaltExhaustedError
from securehash.domain.repositories.salt_registry import ISaltRegistry
from securehash.domain.services.random_source import IRandomSource

logger = logging.getLogger(__name__)


class SaltGenerator:
    """
    Produces salts that are not yet present in a registry.

    The generator only reads the registry. Recording the salt it returns is
    the caller's job (see SecureHasher), which is what allows the caller to
    wrap "generate then register" in a single critical section.

    Usage:
        generator = SaltGenerator(
            random_source=SecretsRandomSource(),
            registry=InMemorySaltRegistry(),
            salt_length=8,
            retry_cap=1000,
        )
        salt = generator.generate()
    """

    def __init__(
        self,
        random_source: IRandomSource,
        registry: ISaltRegistry,
        salt_length: int,
        retry_cap: int,
    ):
        """
        Initialize generator with its collaborators.

        Args:
            random_source: Source of random candidate bytes
            registry: Registry consulted for collisions (held by reference)
            salt_length: Length of each salt in bytes
            retry_cap: Number of redraws allowed after the first collision
        """
        self._random_source = random_source
        self.registry = registry
        self._salt_length = salt_length
        self._retry_cap = retry_cap

    @property
    def max_draws(self) -> int:
        """Total number of candidates drawn before giving up."""
        return self._retry_cap + 1

    def generate(self) -> Salt:
        """
        Draw a salt that is neither issued nor reserved in the registry.

        An empty registry accepts the first candidate without a lookup.
        Otherwise each candidate is checked by membership; the first unique
        one wins and colliding candidates are discarded.

        Returns:
            A salt of ``salt_length`` bytes absent from the registry

        Raises:
            SaltExhaustedError: If no unique salt is found within
                ``retry_cap + 1`` draws
        """
        registry = self.registry
        for attempt in range(1, self.max_draws + 1):
            candidate = bytes(self._random_source.random_bytes(self._salt_length))

            if registry.is_empty() or not registry.is_taken(candidate):
                if attempt > 1:
                    logger.debug(f"Unique salt found after {attempt} draws")
                return candidate

            logger.debug(
                f"Salt collision on draw {attempt}/{self.max_draws} "
                f"(registry size {len(registry)})"
            )

        logger.warning(
            f"Salt retry cap of {self._retry_cap} exceeded with "
            f"{len(registry)} registered salts of {self._salt_length} bytes"
        )
        raise SaltExhaustedError(
            f"Salt retry cap of {self._retry_cap} reached, could not generate a "
            f"unique {self._salt_length}-byte salt. The salt length might be too small."
        )

"""Pytest configuration and fixtures.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakeRandomSource, FakeDigest)
- Tests run fast and are fully deterministic (no real randomness)
- Tests are isolated (each test gets fresh fakes and a fresh registry)
"""

import pytest

from securehash.application.dtos.hasher_config import HasherConfig
from securehash.application.services.secure_hasher import SecureHasher
from securehash.infrastructure.config.settings import get_settings
from securehash.infrastructure.repositories.salt_registry_impl import InMemorySaltRegistry
from securehash.infrastructure.serialization.pydantic_serializer import PydanticSerializer
from tests.fakes.digest_fake import FakeDigest
from tests.fakes.random_source_fake import CountingRandomSource


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_digest() -> FakeDigest:
    """Provide a recording digest round that produces readable output."""
    return FakeDigest()


@pytest.fixture
def counting_source() -> CountingRandomSource:
    """Provide a source that never repeats within the salt space."""
    return CountingRandomSource(start=1)


@pytest.fixture
def registry() -> InMemorySaltRegistry:
    """Provide a fresh, empty salt registry."""
    return InMemorySaltRegistry()


@pytest.fixture
def hasher_config(fake_digest) -> HasherConfig:
    """Two-byte salts, two rounds of the fake digest."""
    return HasherConfig(round_fn=fake_digest, rounds=2, salt_length=2, retry_cap=5)


@pytest.fixture
def secure_hasher(hasher_config, counting_source, registry) -> SecureHasher:
    """
    Provide a SecureHasher wired with fakes.

    Salts come from CountingRandomSource (b"\\x00\\x01", b"\\x00\\x02", ...),
    digests from FakeDigest, so every output is predictable.
    """
    return SecureHasher(
        config=hasher_config,
        random_source=counting_source,
        registry=registry,
        serializer=PydanticSerializer(),
    )

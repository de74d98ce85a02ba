"""Unit tests for SaltGenerator.

Draws are scripted with FakeRandomSource so collisions, retries and
exhaustion happen exactly when the test says so.
"""

import logging

import pytest

from securehash.application.services.salt_generator import SaltGenerator
from securehash.domain.exceptions import SaltExhaustedError
from securehash.infrastructure.repositories.salt_registry_impl import InMemorySaltRegistry
from tests.fakes.random_source_fake import FakeRandomSource

pytestmark = pytest.mark.unit


def single_byte(value: int) -> bytes:
    return bytes([value])


@pytest.fixture
def nearly_full_registry() -> InMemorySaltRegistry:
    """All single-byte salts except 0x10 and 0x20."""
    return InMemorySaltRegistry(
        single_byte(value) for value in range(256) if value not in (0x10, 0x20)
    )


class TestSaltGeneratorBasics:
    """Test drawing and uniqueness checks."""

    def test_empty_registry_accepts_first_draw(self):
        """Test that the first draw is accepted when nothing is registered."""
        # Arrange
        source = FakeRandomSource([b"\xaa\xbb"])
        generator = SaltGenerator(source, InMemorySaltRegistry(), salt_length=2, retry_cap=0)

        # Act
        salt = generator.generate()

        # Assert
        assert salt == b"\xaa\xbb"
        assert source.draw_count == 1
        assert source.requested_lengths == [2]

    def test_unique_draw_accepted(self):
        """Test that a salt absent from a non-empty registry is accepted."""
        # Arrange
        source = FakeRandomSource([b"\x02"])
        registry = InMemorySaltRegistry([b"\x01"])
        generator = SaltGenerator(source, registry, salt_length=1, retry_cap=0)

        # Act & Assert
        assert generator.generate() == b"\x02"

    def test_collision_triggers_redraw(self):
        """Test that colliding candidates are discarded until a unique one appears."""
        # Arrange
        source = FakeRandomSource([b"\x01", b"\x01", b"\x03"])
        registry = InMemorySaltRegistry([b"\x01"])
        generator = SaltGenerator(source, registry, salt_length=1, retry_cap=5)

        # Act
        salt = generator.generate()

        # Assert
        assert salt == b"\x03"
        assert source.draw_count == 3

    def test_reserved_salt_is_skipped(self):
        """Test that a salt reserved by an in-flight hash is not handed out."""
        # Arrange
        registry = InMemorySaltRegistry()
        registry.reserve(b"\x04")
        source = FakeRandomSource([b"\x04", b"\x05"])
        generator = SaltGenerator(source, registry, salt_length=1, retry_cap=1)

        # Act
        salt = generator.generate()

        # Assert
        assert salt == b"\x05"
        assert source.draw_count == 2

    def test_generator_does_not_register(self):
        """Test that generating leaves the registry untouched."""
        # Arrange
        registry = InMemorySaltRegistry()
        generator = SaltGenerator(
            FakeRandomSource([b"\x09"]), registry, salt_length=1, retry_cap=0
        )

        # Act
        generator.generate()

        # Assert
        assert registry.is_empty()

    def test_registry_changes_are_observed(self):
        """Test that the generator holds the registry by reference, not a copy."""
        # Arrange
        registry = InMemorySaltRegistry([b"\x00"])
        source = FakeRandomSource([b"\x05", b"\x06"])
        generator = SaltGenerator(source, registry, salt_length=1, retry_cap=1)

        # Act
        registry.add(b"\x05")

        # Assert
        assert generator.generate() == b"\x06"

    def test_max_draws(self):
        """Test that the draw budget is the retry cap plus one."""
        generator = SaltGenerator(
            FakeRandomSource([]), InMemorySaltRegistry(), salt_length=1, retry_cap=4
        )

        assert generator.max_draws == 5


class TestSaltGeneratorRetryCap:
    """saltLength=1, retryCap=2, 254 of 256 values already issued."""

    @pytest.mark.parametrize("free_on_draw", [1, 2, 3])
    def test_succeeds_when_free_value_within_cap(self, nearly_full_registry, free_on_draw):
        """Test success when a free value shows up within three draws."""
        # Arrange
        taken = [b"\x00", b"\x01"][: free_on_draw - 1]
        source = FakeRandomSource(taken + [b"\x20"])
        generator = SaltGenerator(source, nearly_full_registry, salt_length=1, retry_cap=2)

        # Act
        salt = generator.generate()

        # Assert
        assert salt == b"\x20"
        assert source.draw_count == free_on_draw

    def test_fails_when_free_value_not_within_cap(self, nearly_full_registry):
        """Test SaltExhaustedError when three draws all collide."""
        # Arrange
        source = FakeRandomSource([b"\x00", b"\x01", b"\x02", b"\x10"])
        generator = SaltGenerator(source, nearly_full_registry, salt_length=1, retry_cap=2)

        # Act & Assert
        with pytest.raises(SaltExhaustedError) as exc_info:
            generator.generate()

        assert exc_info.value.error_code == "SALT_EXHAUSTED"
        # The free value was scripted fourth and never drawn
        assert source.draw_count == 3
        assert source.remaining == 1

    def test_zero_cap_means_single_draw(self):
        """Test that retry_cap=0 allows exactly one draw."""
        # Arrange
        source = FakeRandomSource([b"\x01", b"\x02"])
        generator = SaltGenerator(
            source, InMemorySaltRegistry([b"\x01"]), salt_length=1, retry_cap=0
        )

        # Act & Assert
        with pytest.raises(SaltExhaustedError):
            generator.generate()

        assert source.draw_count == 1

    @pytest.mark.parametrize("retry_cap", [0, 10, 300])
    def test_full_salt_space_always_fails(self, retry_cap):
        """Test that a registry holding every possible salt always fails."""
        # Arrange
        full_registry = InMemorySaltRegistry(single_byte(value) for value in range(256))
        source = FakeRandomSource(single_byte(i % 256) for i in range(retry_cap + 1))
        generator = SaltGenerator(source, full_registry, salt_length=1, retry_cap=retry_cap)

        # Act & Assert
        with pytest.raises(SaltExhaustedError):
            generator.generate()

        assert source.draw_count == retry_cap + 1

    def test_exhaustion_is_logged(self, caplog):
        """Test that giving up is logged as a warning."""
        # Arrange
        source = FakeRandomSource([b"\x01"])
        generator = SaltGenerator(
            source, InMemorySaltRegistry([b"\x01"]), salt_length=1, retry_cap=0
        )

        # Act
        with caplog.at_level(logging.WARNING, logger="securehash"):
            with pytest.raises(SaltExhaustedError):
                generator.generate()

        # Assert
        assert "retry cap" in caplog.text

"""Fake implementations for testing."""

from tests.fakes.digest_fake import FakeDigest
from tests.fakes.random_source_fake import CountingRandomSource, FakeRandomSource

__all__ = ["FakeDigest", "FakeRandomSource", "CountingRandomSource"]

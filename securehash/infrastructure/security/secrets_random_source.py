"""Cryptographically secure random source backed by the ``secrets`` module.

The ``secrets`` module reads from the operating system CSPRNG, which is what
salt generation needs. Only this module touches it; the rest of the package
depends on IRandomSource.
"""

import secrets

from securehash.domain.services.random_source import IRandomSource


class SecretsRandomSource(IRandomSource):
    """Production random source using ``secrets.token_bytes``."""

    def random_bytes(self, length: int) -> bytes:
        return secrets.token_bytes(length)

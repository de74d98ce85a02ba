"""Digest round functions backed by ``hashlib``.

The hashing core never picks an algorithm itself; it receives a callable that
applies one round. This module builds such callables from hashlib algorithm
names so the composition root can go from settings to a round function.
"""

import hashlib

from securehash.domain.exceptions import InvalidConfigurationError
from securehash.domain.services.digest_rounds import DigestRound

# Variable-length digests need an explicit output size
_SHAKE_DIGEST_SIZES = {"shake_128": 32, "shake_256": 64}


def hashlib_round(algorithm: str) -> DigestRound:
    """
    Build a single-round digest function for a hashlib algorithm.

    Args:
        algorithm: hashlib algorithm name, e.g. "sha256", "sha3_512", "blake2b"

    Returns:
        Callable applying one round of the algorithm to a byte string

    Raises:
        InvalidConfigurationError: If hashlib does not provide the algorithm

    Example:
        >>> sha256 = hashlib_round("sha256")
        >>> sha256(b"abc").hex()[:8]
        'ba7816bf'
    """
    name = algorithm.strip().lower().replace("-", "_")
    try:
        hashlib.new(name)
    except (ValueError, TypeError) as exc:
        raise InvalidConfigurationError(
            f"Unsupported digest algorithm: '{algorithm}'"
        ) from exc

    if name in _SHAKE_DIGEST_SIZES:
        size = _SHAKE_DIGEST_SIZES[name]

        def shake_round(data: bytes) -> bytes:
            return hashlib.new(name, data).digest(size)

        shake_round.__name__ = name
        return shake_round

    def digest_round(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    digest_round.__name__ = name
    return digest_round

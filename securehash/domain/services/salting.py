"""Salting strategies - how a payload and a salt become one byte string.

A strategy is any pure function ``(payload, salt) -> bytes``. There is no
class hierarchy: the hasher accepts a plain callable, and the functions below
are the variants shipped with the package.
"""

from collections.abc import Callable

from securehash.domain.entities.digest_result import Salt

SaltingStrategy = Callable[[bytes, Salt], bytes]


def concatenate(payload: bytes, salt: Salt) -> bytes:
    """Default strategy: payload bytes first, then the salt."""
    return bytes(payload) + bytes(salt)


def prepend(payload: bytes, salt: Salt) -> bytes:
    """Salt first, then the payload."""
    return bytes(salt) + bytes(payload)


def interleave(payload: bytes, salt: Salt) -> bytes:
    """
    Alternate payload and salt bytes, starting with the payload.

    Once the shorter input runs out the rest of the longer one is appended
    unchanged, so no input byte is dropped.

    Example:
        >>> interleave(b"abc", b"12")
        b'a1b2c'
    """
    payload = bytes(payload)
    salt = bytes(salt)
    shared = min(len(payload), len(salt))
    mixed = bytearray()
    for index in range(shared):
        mixed.append(payload[index])
        mixed.append(salt[index])
    mixed += payload[shared:]
    mixed += salt[shared:]
    return bytes(mixed)


DEFAULT_SALTING_STRATEGY: SaltingStrategy = concatenate

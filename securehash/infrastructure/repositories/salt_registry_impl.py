"""In-memory salt registry implementation.

This is an INFRASTRUCTURE detail. The domain layer (ISaltRegistry interface)
defines WHAT we need (membership test and insertion), while this
implementation defines HOW we do it (a Python set guarded by a lock).

Dependency flow:
    SecureHasher (application) → ISaltRegistry (domain) ← InMemorySaltRegistry (infrastructure)

Limitations:
- Data lost on restart (persisting issued salts is the caller's concern)
- Memory grows with the number of issued salts
"""

import threading
from collections.abc import Iterable, Iterator

from securehash.domain.entities.digest_result import Salt
from securehash.domain.repositories.salt_registry import ISaltRegistry


class InMemorySaltRegistry(ISaltRegistry):
    """
    Set-backed registry of issued salts.

    Membership is a hashed-set lookup, so checking a candidate costs the same
    regardless of how many salts are registered. Duplicate inserts collapse
    into one entry.

    Reservations live in a second set that is never counted or iterated.
    A single reentrant lock keeps both sets consistent across threads and is
    also the lock hashers hold while drawing and reserving a salt.

    Usage:
        registry = InMemorySaltRegistry(salts_loaded_from_db)
        hasher = create_secure_hasher(registry=registry)
    """

    def __init__(self, salts: Iterable[Salt] = ()) -> None:
        """
        Initialize registry, optionally pre-populated.

        Args:
            salts: Previously issued salts; byte-equal duplicates are merged
        """
        self._salts: set[bytes] = {bytes(salt) for salt in salts}
        self._reserved: set[bytes] = set()
        self._lock = threading.RLock()

    @property
    def lock(self):
        return self._lock

    def contains(self, salt: Salt) -> bool:
        with self._lock:
            return bytes(salt) in self._salts

    def add(self, salt: Salt) -> bool:
        salt = bytes(salt)
        with self._lock:
            if salt in self._salts:
                return False
            self._salts.add(salt)
            return True

    def reserve(self, salt: Salt) -> None:
        with self._lock:
            self._reserved.add(bytes(salt))

    def release(self, salt: Salt) -> None:
        with self._lock:
            self._reserved.discard(bytes(salt))

    def is_reserved(self, salt: Salt) -> bool:
        with self._lock:
            return bytes(salt) in self._reserved

    def has_reservations(self) -> bool:
        with self._lock:
            return bool(self._reserved)

    def __len__(self) -> int:
        with self._lock:
            return len(self._salts)

    def __iter__(self) -> Iterator[Salt]:
        with self._lock:
            snapshot = list(self._salts)
        return iter(snapshot)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"

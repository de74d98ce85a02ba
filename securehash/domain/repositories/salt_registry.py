"""Salt registry interface - the set of salts already issued."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager

from securehash.domain.entities.digest_result import Salt


class ISaltRegistry(ABC):
    """
    Interface for the collection of previously issued salts.

    The registry is consulted before a salt is handed out so that no salt is
    reused, and receives every new salt when the hasher is configured to
    auto-register. Entries are unique by byte content.

    A registry may be shared: the caller can hand the same instance to several
    hashers, or keep mutating it from outside. Hashers hold a reference and
    must observe those changes through ``contains``/``add``, never through a
    private copy.

    Every user of a shared registry takes ``lock`` around its
    check-then-reserve sequence, so hashers sharing one registry can never
    issue the same salt. A reserved salt is taken for uniqueness checks but
    not yet issued; it is either committed with ``add`` or dropped with
    ``release``. The lock must be reentrant: the other methods are called
    while it is held.
    """

    @property
    @abstractmethod
    def lock(self) -> AbstractContextManager:
        """Reentrant lock guarding check-then-reserve sequences."""
        pass

    @abstractmethod
    def contains(self, salt: Salt) -> bool:
        """
        Check whether a salt has already been issued.

        Args:
            salt: Candidate salt

        Returns:
            True if a byte-equal salt is present, False otherwise
        """
        pass

    @abstractmethod
    def add(self, salt: Salt) -> bool:
        """
        Record a salt as issued.

        Adding a salt that is already present is a no-op.

        Args:
            salt: Salt to record

        Returns:
            True if the salt was newly inserted, False if it was already present
        """
        pass

    @abstractmethod
    def reserve(self, salt: Salt) -> None:
        """
        Hold a salt while its digest is computed.

        Args:
            salt: Salt just drawn by a generator
        """
        pass

    @abstractmethod
    def release(self, salt: Salt) -> None:
        """Drop a reservation; releasing an unreserved salt is a no-op."""
        pass

    @abstractmethod
    def is_reserved(self, salt: Salt) -> bool:
        pass

    @abstractmethod
    def has_reservations(self) -> bool:
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of distinct salts recorded."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Salt]:
        """Iterate over a snapshot of the recorded salts."""
        pass

    def __contains__(self, salt: object) -> bool:
        if not isinstance(salt, (bytes, bytearray, memoryview)):
            return False
        return self.contains(bytes(salt))

    def is_taken(self, salt: Salt) -> bool:
        """Check whether a salt is issued or currently reserved."""
        return self.contains(salt) or self.is_reserved(salt)

    def is_empty(self) -> bool:
        """Check whether no salt has been issued or reserved yet."""
        return len(self) == 0 and not self.has_reservations()

"""Digest result value object - pure data, no infrastructure."""

from dataclasses import dataclass

# A salt is an opaque, fixed-length byte string compared byte for byte.
Salt = bytes


@dataclass(frozen=True)
class DigestResult:
    """
    Immutable pair of a computed digest and the salt that produced it.

    Constructed once by the hasher and handed to the caller, who owns it
    from then on. Both fields are read-only; the caller typically stores
    them side by side (e.g. in a password table).
    """

    digest: bytes
    salt: Salt

    def __post_init__(self):
        # Normalize bytearray/memoryview inputs so the value stays immutable
        object.__setattr__(self, "digest", bytes(self.digest))
        object.__setattr__(self, "salt", bytes(self.salt))

    @property
    def digest_hex(self) -> str:
        """Hex encoding of the digest."""
        return self.digest.hex()

    @property
    def salt_hex(self) -> str:
        """Hex encoding of the salt."""
        return self.salt.hex()

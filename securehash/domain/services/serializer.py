"""Serializer interface - converts domain values into canonical bytes.

The hasher only ever digests bytes. When a caller wants to hash a structured
value (a model, a record, a dict) it goes through this abstraction first.
"""

from abc import ABC, abstractmethod
from typing import Any


class ISerializer(ABC):
    """
    Interface for turning an arbitrary value into bytes.

    Implementations must be deterministic: serializing equal values twice
    must yield identical bytes, otherwise digests cannot be recomputed.
    """

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """
        Serialize a value to bytes.

        Args:
            value: The value to serialize

        Returns:
            Canonical byte representation of the value

        Raises:
            NullValueError: If value is None
            NotSerializableError: If the value's type cannot be serialized
        """
        pass

"""JSON serializer built on pydantic-core.

Turns structured values into canonical JSON bytes before hashing. pydantic's
serializer understands models, dataclasses, datetimes, UUIDs, enums and the
standard containers, which covers the values a caller typically hashes.
"""

import dataclasses
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from securehash.domain.exceptions import NotSerializableError, NullValueError
from securehash.domain.services.serializer import ISerializer


def _canonical(value: Any) -> Any:
    """
    Rewrite a value so its JSON form does not depend on set iteration order.

    Sets and frozensets become lists sorted by the JSON encoding of their
    (already canonical) members; models and dataclasses are unpacked so sets
    nested inside them are reached too.
    """
    if isinstance(value, BaseModel):
        return _canonical(value.model_dump())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _canonical(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {key: _canonical(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_canonical(item) for item in value), key=to_json)
    return value


class PydanticSerializer(ISerializer):
    """
    Serializer producing JSON bytes via ``pydantic_core.to_json``.

    Sets are written in sorted order so the same set serializes identically
    in every process. Dictionaries keep insertion order; callers who need
    equal dicts with different key order to hash identically should sort them
    first. Raw bytes are rejected: hash them directly with SecureHasher.hash().
    """

    def serialize(self, value: Any) -> bytes:
        if value is None:
            raise NullValueError("Value is None, nothing to serialize")

        if isinstance(value, (bytes, bytearray, memoryview)):
            raise NotSerializableError(
                "Raw bytes are already serialized; pass them to hash() directly"
            )

        try:
            return to_json(_canonical(value))
        except PydanticSerializationError as exc:
            raise NotSerializableError(
                f"Type of value is not serializable: {type(value).__name__}"
            ) from exc

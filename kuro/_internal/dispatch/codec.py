"""JSON encoding of request bodies and decoding of result types."""

from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from kuro.exceptions import DecodeError, SerializationError

T = TypeVar("T")


def encode_body(body: Any) -> bytes:
    """Encode a request body as JSON. ``None`` encodes to ``null``.

    Raises:
        SerializationError: If the body is cyclic or of an unsupported type.
    """
    try:
        return pydantic_core.to_json(body)
    except (pydantic_core.PydanticSerializationError, ValueError, TypeError) as e:
        raise SerializationError(f"could not marshal body: {e}") from e


@lru_cache(maxsize=128)
def _adapter(result_type: type) -> TypeAdapter:
    return TypeAdapter(result_type)


def check_decodable(result_type: type) -> None:
    """Make sure a JSON schema can be built for ``result_type``.

    Raises:
        TypeError: If pydantic cannot generate a schema for the type.
    """
    if isinstance(result_type, type) and issubclass(result_type, BaseModel):
        return
    try:
        _adapter(result_type)
    except PydanticUserError as e:
        raise TypeError(f"{result_type!r} cannot be decoded from JSON: {e}") from e


def decode_result(content: bytes, result_type: type[T]) -> T:
    """Decode a JSON body into a new instance of ``result_type``.

    Pydantic models are validated directly; other types (dataclasses,
    TypedDicts, ...) go through a cached ``TypeAdapter``.

    Raises:
        DecodeError: If the body is not valid JSON or does not match the type.
    """
    try:
        if isinstance(result_type, type) and issubclass(result_type, BaseModel):
            return result_type.model_validate_json(content)
        return _adapter(result_type).validate_json(content)
    except ValidationError as e:
        raise DecodeError("client malfunction: malformed json body") from e

"""
MKNETWORK - JSON Codec

Serializes request bodies and decodes response bodies into typed values.
"""

import json
from typing import Any, Dict, Type, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from mknetwork.core.errors import DecodingError, InvalidBodyParamsError
from mknetwork.core.types import DecodingContext

T = TypeVar("T")

_TYPE_ADAPTER_CACHE: Dict[Any, TypeAdapter] = {}


def encode_json(value: Any) -> bytes:
    """
    Serialize a value to UTF-8 JSON bytes.

    NaN and Infinity are rejected since they are not valid JSON.

    Raises:
        InvalidBodyParamsError: If the value is not JSON-representable
    """
    try:
        return json.dumps(value, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise InvalidBodyParamsError(value) from exc


def get_type_adapter(shape: Any) -> TypeAdapter:
    """Return a cached TypeAdapter for shape. Unhashable shapes are not cached."""
    try:
        return _TYPE_ADAPTER_CACHE[shape]
    except KeyError:
        adapter = TypeAdapter(shape)
        _TYPE_ADAPTER_CACHE[shape] = adapter
        return adapter
    except TypeError:
        return TypeAdapter(shape)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def decode_json(content: bytes, shape: Type[T]) -> T:
    """
    Decode JSON bytes directly into the given shape.

    The shape can be anything pydantic can validate: dataclasses, TypedDicts,
    models, builtins and generic aliases such as list[int].

    Raises:
        DecodingError: If the bytes are not JSON or do not match the shape
    """
    adapter = get_type_adapter(shape)
    try:
        return adapter.validate_json(content)
    except PydanticValidationError as exc:
        errors = exc.errors()
        first = errors[0] if errors else {}
        path = tuple(first.get("loc", ()))
        where = ".".join(str(part) for part in path) or "<root>"
        context = DecodingContext(
            expected=_shape_name(shape),
            path=path,
            debug_description=f"{first.get('msg', 'invalid value')} at {where}",
            underlying=exc,
        )
        raise DecodingError(context) from exc

"""
MKNETWORK - Core Types

Common types and dataclasses used throughout the client.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar, Union

from mknetwork.core.errors import MKNetworkError

T = TypeVar("T")


class HTTPMethod(Enum):
    """HTTP methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def coerce(cls, method: Union["HTTPMethod", str]) -> "HTTPMethod":
        """
        Accept an HTTPMethod or a method name in any casing.

        Raises:
            ValueError: If the name is not a supported method
        """
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {method!r}") from None


@dataclass(frozen=True)
class HTTPHeader:
    """A single header name/value pair."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully assembled outbound request, ready for a transport."""

    url: str
    method: HTTPMethod
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self):
        # Read-only copy so Content-Type cannot change after building
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


@dataclass(frozen=True)
class TransportResponse:
    """Raw response handed back by a transport."""

    status_code: int
    content: Optional[bytes] = None


@dataclass(frozen=True)
class DecodingContext:
    """Where and why a response body failed to match the expected shape."""

    expected: str
    path: Tuple[Any, ...]
    debug_description: str
    underlying: Optional[BaseException] = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a client operation.

    Holds exactly one of a value or an error. Errors are MKNetworkError
    instances so they can be raised by unwrap().
    """

    value: Optional[T] = None
    error: Optional[MKNetworkError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: MKNetworkError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Return the value, or raise the stored error.

        Raises:
            MKNetworkError: The failure carried by this result
        """
        if self.error is not None:
            raise self.error
        return self.value

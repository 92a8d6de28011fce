"""
MKNETWORK - Error Taxonomy

Defines the error variants produced by the client.
All errors inherit from MKNetworkError and are returned inside a Result,
not raised, by the client operations.
"""

from typing import Any


class MKNetworkError(Exception):
    """Base exception for all MKNETWORK errors."""

    pass


class ConstructionError(MKNetworkError):
    """Raised when a request cannot be assembled. No network call is made."""

    pass


class InvalidURLError(ConstructionError):
    """The URL could not be parsed into a request target."""

    def __init__(self, url: Any):
        super().__init__("Invalid URL")
        self.url = url


class InvalidBodyParamsError(ConstructionError):
    """The request body could not be serialized to JSON."""

    def __init__(self, body: Any = None):
        super().__init__("Invalid body params")
        self.body = body


class NoResponseError(MKNetworkError):
    """The transport succeeded but returned no body bytes."""

    def __init__(self):
        super().__init__("No response")


class TransportError(MKNetworkError):
    """Wraps a lower-level transport failure (DNS, connect, TLS, timeout)."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Request error: {cause}")
        self.cause = cause


class DecodingError(MKNetworkError):
    """The response JSON does not match the expected shape."""

    def __init__(self, context: Any):
        super().__init__(f"Decoding error: {context.debug_description}")
        self.context = context

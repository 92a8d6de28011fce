"""
MKNETWORK - HTTP Transport Abstraction

Provides abstraction layer for the network call.
This allows mocking in tests and keeps the client free of socket concerns.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

import requests

from mknetwork.core.types import RequestDescriptor, TransportResponse

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Protocol for sending a prepared request."""

    def send(self, request: RequestDescriptor) -> TransportResponse:
        """
        Perform the request and return the raw response.

        Raises:
            requests.RequestException: On any transport-level failure
        """
        ...


class RequestsTransport:
    """Real transport using the requests library."""

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout

    def send(self, request: RequestDescriptor) -> TransportResponse:
        logger.debug(f"{request.method.value} {request.url}")
        response = requests.request(
            request.method.value,
            request.url,
            headers=dict(request.headers),
            data=request.body,
            timeout=self._timeout,
        )
        return TransportResponse(status_code=response.status_code, content=response.content)


class MockTransport:
    """
    Mock transport for testing.

    Responses are keyed by URL. A value can be bytes (sent as-is), a
    TransportResponse, an exception instance (raised), or any other value
    (encoded as JSON with status 200). Unknown URLs get default_response,
    or a 404 with an empty body when none is given.
    """

    def __init__(
        self,
        responses: Optional[Dict[str, Any]] = None,
        default_response: Any = None,
    ):
        self._responses = responses or {}
        self._default = default_response
        self._call_history: List[RequestDescriptor] = []

    def send(self, request: RequestDescriptor) -> TransportResponse:
        # Record call
        self._call_history.append(request)

        if request.url in self._responses:
            return self._build(self._responses[request.url])
        if self._default is not None:
            return self._build(self._default)

        return TransportResponse(status_code=404, content=b"")

    def _build(self, canned: Any) -> TransportResponse:
        if isinstance(canned, BaseException):
            raise canned
        if isinstance(canned, TransportResponse):
            return canned
        if isinstance(canned, bytes):
            return TransportResponse(status_code=200, content=canned)
        return TransportResponse(status_code=200, content=json.dumps(canned).encode())

    def get_call_history(self) -> List[RequestDescriptor]:
        """Get history of sent requests for testing."""
        return self._call_history

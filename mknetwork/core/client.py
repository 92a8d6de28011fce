"""
MKNETWORK - Network Client

Builds requests from a URL, method, headers and JSON body, sends them
through a transport and decodes JSON responses into typed values.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import requests
from requests.models import PreparedRequest

from mknetwork.config.settings import ClientConfig
from mknetwork.core.codec import decode_json, encode_json
from mknetwork.core.errors import (
    ConstructionError,
    DecodingError,
    InvalidURLError,
    NoResponseError,
    TransportError,
)
from mknetwork.core.headers import HTTPHeaders
from mknetwork.core.types import HTTPMethod, RequestDescriptor, Result
from mknetwork.infrastructure.http import RequestsTransport, Transport
from mknetwork.infrastructure.system_info import PlatformInfo, SystemPlatformInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

USER_AGENT_HEADER = "UserAgent"
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "Application/json"


def normalize_url(url: str) -> str:
    """
    Validate a URL with the same rules requests applies before sending.

    Raises:
        InvalidURLError: If the URL is empty, unparsable, or lacks a scheme or host
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(url)
    prepared = PreparedRequest()
    try:
        prepared.prepare_url(url, None)
    except (requests.RequestException, ValueError) as exc:
        raise InvalidURLError(url) from exc
    return prepared.url


class NetworkClient:
    """
    Stateless JSON-over-HTTP client.

    Each call builds its own header collection and request descriptor, so
    one instance can be shared freely between tasks.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        platform: Optional[PlatformInfo] = None,
        config: Optional[ClientConfig] = None,
    ):
        """
        Initialize client.

        Args:
            transport: Transport used to send requests (requests-based by default)
            platform: Provider for the default user agent
            config: Client configuration
        """
        self._config = config or ClientConfig()
        self._config.validate()
        self._transport = transport or RequestsTransport(timeout=self._config.timeout)
        self._platform = platform or SystemPlatformInfo(source=self._config.platform_source)

    def default_headers(self) -> HTTPHeaders:
        """Headers every request starts from."""
        user_agent = self._config.user_agent or self._platform.user_agent()
        return HTTPHeaders({USER_AGENT_HEADER: user_agent})

    def build_request(
        self,
        url: str,
        method: Union[HTTPMethod, str],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Result[RequestDescriptor]:
        """
        Assemble a request descriptor.

        Caller headers override defaults with the same name. Content-Type is
        always set to Application/json afterwards and cannot be overridden.

        Returns:
            Result holding the descriptor, or InvalidURLError / InvalidBodyParamsError
        """
        method = HTTPMethod.coerce(method)
        try:
            target = normalize_url(url)

            merged = self.default_headers()
            for name, value in (headers or {}).items():
                merged.update(name, value)
            merged.update(CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON)

            payload = encode_json(body) if body is not None else None
        except ConstructionError as exc:
            logger.warning(f"Could not build {method.value} request for {url!r}: {exc}")
            return Result.failure(exc)

        return Result.success(
            RequestDescriptor(url=target, method=method, headers=merged.to_dict(), body=payload)
        )

    async def send(self, request: RequestDescriptor, shape: Type[T]) -> Result[T]:
        """
        Send a request and decode the JSON response body into shape.

        The status code is not inspected; an empty body is a NoResponseError.

        Returns:
            Result holding the decoded value, or TransportError / NoResponseError / DecodingError
        """
        logger.debug(f"Sending {request.method.value} {request.url}")
        try:
            response = await asyncio.to_thread(self._transport.send, request)
        except (requests.RequestException, OSError, ValueError) as exc:
            # ValueError covers header values http.client cannot encode
            logger.warning(f"{request.method.value} {request.url} failed: {exc}")
            error = TransportError(exc)
            error.__cause__ = exc
            return Result.failure(error)

        if not response.content:
            logger.warning(f"{request.method.value} {request.url} returned no body")
            return Result.failure(NoResponseError())

        try:
            value = decode_json(response.content, shape)
        except DecodingError as exc:
            logger.warning(f"Could not decode response from {request.url}: {exc}")
            return Result.failure(exc)

        logger.debug(f"{request.method.value} {request.url} -> {response.status_code}")
        return Result.success(value)

    async def request(
        self,
        url: str,
        method: Union[HTTPMethod, str],
        shape: Type[T],
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Result[T]:
        """
        Build and send a request in one step.

        Construction failures are returned without touching the transport.
        """
        built = self.build_request(url, method, headers=headers, body=body)
        if built.is_failure:
            return Result.failure(built.error)
        return await self.send(built.value, shape)

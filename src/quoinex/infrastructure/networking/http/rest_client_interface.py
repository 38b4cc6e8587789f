"""
REST Base Implementation

Shared base class for exchange REST clients: builds signed requests,
dispatches them over one shared aiohttp session and decodes responses
into msgspec structs.

Key Features:
- Immutable base URL and credentials after construction
- Lazy, shared session management and connection handling
- Single bounded timeout per call, no retries
- Abstract methods for exchange-specific signing and error mapping
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import aiohttp
import msgspec
from yarl import URL

from quoinex.config.structs import LiquidConfig
from quoinex.infrastructure.exceptions.exchange import (
    ExchangeConnectionRestError, ExchangeTimeoutError, ResponseDecodeError
)
from quoinex.infrastructure.logging import ClientLoggerInterface, get_logger
from .structs import HTTPMethod, OutboundRequest, RawResponse
from .utils import build_url, encode_query, format_request, format_response

T = TypeVar("T")


class BaseRestClientInterface(ABC):
    """
    Abstract base class for exchange REST implementations.

    Provides shared infrastructure while keeping signing and error
    classification exchange-specific.
    """

    def __init__(self, config: LiquidConfig, logger: Optional[ClientLoggerInterface] = None):
        """
        Initialize base REST client with constructor injection.

        Args:
            config: Client configuration, validated here
            logger: Logger receiving request/response dumps (injected)

        Raises:
            ClientConstructionError: If credentials or base URL are invalid
        """
        config.validate()

        self.config = config
        self.logger = logger or get_logger(f'quoinex.rest.client.{self.exchange_name.lower()}')

        self._base_url: URL = config.get_base_url()
        self._timeout = aiohttp.ClientTimeout(total=config.network.request_timeout)

        # Shared session management
        self._session: Optional[aiohttp.ClientSession] = None

        # Performance tracking
        self._request_count = 0
        self._total_latency = 0.0

        self.logger.debug(f"{self.exchange_name} REST client initialized",
                          base_url=str(self._base_url),
                          token_id=config.credentials.get_preview())

    @property
    @abstractmethod
    def exchange_name(self) -> str:
        """Exchange name for logging and identification."""
        pass

    @property
    def base_url(self) -> URL:
        return self._base_url

    @abstractmethod
    def _authenticate(self, method: HTTPMethod, signed_path: str) -> Dict[str, str]:
        """
        Generate headers for a request, including the auth signature.

        Args:
            method: HTTP method
            signed_path: Canonical path plus encoded query string

        Returns:
            Headers to send with the request
        """
        pass

    @abstractmethod
    def _handle_error(self, status: int, response_text: str, body: bytes = b"") -> Exception:
        """
        Map a non-200 response to an exception.

        Args:
            status: HTTP status code
            response_text: Response body text
            body: Response body bytes as received

        Returns:
            Appropriate exception for the error
        """
        pass

    def build_request(self, method: HTTPMethod, path: str,
                      params: Optional[Mapping[str, Any]] = None,
                      data: Optional[Any] = None) -> OutboundRequest:
        """
        Build a signed request. No network activity.

        Args:
            method: HTTP method
            path: Resource path, appended verbatim to the base URL
            params: Query parameters, empty values are omitted
            data: msgspec-encodable request body

        Returns:
            Immutable request carrying the auth and identification headers
        """
        query = encode_query(params)
        signed_path = f"{path}?{query}" if query else path
        body = msgspec.json.encode(data) if data is not None else None

        return OutboundRequest(
            method=method,
            url=build_url(self._base_url, path, query),
            path=signed_path,
            headers=self._authenticate(method, signed_path),
            body=body,
        )

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    def _get_timeout(self, timeout: Optional[float]) -> aiohttp.ClientTimeout:
        """Per-call timeout can only shorten the configured one."""
        if timeout is None or timeout >= self._timeout.total:
            return self._timeout
        return aiohttp.ClientTimeout(total=timeout)

    async def send(self, request: OutboundRequest, timeout: Optional[float] = None) -> RawResponse:
        """
        Dispatch a built request.

        The body is read completely in every outcome before returning.

        Raises:
            ExchangeTimeoutError: Timeout elapsed
            ExchangeConnectionRestError: Network failure
            Exception from _handle_error: Any status other than 200
        """
        session = await self._ensure_session()
        client_timeout = self._get_timeout(timeout)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Request", dump=format_request(request))

        try:
            async with session.request(
                request.method.value,
                URL(request.url, encoded=True),
                data=request.body,
                headers=dict(request.headers),
                timeout=client_timeout,
            ) as response:
                body = await response.read()
                raw = RawResponse(
                    status=response.status,
                    reason=response.reason,
                    headers=dict(response.headers),
                    body=body,
                )
        except asyncio.TimeoutError as e:
            raise ExchangeTimeoutError(
                f"{request.method.value} {request.path} timed out after {client_timeout.total}s"
            ) from e
        except aiohttp.ClientError as e:
            raise ExchangeConnectionRestError(f"{request.method.value} {request.path} failed: {e}") from e

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Response", dump=format_response(raw))

        if raw.status != 200:
            raise self._handle_error(raw.status, raw.text, raw.body)

        return raw

    def _parse_response(self, response: RawResponse, response_type: Type[T]) -> T:
        """
        Decode response body into response_type using msgspec.

        Raises:
            ResponseDecodeError: If the body is not valid JSON of that shape
        """
        try:
            return msgspec.json.decode(response.body, type=response_type, strict=False)
        except msgspec.DecodeError as e:
            type_name = getattr(response_type, "__name__", str(response_type))
            raise ResponseDecodeError(f"Invalid {type_name} response: {e}",
                                      body=response.body, status_code=response.status) from e

    async def request(self, method: HTTPMethod, path: str, response_type: Type[T],
                      params: Optional[Mapping[str, Any]] = None,
                      data: Optional[Any] = None,
                      timeout: Optional[float] = None) -> T:
        """
        Build, send and decode a request.

        Args:
            method: HTTP method
            path: Resource path
            response_type: Type the 200 body is decoded into
            params: Query parameters
            data: Request body
            timeout: Optional shorter timeout for this call

        Returns:
            Decoded response
        """
        start_time = time.perf_counter()
        request = self.build_request(method, path, params, data)

        try:
            response = await self.send(request, timeout)
            result = self._parse_response(response, response_type)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.error(f"{self.exchange_name} request failed",
                              method=method.value,
                              path=request.path,
                              error_type=type(e).__name__,
                              error_message=str(e),
                              duration_ms=round(duration_ms, 3))
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._request_count += 1
        self._total_latency += duration_ms
        return result

    async def close(self):
        """Clean up resources and close connections."""
        if self._session and not self._session.closed:
            await self._session.close()

        if self._request_count > 0:
            self.logger.info(f"{self.exchange_name} REST client closed",
                             total_requests=self._request_count,
                             avg_latency_ms=self._total_latency / self._request_count)

        await self.logger.drain()

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def get_performance_stats(self) -> Dict[str, Any]:
        """Get performance statistics for monitoring."""
        if self._request_count == 0:
            return {"requests": 0, "avg_latency_ms": 0.0}

        return {
            "requests": self._request_count,
            "avg_latency_ms": self._total_latency / self._request_count,
            "total_latency_ms": self._total_latency
        }

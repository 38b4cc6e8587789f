"""
Liquid Base REST Implementation

Liquid-specific signing and error classification on top of the shared
REST base.

Authentication:
- Every request carries a fresh HS256 JWT in X-Quoine-Auth
- Claims: path (path + encoded query as sent), nonce (epoch seconds), token_id
- Tokens are never cached; the server alone decides staleness
"""

import time
from typing import Dict, Optional

import jwt

from quoinex.config.structs import LiquidConfig
from quoinex.exchanges.liquid.consts import (
    API_VERSION, API_VERSION_HEADER, AUTH_HEADER, JWT_ALGORITHM, USER_AGENT
)
from quoinex.infrastructure.exceptions.exchange import ExchangeApiError, OrderAlreadyExistsError
from quoinex.infrastructure.logging import ClientLoggerInterface
from quoinex.infrastructure.networking.http.rest_client_interface import BaseRestClientInterface
from quoinex.infrastructure.networking.http.structs import HTTPMethod


class LiquidBaseRestInterface(BaseRestClientInterface):
    """Base REST client for Liquid with JWT request signing."""

    def __init__(self, config: LiquidConfig, logger: Optional[ClientLoggerInterface] = None):
        super().__init__(config, logger)

        self.api_token_id = config.credentials.api_token_id
        self._secret_key = config.credentials.api_secret

    @property
    def exchange_name(self) -> str:
        return "Liquid"

    def _get_nonce(self) -> int:
        """Current wall-clock time in whole seconds."""
        return int(time.time())

    def _sign(self, signed_path: str) -> str:
        """
        Mint the auth token for one request.

        Raises:
            SigningError: If the secret is rejected as HMAC key material
        """
        claims = {
            "path": signed_path,
            "nonce": self._get_nonce(),
            "token_id": self.api_token_id,
        }
        return jwt.encode(claims, self._secret_key, algorithm=JWT_ALGORITHM)

    def _authenticate(self, method: HTTPMethod, signed_path: str) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            API_VERSION_HEADER: API_VERSION,
            "User-Agent": USER_AGENT,
            AUTH_HEADER: self._sign(signed_path),
        }

    def _handle_error(self, status: int, response_text: str, body: bytes = b"") -> Exception:
        """
        Only one error body is recognized; anything else is returned verbatim.

        Args:
            status: HTTP status code
            response_text: Response body text
            body: Response body bytes

        Returns:
            OrderAlreadyExistsError for the duplicate client_order_id payload,
            ExchangeApiError carrying the raw body otherwise
        """
        if response_text == OrderAlreadyExistsError.PAYLOAD:
            return OrderAlreadyExistsError(status)
        return ExchangeApiError(response_text, status, body=body)

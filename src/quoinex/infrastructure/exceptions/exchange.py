from typing import Optional

import jwt


# HMAC key material rejected by PyJWT while signing. Propagated unchanged.
SigningError = jwt.exceptions.InvalidKeyError


class ExchangeRestError(Exception):
    """Base exception for all exchange REST API errors."""
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


# Transport Errors
class ExchangeConnectionRestError(ExchangeRestError):
    """Network failure while sending a request or reading its response."""
    pass


class ExchangeTimeoutError(ExchangeConnectionRestError):
    """Request did not complete within the configured timeout."""
    pass


# Response Errors
class ExchangeApiError(ExchangeRestError):
    """
    Non-200 response without a recognized error shape.

    The message is the response body decoded as UTF-8; body keeps the exact bytes.
    """
    def __init__(self, message: str, status_code: Optional[int] = None, body: bytes = b"") -> None:
        super().__init__(message, status_code)
        self.body = body


class OrderAlreadyExistsError(ExchangeRestError):
    """Order rejected because its client_order_id was already used."""

    PAYLOAD = '{"errors":{"client_order_id":["exists"]}}'

    def __init__(self, status_code: Optional[int] = None) -> None:
        super().__init__(self.PAYLOAD, status_code)


class ResponseDecodeError(ExchangeRestError):
    """200 response whose body does not match the expected shape."""
    def __init__(self, message: str, body: bytes = b"", status_code: Optional[int] = None) -> None:
        super().__init__(message, status_code)
        self.body = body

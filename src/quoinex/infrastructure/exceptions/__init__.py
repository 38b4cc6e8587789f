from .exchange import (
    SigningError,
    ExchangeRestError,
    ExchangeConnectionRestError,
    ExchangeTimeoutError,
    ExchangeApiError,
    OrderAlreadyExistsError,
    ResponseDecodeError,
)
from .system import ConfigurationError, ClientConstructionError

__all__ = [
    "SigningError",
    "ExchangeRestError",
    "ExchangeConnectionRestError",
    "ExchangeTimeoutError",
    "ExchangeApiError",
    "OrderAlreadyExistsError",
    "ResponseDecodeError",
    "ConfigurationError",
    "ClientConstructionError",
]

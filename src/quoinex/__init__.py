"""
Async client for the Liquid (Quoine) exchange REST API.

Every request is signed with a fresh JWT and decoded into msgspec structs.
"""

import logging

from quoinex.version import __version__
from quoinex.config import LiquidConfig, LiquidCredentials, NetworkConfig, load_credentials_from_env
from quoinex.exchanges.liquid import LiquidRestClient, create_client
from quoinex.infrastructure.exceptions import (
    SigningError,
    ExchangeRestError,
    ExchangeConnectionRestError,
    ExchangeTimeoutError,
    ExchangeApiError,
    OrderAlreadyExistsError,
    ResponseDecodeError,
    ConfigurationError,
    ClientConstructionError,
)

__all__ = [
    "__version__",
    "LiquidConfig",
    "LiquidCredentials",
    "NetworkConfig",
    "load_credentials_from_env",
    "LiquidRestClient",
    "create_client",
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

logging.getLogger("quoinex").addHandler(logging.NullHandler())

# This module provides Liquid REST API implementations
from .liquid_base_rest import LiquidBaseRestInterface
from .liquid_rest_public import LiquidPublicRestInterface
from .liquid_rest_private import LiquidPrivateRestInterface
from .liquid_rest_client import LiquidRestClient, create_client

__all__ = [
    "LiquidBaseRestInterface",
    "LiquidPublicRestInterface",
    "LiquidPrivateRestInterface",
    "LiquidRestClient",
    "create_client",
]

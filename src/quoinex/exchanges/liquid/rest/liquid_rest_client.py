from typing import Optional

from quoinex.config.structs import LiquidConfig, LiquidCredentials, NetworkConfig
from quoinex.exchanges.liquid.consts import LIQUID_BASE_URL
from quoinex.infrastructure.logging import ClientLoggerInterface
from .liquid_rest_public import LiquidPublicRestInterface
from .liquid_rest_private import LiquidPrivateRestInterface


class LiquidRestClient(LiquidPublicRestInterface, LiquidPrivateRestInterface):
    """
    Full Liquid REST client: market data and order management.

    Safe to share between concurrent tasks; nothing is mutated per call.

    Usage:
        async with create_client(token_id, secret) as client:
            product = await client.get_product(5)
    """
    pass


def create_client(api_token_id: str, api_secret: str,
                  logger: Optional[ClientLoggerInterface] = None,
                  base_url: str = LIQUID_BASE_URL,
                  request_timeout: float = 10.0) -> LiquidRestClient:
    """
    Create a Liquid REST client from plain credentials.

    Raises:
        ClientConstructionError: Empty credential or invalid base_url
    """
    config = LiquidConfig(
        credentials=LiquidCredentials(api_token_id=api_token_id, api_secret=api_secret),
        base_url=base_url,
        network=NetworkConfig(request_timeout=request_timeout),
    )
    return LiquidRestClient(config, logger)

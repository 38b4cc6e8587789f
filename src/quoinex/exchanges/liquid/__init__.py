from .rest import LiquidRestClient, create_client

__all__ = ["LiquidRestClient", "create_client"]

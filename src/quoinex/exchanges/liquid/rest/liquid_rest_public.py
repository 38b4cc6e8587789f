"""
Liquid Public REST API Implementation

Market data endpoints: products, order book, interest rate ladders and
executions. Liquid signs these like every other request.
"""

from typing import List, Optional

from quoinex.exchanges.liquid.structs import Product, PriceLevels, InterestRates, Execution, Executions
from quoinex.infrastructure.networking.http.structs import HTTPMethod
from .liquid_base_rest import LiquidBaseRestInterface


class LiquidPublicRestInterface(LiquidBaseRestInterface):
    """Liquid market data endpoints."""

    async def get_interest_rates(self, currency: str) -> InterestRates:
        """Get the interest rate ladder for a funding currency."""
        return await self.request(HTTPMethod.GET, f"/ir_ladders/{currency}", InterestRates)

    async def get_order_book(self, product_id: int, full: bool = False) -> PriceLevels:
        """
        Get price levels for a product.

        Args:
            product_id: Product id
            full: Request full depth instead of the top 20 levels
        """
        params = {"full": "1"} if full else None
        return await self.request(
            HTTPMethod.GET, f"/products/{product_id}/price_levels", PriceLevels, params=params
        )

    async def get_products(self) -> List[Product]:
        return await self.request(HTTPMethod.GET, "/products", List[Product])

    async def get_product(self, product_id: int) -> Product:
        return await self.request(HTTPMethod.GET, f"/products/{product_id}", Product)

    async def get_executions(self, product_id: int, limit: Optional[int] = None,
                             page: Optional[int] = None) -> Executions:
        """Get recent executions, newest first, paginated."""
        params = {"product_id": product_id, "limit": limit, "page": page}
        return await self.request(HTTPMethod.GET, "/executions", Executions, params=params)

    async def get_executions_by_timestamp(self, product_id: int, limit: int,
                                          timestamp: int) -> List[Execution]:
        """Get executions created after timestamp (epoch seconds), oldest first."""
        params = {"product_id": product_id, "limit": limit, "timestamp": timestamp}
        return await self.request(HTTPMethod.GET, "/executions", List[Execution], params=params)

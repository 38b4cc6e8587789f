"""
Liquid Private REST API Implementation

Order management endpoints. Request bodies are msgspec structs encoded
with the response codec.

A create_order call whose client_order_id was already used raises
OrderAlreadyExistsError, so duplicate submissions can be told apart from
other rejections without inspecting the message.
"""

from typing import List, Optional

from quoinex.exchanges.liquid.structs import (
    Order, Orders, Trade,
    CreateOrderParams, CreateOrderRequest, EditOrderParams, EditOrderRequest
)
from quoinex.infrastructure.networking.http.structs import HTTPMethod
from .liquid_base_rest import LiquidBaseRestInterface


class LiquidPrivateRestInterface(LiquidBaseRestInterface):
    """Liquid order endpoints."""

    async def get_order(self, order_id: int) -> Order:
        return await self.request(HTTPMethod.GET, f"/orders/{order_id}", Order)

    async def get_orders(self, product_id: Optional[int] = None, with_details: Optional[int] = None,
                         funding_currency: Optional[str] = None, status: Optional[str] = None) -> Orders:
        """
        List orders.

        Args:
            product_id: Only orders for this product
            with_details: 1 to include executions
            funding_currency: Only orders funded in this currency
            status: live, filled or cancelled
        """
        params = {
            "product_id": product_id,
            "with_details": with_details,
            "status": status,
            "funding_currency": funding_currency,
        }
        return await self.request(HTTPMethod.GET, "/orders", Orders, params=params)

    async def create_order(self, order_type: str, side: str, quantity: str, price: str,
                           price_range: str, product_id: int,
                           client_order_id: Optional[str] = None) -> Order:
        """
        Place an order.

        Raises:
            OrderAlreadyExistsError: client_order_id was already used
        """
        body = CreateOrderRequest(order=CreateOrderParams(
            order_type=order_type,
            product_id=product_id,
            side=side,
            quantity=quantity,
            price=price,
            price_range=price_range,
            client_order_id=client_order_id or None,
        ))
        order = await self.request(HTTPMethod.POST, "/orders/", Order, data=body)

        self.logger.info("Liquid order placed", order_id=order.id, side=side, product_id=product_id)
        return order

    async def cancel_order(self, order_id: int) -> Order:
        order = await self.request(HTTPMethod.PUT, f"/orders/{order_id}/cancel", Order)

        self.logger.info("Liquid order cancelled", order_id=order_id)
        return order

    async def edit_order(self, order_id: int, quantity: str, price: str) -> Order:
        """Change quantity and price of a live order."""
        body = EditOrderRequest(order=EditOrderParams(quantity=quantity, price=price))
        return await self.request(HTTPMethod.PUT, f"/orders/{order_id}", Order, data=body)

    async def get_order_trades(self, order_id: int) -> List[Trade]:
        return await self.request(HTTPMethod.GET, f"/orders/{order_id}/trades", List[Trade])

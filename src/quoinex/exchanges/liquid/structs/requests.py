"""Request bodies, encoded with the same msgspec codec as responses."""

from typing import Optional

import msgspec


class CreateOrderParams(msgspec.Struct, omit_defaults=True):
    order_type: str
    product_id: int
    side: str
    quantity: str
    price: str
    price_range: str
    client_order_id: Optional[str] = None


class CreateOrderRequest(msgspec.Struct):
    order: CreateOrderParams


class EditOrderParams(msgspec.Struct):
    quantity: str
    price: str


class EditOrderRequest(msgspec.Struct):
    order: EditOrderParams

from typing import List, Optional, Union

import msgspec

# Decimal fields the API sends either as a JSON number or a numeric string
Number = Union[str, float, None]


class OrderExecution(msgspec.Struct, kw_only=True):
    """Fill attached to an order when fetched with details."""
    id: int
    quantity: Optional[str] = None
    price: Optional[str] = None
    taker_side: Optional[str] = None
    my_side: Optional[str] = None
    created_at: Optional[int] = None


class Order(msgspec.Struct, kw_only=True):
    """Liquid order."""
    id: int
    order_type: Optional[str] = None
    quantity: Optional[str] = None
    disc_quantity: Optional[str] = None
    iceberg_total_quantity: Optional[str] = None
    side: Optional[str] = None
    filled_quantity: Optional[str] = None
    price: Number = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    status: Optional[str] = None
    leverage_level: Optional[int] = None
    source_exchange: Optional[str] = None
    product_id: Optional[int] = None
    product_code: Optional[str] = None
    funding_currency: Optional[str] = None
    currency_pair_code: Optional[str] = None
    order_fee: Number = None
    executions: List[OrderExecution] = msgspec.field(default_factory=list)
    client_order_id: Optional[str] = None

    def get_price(self) -> float:
        """Price as float, 0.0 when absent or unparsable."""
        try:
            return float(self.price) if self.price is not None else 0.0
        except ValueError:
            return 0.0


class Orders(msgspec.Struct):
    """Paginated orders response."""
    models: List[Order]
    current_page: int
    total_pages: int


class Trade(msgspec.Struct, kw_only=True):
    """Margin trade opened or closed by an order."""
    id: int
    currency_pair_code: Optional[str] = None
    status: Optional[str] = None
    side: Optional[str] = None
    margin_used: Optional[str] = None
    open_quantity: Optional[str] = None
    close_quantity: Optional[str] = None
    quantity: Optional[str] = None
    leverage_level: Optional[int] = None
    product_code: Optional[str] = None
    product_id: Optional[int] = None
    open_price: Optional[str] = None
    close_price: Optional[str] = None
    trader_id: Optional[int] = None
    open_pnl: Optional[str] = None
    close_pnl: Optional[str] = None
    pnl: Optional[str] = None
    stop_loss: Optional[str] = None
    take_profit: Optional[str] = None
    funding_currency: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    close_fee: Optional[str] = None
    total_interest: Optional[str] = None
    daily_interest: Optional[str] = None

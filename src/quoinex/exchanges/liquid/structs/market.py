from typing import List

import msgspec


class PriceLevels(msgspec.Struct):
    """Order book. Each level is [price, quantity]."""
    buy_price_levels: List[List[str]]
    sell_price_levels: List[List[str]]


class InterestRates(msgspec.Struct):
    """Interest rate ladder. Each entry is [rate, amount]."""
    bids: List[List[str]]
    asks: List[List[str]]


class Execution(msgspec.Struct):
    """Public execution (market trade)."""
    id: int
    quantity: str
    price: str
    taker_side: str
    created_at: int


class Executions(msgspec.Struct):
    """Paginated executions response."""
    models: List[Execution]
    current_page: int
    total_pages: int

from typing import Optional

import msgspec


class Product(msgspec.Struct, kw_only=True):
    """Liquid product (currency pair) as returned by /products."""
    id: int  # sent as a JSON string by the API, converted on decode
    product_type: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None
    market_ask: Optional[str] = None
    market_bid: Optional[str] = None
    indicator: Optional[int] = None
    currency: Optional[str] = None
    currency_pair_code: Optional[str] = None
    symbol: Optional[str] = None
    fiat_minimum_withdraw: Optional[str] = None
    pusher_channel: Optional[str] = None
    taker_fee: Optional[str] = None
    maker_fee: Optional[str] = None
    low_market_bid: Optional[str] = None
    high_market_ask: Optional[str] = None
    volume_24h: Optional[str] = None
    last_price_24h: Optional[str] = None
    last_traded_price: Optional[str] = None
    last_traded_quantity: Optional[str] = None
    quoted_currency: Optional[str] = None
    base_currency: Optional[str] = None
    exchange_rate: Optional[str] = None

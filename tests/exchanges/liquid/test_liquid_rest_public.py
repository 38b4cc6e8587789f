"""
Liquid market data endpoints against a local server.

Each test checks the method, path and query the server saw and the
model the response decodes into.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

import jwt
import pytest

from quoinex import ExchangeApiError, ResponseDecodeError, create_client
from liquid_fixtures import (
    EXECUTIONS_BY_TIMESTAMP_JSON, EXECUTIONS_JSON, EXPECTED_EXECUTIONS, EXPECTED_EXECUTIONS_BY_TIMESTAMP,
    EXPECTED_INTEREST_RATES, EXPECTED_ORDER_BOOK, EXPECTED_PRODUCT, INTEREST_RATES_JSON,
    ORDER_BOOK_JSON, PRODUCT_JSON, PRODUCTS_JSON,
)


class TestProducts:

    @pytest.mark.asyncio
    async def test_get_products(self, client, liquid_server):
        liquid_server.respond("GET", "/products", PRODUCTS_JSON)

        products = await client.get_products()

        assert products == [EXPECTED_PRODUCT]
        assert liquid_server.last_request.method == "GET"
        assert liquid_server.last_request.query_string == ""

    @pytest.mark.asyncio
    async def test_get_product(self, client, liquid_server):
        liquid_server.respond("GET", "/products/1", PRODUCT_JSON)

        product = await client.get_product(1)

        assert product == EXPECTED_PRODUCT
        assert product.id == 5
        assert product.symbol == "¥"

    @pytest.mark.asyncio
    async def test_product_numeric_id(self, client, liquid_server):
        liquid_server.respond("GET", "/products/5", '{"id": 5, "currency_pair_code": "BTCJPY"}')

        product = await client.get_product(5)

        assert product.id == 5
        assert product.market_ask is None

    @pytest.mark.asyncio
    async def test_product_without_id(self, client, liquid_server):
        liquid_server.respond("GET", "/products/5", '{"code": "CASH"}')

        with pytest.raises(ResponseDecodeError):
            await client.get_product(5)

    @pytest.mark.asyncio
    async def test_unknown_product(self, client, liquid_server):
        with pytest.raises(ExchangeApiError) as exc_info:
            await client.get_product(999)

        assert exc_info.value.status_code == 404
        assert liquid_server.last_request.path == "/products/999"

    @pytest.mark.asyncio
    async def test_signed_path_matches_request(self, client, liquid_server):
        liquid_server.respond("GET", "/products/1", PRODUCT_JSON)

        await client.get_product(1)

        token = liquid_server.last_request.headers["X-Quoine-Auth"]
        claims = jwt.decode(token, "secret", algorithms=["HS256"])
        assert claims["path"] == "/products/1"
        assert claims["token_id"] == "apiTokenID"


class TestOrderBook:

    @pytest.mark.asyncio
    async def test_full_order_book(self, client, liquid_server):
        liquid_server.respond("GET", "/products/1/price_levels", ORDER_BOOK_JSON)

        order_book = await client.get_order_book(1, full=True)

        assert order_book == EXPECTED_ORDER_BOOK
        assert liquid_server.last_request.raw_path == "/products/1/price_levels?full=1"

    @pytest.mark.asyncio
    async def test_top_of_book(self, client, liquid_server):
        liquid_server.respond("GET", "/products/1/price_levels", ORDER_BOOK_JSON)

        await client.get_order_book(1)

        assert liquid_server.last_request.raw_path == "/products/1/price_levels"


class TestInterestRates:

    @pytest.mark.asyncio
    async def test_get_interest_rates(self, client, liquid_server):
        liquid_server.respond("GET", "/ir_ladders/USD", INTEREST_RATES_JSON)

        rates = await client.get_interest_rates("USD")

        assert rates == EXPECTED_INTEREST_RATES
        assert rates.asks == []


class TestExecutions:

    @pytest.mark.asyncio
    async def test_get_executions(self, client, liquid_server):
        liquid_server.respond("GET", "/executions", EXECUTIONS_JSON)

        executions = await client.get_executions(1, limit=20, page=2)

        assert executions == EXPECTED_EXECUTIONS
        assert liquid_server.last_request.query_string == "limit=20&page=2&product_id=1"

    @pytest.mark.asyncio
    async def test_get_executions_without_paging(self, client, liquid_server):
        liquid_server.respond("GET", "/executions", EXECUTIONS_JSON)

        await client.get_executions(1)

        assert liquid_server.last_request.query_string == "product_id=1"

    @pytest.mark.asyncio
    async def test_get_executions_by_timestamp(self, client, liquid_server):
        liquid_server.respond("GET", "/executions", EXECUTIONS_BY_TIMESTAMP_JSON)

        executions = await client.get_executions_by_timestamp(1, 2, 1456705487)

        assert executions == EXPECTED_EXECUTIONS_BY_TIMESTAMP
        assert liquid_server.last_request.query_string == "limit=2&product_id=1&timestamp=1456705487"


class TestBasePath:

    @pytest.mark.asyncio
    async def test_requests_under_base_path(self, liquid_server):
        liquid_server.respond("GET", "/api/products/1", PRODUCT_JSON)

        async with create_client("apiTokenID", "secret", base_url=f"{liquid_server.base_url}/api") as client:
            product = await client.get_product(1)

        assert product.id == 5
        claims = jwt.decode(liquid_server.last_request.headers["X-Quoine-Auth"], "secret", algorithms=["HS256"])
        assert claims["path"] == "/products/1"

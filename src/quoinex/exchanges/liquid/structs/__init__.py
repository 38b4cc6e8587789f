from .products import Product
from .market import PriceLevels, InterestRates, Execution, Executions
from .orders import Order, Orders, OrderExecution, Trade
from .requests import CreateOrderParams, CreateOrderRequest, EditOrderParams, EditOrderRequest

__all__ = [
    "Product",
    "PriceLevels",
    "InterestRates",
    "Execution",
    "Executions",
    "Order",
    "Orders",
    "OrderExecution",
    "Trade",
    "CreateOrderParams",
    "CreateOrderRequest",
    "EditOrderParams",
    "EditOrderRequest",
]

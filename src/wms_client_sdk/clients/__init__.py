from .items_client import ItemsClient
from .orders_client import OrdersClient

__all__ = [
    "ItemsClient",
    "OrdersClient",
]

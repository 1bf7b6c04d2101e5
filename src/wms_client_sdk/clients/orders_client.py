from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..models import Order, OrderStatus
from .base import BaseClient, path_segment


@dataclass
class OrdersClient(BaseClient):
    def list_orders(self) -> list[Order]:
        payload = self._request("GET", "/order", module="orders", operation="list_orders")
        if not isinstance(payload, list):
            raise ValueError("Expected order list response to be a JSON array")
        return [Order.model_validate(row) for row in payload]

    def update_status(self, customer_id: str, order_id: str, status: OrderStatus | str) -> dict[str, Any]:
        body = {"status": OrderStatus.parse(status).value}
        return self._patch_order(customer_id, order_id, body, operation="update_status")

    def update_tracking(
        self,
        customer_id: str,
        order_id: str,
        *,
        carrier: str | None,
        tracking_number: str | None,
    ) -> dict[str, Any]:
        body = {"carrier": carrier, "tracking_number": tracking_number}
        return self._patch_order(customer_id, order_id, body, operation="update_tracking")

    def _patch_order(self, customer_id: str, order_id: str, body: dict[str, Any], *, operation: str) -> dict[str, Any]:
        """Returns the acknowledgement body; the backend may echo all, some or none of the order."""
        data = self._request(
            "PATCH",
            f"/order/{path_segment(customer_id)}/{path_segment(order_id)}",
            json_body=body,
            module="orders",
            operation=operation,
        )
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Expected order update response to be a JSON object")
        return data

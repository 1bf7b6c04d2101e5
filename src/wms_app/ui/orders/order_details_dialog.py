from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wms_app.ui.shared.formatting import format_datetime, format_money
from wms_client_sdk.models import Order

from .status_badge import status_badge


@dataclass
class OrderDetailsDialog:
    """Order detail modal; carrier and tracking are the only editable fields."""

    order: Order
    carrier: str = ""
    tracking_number: str = ""

    def __post_init__(self) -> None:
        self.carrier = self.order.carrier or ""
        self.tracking_number = self.order.tracking_number or ""

    def set_carrier(self, value: str) -> None:
        self.carrier = value

    def set_tracking_number(self, value: str) -> None:
        self.tracking_number = value

    def render(self) -> dict[str, Any]:
        order = self.order
        return {
            "order_id": order.order_id,
            "customer_id": order.customer_id,
            "customer": order.customer,
            "customer_phone": order.customer_phone,
            "customer_email": order.customer_email,
            "address": order.address,
            "placed_at": format_datetime(order.timestamp),
            "status": status_badge(order.status).render(),
            "shipping_method": order.shipping_method,
            "carrier": self.carrier,
            "tracking_number": self.tracking_number,
            "subtotal": format_money(order.subtotal),
            "lines": [
                {
                    "label": f"{line.item_desc} ({line.item_type})",
                    "sku": line.sku,
                    "qty": line.qty,
                    "line_total": format_money(line.price * line.qty),
                }
                for line in order.item_list
            ],
        }

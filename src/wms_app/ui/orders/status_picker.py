from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wms_client_sdk.models import ORDER_STATUSES, Order, OrderStatus

from .status_badge import status_badge


@dataclass
class StatusPicker:
    order: Order

    def choices(self) -> list[OrderStatus]:
        return list(ORDER_STATUSES)

    def render(self) -> dict[str, Any]:
        return {
            "order_id": self.order.order_id,
            "current": status_badge(self.order.status).label,
            "choices": [
                {**status_badge(status).render(), "selected": status == self.order.status}
                for status in self.choices()
            ],
        }

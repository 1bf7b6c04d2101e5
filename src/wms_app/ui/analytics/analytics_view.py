from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Sequence

from wms_app.services.analytics_service import ANALYTICS_WINDOWS, AnalyticsSnapshot, compute_analytics
from wms_app.ui.shared.formatting import format_money
from wms_client_sdk.models import Item, Order


@dataclass
class AnalyticsView:
    """Read-only; works from the lists the other tabs already fetched."""

    orders: Callable[[], Sequence[Order]]
    items: Callable[[], Sequence[Item]]
    days: Callable[[], int]

    def snapshot(self, *, now: datetime | None = None) -> AnalyticsSnapshot:
        return compute_analytics(self.orders(), self.items(), self.days(), now=now)

    def render(self, *, now: datetime | None = None) -> dict[str, Any]:
        snapshot = self.snapshot(now=now)
        peak = max((product.qty for product in snapshot.top_products), default=0)
        return {
            **snapshot.render(),
            "windows": list(ANALYTICS_WINDOWS),
            "display": {
                "total_revenue": format_money(snapshot.total_revenue),
                "avg_order_value": format_money(snapshot.avg_order_value),
                "total_inventory_value": format_money(snapshot.total_inventory_value),
            },
            "top_product_bars": [
                {"rank": rank, "name": product.name, "percent": round(product.qty / peak * 100, 1) if peak else 0.0}
                for rank, product in enumerate(snapshot.top_products, start=1)
            ],
        }

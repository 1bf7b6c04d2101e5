"""Sales analytics derived from the order and item lists already in memory.

Nothing here talks to the network. Revenue figures stay ``Decimal``; rates
are floats because they are only ever displayed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Sequence

from wms_client_sdk.models import FULFILLED_STATUSES, Item, Order, as_local
from wms_client_sdk.stock_status import count_low_stock, count_out_of_stock

ANALYTICS_WINDOWS: tuple[int, ...] = (7, 14, 30, 90)
DEFAULT_WINDOW = 7
TOP_PRODUCTS_LIMIT = 5
ZERO = Decimal("0")


@dataclass(frozen=True)
class TopProduct:
    name: str
    qty: int


@dataclass(frozen=True)
class DailyRevenue:
    day: date
    label: str
    revenue: Decimal


@dataclass(frozen=True)
class AnalyticsSnapshot:
    days: int
    order_count: int
    total_revenue: Decimal
    avg_order_value: Decimal
    orders_per_day: float
    fulfillment_rate: float
    top_products: list[TopProduct] = field(default_factory=list)
    total_inventory_value: Decimal = ZERO
    low_stock_items: int = 0
    out_of_stock_items: int = 0
    daily_revenue: list[DailyRevenue] = field(default_factory=list)

    def render(self) -> dict[str, Any]:
        return {
            "days": self.days,
            "order_count": self.order_count,
            "total_revenue": str(self.total_revenue),
            "avg_order_value": str(self.avg_order_value.quantize(Decimal("0.01"))),
            "orders_per_day": round(self.orders_per_day, 1),
            "fulfillment_rate": round(self.fulfillment_rate, 1),
            "top_products": [{"name": product.name, "qty": product.qty} for product in self.top_products],
            "total_inventory_value": str(self.total_inventory_value),
            "low_stock_items": self.low_stock_items,
            "out_of_stock_items": self.out_of_stock_items,
            "daily_revenue": [
                {"date": entry.day.isoformat(), "label": entry.label, "revenue": str(entry.revenue)}
                for entry in self.daily_revenue
            ],
        }


def validate_window(days: int | str) -> int:
    try:
        value = int(days)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"analytics window must be one of {ANALYTICS_WINDOWS}, got {days!r}") from exc
    if value not in ANALYTICS_WINDOWS:
        raise ValueError(f"analytics window must be one of {ANALYTICS_WINDOWS}, got {days!r}")
    return value


def day_label(day: date) -> str:
    return f"{day:%b} {day.day}"


def compute_analytics(
    orders: Sequence[Order],
    items: Sequence[Item],
    days: int,
    *,
    now: datetime | None = None,
) -> AnalyticsSnapshot:
    days = validate_window(days)
    current = as_local(now) if now else datetime.now()
    cutoff = current - timedelta(days=days)

    recent = [order for order in orders if as_local(order.timestamp) >= cutoff]
    count = len(recent)
    total_revenue = sum((order.subtotal for order in recent), ZERO)
    avg_order_value = total_revenue / count if count else ZERO
    fulfilled = sum(1 for order in recent if order.status in FULFILLED_STATUSES)
    fulfillment_rate = fulfilled / count * 100 if count else 0.0

    product_sales: dict[str, int] = {}
    for order in recent:
        for line in order.item_list:
            key = f"{line.item_desc} ({line.item_type})"
            product_sales[key] = product_sales.get(key, 0) + line.qty
    ranked = sorted(product_sales.items(), key=lambda entry: entry[1], reverse=True)
    top_products = [TopProduct(name=name, qty=qty) for name, qty in ranked[:TOP_PRODUCTS_LIMIT]]

    today = current.date()
    daily_revenue = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        revenue = sum((order.subtotal for order in recent if as_local(order.timestamp).date() == day), ZERO)
        daily_revenue.append(DailyRevenue(day=day, label=day_label(day), revenue=revenue))

    return AnalyticsSnapshot(
        days=days,
        order_count=count,
        total_revenue=total_revenue,
        avg_order_value=avg_order_value,
        orders_per_day=count / days,
        fulfillment_rate=fulfillment_rate,
        top_products=top_products,
        total_inventory_value=sum((item.price * item.qty for item in items), ZERO),
        low_stock_items=count_low_stock(items),
        out_of_stock_items=count_out_of_stock(items),
        daily_revenue=daily_revenue,
    )

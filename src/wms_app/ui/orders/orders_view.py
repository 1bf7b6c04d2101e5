from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Sequence

from wms_app.services.analytics_service import DEFAULT_WINDOW, AnalyticsSnapshot, compute_analytics, validate_window
from wms_app.services.orders_service import OrdersService, OrdersServiceError
from wms_app.telemetry.events import api_call_failed
from wms_app.telemetry.logger import TelemetryLogger
from wms_app.ui.orders.status_badge import status_badge
from wms_app.ui.shared.formatting import format_datetime, format_money
from wms_app.ui.shared.optimistic import OptimisticList, OptimisticOutcome
from wms_app.ui.shared.view_state import resolve_state
from wms_app.ui.widgets.error_banner import ErrorBanner
from wms_client_sdk.models import FULFILLED_STATUSES, Item, Order, OrderStatus

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch orders."
STATUS_FAILED = "Failed to update order status. Reverting changes."
TRACKING_FAILED = "Failed to update tracking details. Reverting changes."


@dataclass
class OrdersView:
    service: OrdersService
    telemetry: TelemetryLogger = field(default_factory=lambda: TelemetryLogger(app_name="wms_app", enabled=False))
    orders: OptimisticList[Order] = field(default_factory=OptimisticList)
    banner: ErrorBanner = field(default_factory=ErrorBanner)
    analytics_days: int = DEFAULT_WINDOW
    is_loading: bool = False

    def load(self) -> bool:
        self.is_loading = True
        self.banner.clear()
        try:
            self.orders.replace_all(self.service.list_orders())
            return True
        except OrdersServiceError as exc:
            logger.warning("orders_load_failed", extra={"trace_id": exc.trace_id, "status_code": exc.status_code})
            self.banner.show(FETCH_FAILED)
            self._emit_failure("orders.load", "read_failed", exc.trace_id)
            return False
        finally:
            self.is_loading = False

    def find(self, order_id: str) -> Order | None:
        return next((order for order in self.orders.rows if order.order_id == order_id), None)

    def summary(self) -> dict[str, Any]:
        rows = self.orders.rows
        return {
            "total_orders": len(rows),
            "pending": sum(1 for order in rows if order.status == OrderStatus.PENDING),
            "shipped": sum(1 for order in rows if order.status in FULFILLED_STATUSES),
            "total_value": sum((order.subtotal for order in rows), Decimal("0.00")),
        }

    def change_status(
        self,
        order_id: str,
        new_status: OrderStatus | str,
        on_applied: Callable[[], None] | None = None,
    ) -> OptimisticOutcome | None:
        order = self.find(order_id)
        if order is None:
            logger.info("status_change_ignored", extra={"order_id": order_id})
            return None
        status = OrderStatus.parse(new_status)
        self.banner.clear()
        outcome = self.orders.replace_where(
            lambda row: row.order_id == order_id,
            order.model_copy(update={"status": status}),
            lambda: self.service.update_status(order, status),
            on_applied=on_applied,
            label="orders.change_status",
        )
        if not outcome.ok:
            self.banner.show(STATUS_FAILED)
            self._emit_failure("orders.change_status", "update_failed", getattr(outcome.error, "trace_id", None))
        return outcome

    def update_tracking(
        self,
        order: Order,
        carrier: str | None,
        tracking_number: str | None,
        on_applied: Callable[[], None] | None = None,
    ) -> OptimisticOutcome:
        self.banner.clear()
        outcome = self.orders.replace_where(
            lambda row: row.order_id == order.order_id,
            order.model_copy(update={"carrier": carrier, "tracking_number": tracking_number}),
            lambda: self.service.update_tracking(order, carrier=carrier, tracking_number=tracking_number),
            on_applied=on_applied,
            label="orders.update_tracking",
        )
        if not outcome.ok:
            self.banner.show(TRACKING_FAILED)
            self._emit_failure("orders.update_tracking", "update_failed", getattr(outcome.error, "trace_id", None))
        return outcome

    def set_analytics_window(self, days: int | str) -> int:
        self.analytics_days = validate_window(days)
        return self.analytics_days

    def analytics(self, items: Sequence[Item], *, now: datetime | None = None) -> AnalyticsSnapshot:
        return compute_analytics(self.orders.rows, items, self.analytics_days, now=now)

    def _emit_failure(self, action: str, error_code: str, trace_id: str | None) -> None:
        self.telemetry.emit(api_call_failed("orders", action, error_code, trace_id))

    @staticmethod
    def _row(order: Order) -> dict[str, Any]:
        return {
            "order_id": order.order_id,
            "customer": order.customer,
            "placed_at": format_datetime(order.timestamp),
            "line_count": len(order.item_list),
            "subtotal": format_money(order.subtotal),
            "status": status_badge(order.status).render(),
            "carrier": order.carrier,
            "tracking_number": order.tracking_number,
        }

    def render(self) -> dict[str, Any]:
        rows = self.orders.rows
        summary = self.summary()
        state = resolve_state(is_loading=self.is_loading, error=self.banner.message, has_data=bool(rows))
        return {
            "loading": self.is_loading,
            "banner": self.banner.render(),
            "summary": {**summary, "total_value": format_money(summary["total_value"])},
            "rows": [self._row(order) for order in rows],
            "count": len(rows),
            "view_state": state.render(),
        }

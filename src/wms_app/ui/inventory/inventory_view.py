from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from wms_app.services.inventory_service import InventoryService, InventoryServiceError
from wms_app.telemetry.events import api_call_failed
from wms_app.telemetry.logger import TelemetryLogger
from wms_app.ui.inventory.inventory_query import InventoryQuery, distinct_bins, distinct_item_types, filter_inventory
from wms_app.ui.shared.formatting import format_datetime
from wms_app.ui.shared.optimistic import OptimisticList, OptimisticOutcome
from wms_app.ui.shared.view_state import resolve_state
from wms_app.ui.widgets.error_banner import ErrorBanner
from wms_client_sdk.models import Item, ItemUpdate
from wms_client_sdk.stock_status import count_low_stock, count_out_of_stock, stock_level

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch inventory."
UPDATE_FAILED = "Failed to update item. Reverting changes."


@dataclass
class InventoryView:
    service: InventoryService
    telemetry: TelemetryLogger = field(default_factory=lambda: TelemetryLogger(app_name="wms_app", enabled=False))
    items: OptimisticList[Item] = field(default_factory=OptimisticList)
    query: InventoryQuery = field(default_factory=InventoryQuery)
    banner: ErrorBanner = field(default_factory=ErrorBanner)
    is_loading: bool = False

    def load(self) -> bool:
        self.is_loading = True
        self.banner.clear()
        try:
            self.items.replace_all(self.service.list_items())
            return True
        except InventoryServiceError as exc:
            # last-known-good rows stay on screen
            logger.warning("inventory_load_failed", extra={"trace_id": exc.trace_id, "status_code": exc.status_code})
            self.banner.show(FETCH_FAILED)
            self._emit_failure("inventory.load", "read_failed", exc.trace_id)
            return False
        finally:
            self.is_loading = False

    def visible_items(self) -> list[Item]:
        return filter_inventory(self.items.rows, self.query)

    def item_types(self) -> list[str]:
        return distinct_item_types(self.items.rows)

    def bins(self) -> list[str]:
        return distinct_bins(self.items.rows)

    def find(self, sku: str) -> Item | None:
        return next((item for item in self.items.rows if item.sku == sku), None)

    def summary(self) -> dict[str, int]:
        rows = self.items.rows
        return {
            "total_units": sum(item.qty for item in rows),
            "unique_skus": len(rows),
            "low_stock": count_low_stock(rows),
            "out_of_stock": count_out_of_stock(rows),
        }

    def save_item(self, edited: Item, on_applied: Callable[[], None] | None = None) -> OptimisticOutcome:
        self.banner.clear()
        outcome = self.items.replace_where(
            lambda row: row.sku == edited.sku,
            edited,
            lambda: self.service.update_item(edited.sku, ItemUpdate.from_item(edited)),
            on_applied=on_applied,
            label="inventory.save_item",
        )
        if not outcome.ok:
            self.banner.show(UPDATE_FAILED)
            self._emit_failure("inventory.save_item", "update_failed", getattr(outcome.error, "trace_id", None))
        return outcome

    def _emit_failure(self, action: str, error_code: str, trace_id: str | None) -> None:
        self.telemetry.emit(api_call_failed("inventory", action, error_code, trace_id))

    @staticmethod
    def _row(item: Item) -> dict[str, Any]:
        level = stock_level(item.qty)
        return {
            "sku": item.sku,
            "item_desc": item.item_desc,
            "item_type": item.item_type,
            "bin": item.bin,
            "dsu": item.dsu,
            "qty": item.qty,
            "price": str(item.price),
            "last_updated": format_datetime(item.last_updated),
            "stock_status": level.status,
            "stock_tone": level.tone,
        }

    def render(self) -> dict[str, Any]:
        visible = self.visible_items()
        state = resolve_state(is_loading=self.is_loading, error=self.banner.message, has_data=bool(self.items.rows))
        return {
            "loading": self.is_loading,
            "banner": self.banner.render(),
            "query": self.query.render(),
            "filters": {"item_types": self.item_types(), "bins": self.bins()},
            "summary": self.summary(),
            "rows": [self._row(item) for item in visible],
            "count": len(visible),
            "view_state": state.render(),
        }

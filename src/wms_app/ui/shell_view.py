from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from wms_app.app.navigation import DEFAULT_TAB, TAB_SPECS, Tab, tab_spec
from wms_app.config import AppConfig
from wms_app.services.inventory_service import InventoryService
from wms_app.services.orders_service import OrdersService
from wms_app.telemetry.events import screen_view
from wms_app.telemetry.logger import TelemetryLogger
from wms_app.ui.analytics.analytics_view import AnalyticsView
from wms_app.ui.inventory.edit_item_dialog import EditItemDialog
from wms_app.ui.inventory.inventory_view import InventoryView
from wms_app.ui.orders.order_details_dialog import OrderDetailsDialog
from wms_app.ui.orders.orders_view import OrdersView
from wms_app.ui.orders.packing_slip import PackingSlip
from wms_app.ui.orders.status_picker import StatusPicker
from wms_app.ui.shared.optimistic import OptimisticOutcome
from wms_app.ui.shared.view_state import resolve_state
from wms_app.ui.widgets.error_banner import ErrorBanner
from wms_client_sdk.models import OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class WmsShell:
    """Tabbed shell; holds at most the one record each modal targets."""

    inventory: InventoryView
    orders: OrdersView
    app_config: AppConfig = field(default_factory=AppConfig)
    telemetry: TelemetryLogger = field(default_factory=lambda: TelemetryLogger(app_name="wms_app", enabled=False))
    on_logout: Callable[[], object] | None = None
    banner: ErrorBanner = field(default_factory=ErrorBanner)
    active_tab: Tab = DEFAULT_TAB
    edit_dialog: EditItemDialog | None = None
    details_dialog: OrderDetailsDialog | None = None
    status_picker: StatusPicker | None = None
    analytics: AnalyticsView = field(init=False)

    def __post_init__(self) -> None:
        # one banner for the whole shell, whichever tab raised it
        self.inventory.banner = self.banner
        self.orders.banner = self.banner
        self.analytics = AnalyticsView(
            orders=lambda: self.orders.orders.rows,
            items=lambda: self.inventory.items.rows,
            days=lambda: self.orders.analytics_days,
        )

    @classmethod
    def create(
        cls,
        inventory_service: InventoryService,
        orders_service: OrdersService,
        *,
        app_config: AppConfig | None = None,
        telemetry: TelemetryLogger | None = None,
        on_logout: Callable[[], object] | None = None,
    ) -> "WmsShell":
        telemetry = telemetry or TelemetryLogger(app_name="wms_app", enabled=False)
        return cls(
            inventory=InventoryView(service=inventory_service, telemetry=telemetry),
            orders=OrdersView(service=orders_service, telemetry=telemetry),
            app_config=app_config or AppConfig(),
            telemetry=telemetry,
            on_logout=on_logout,
        )

    def mount(self) -> None:
        self.activate(DEFAULT_TAB)

    def activate(self, tab: Tab | str) -> bool:
        spec = tab_spec(tab)
        self.active_tab = spec.tab
        logger.info("tab_activated", extra={"tab": spec.tab.value})
        self.telemetry.emit(screen_view(spec.tab.value))
        if spec.tab == Tab.INVENTORY:
            return self.inventory.load()
        if spec.tab == Tab.ORDERS:
            return self.orders.load()
        return True

    @property
    def is_loading(self) -> bool:
        return self.inventory.is_loading or self.orders.is_loading

    # inventory modal

    def open_edit_item(self, sku: str) -> EditItemDialog | None:
        item = self.inventory.find(sku)
        self.edit_dialog = EditItemDialog(item=item) if item else None
        return self.edit_dialog

    def close_edit_item(self) -> None:
        self.edit_dialog = None

    def save_item(self) -> OptimisticOutcome | None:
        if self.edit_dialog is None:
            return None
        edited = self.edit_dialog.to_item()
        return self.inventory.save_item(edited, on_applied=self.close_edit_item)

    # order modals

    def open_order_details(self, order_id: str) -> OrderDetailsDialog | None:
        order = self.orders.find(order_id)
        self.details_dialog = OrderDetailsDialog(order=order) if order else None
        return self.details_dialog

    def close_order_details(self) -> None:
        self.details_dialog = None

    def save_tracking(self) -> OptimisticOutcome | None:
        dialog = self.details_dialog
        if dialog is None:
            return None
        return self.orders.update_tracking(
            dialog.order,
            dialog.carrier,
            dialog.tracking_number,
            on_applied=self.close_order_details,
        )

    def open_status_picker(self, order_id: str) -> StatusPicker | None:
        order = self.orders.find(order_id)
        self.status_picker = StatusPicker(order=order) if order else None
        return self.status_picker

    def close_status_picker(self) -> None:
        self.status_picker = None

    def change_status(self, new_status: OrderStatus | str) -> OptimisticOutcome | None:
        if self.status_picker is None:
            return None
        return self.orders.change_status(
            self.status_picker.order.order_id,
            new_status,
            on_applied=self.close_status_picker,
        )

    def set_analytics_window(self, days: int | str) -> int:
        return self.orders.set_analytics_window(days)

    def packing_slip(self) -> PackingSlip | None:
        if self.details_dialog is None:
            return None
        return PackingSlip(
            order=self.details_dialog.order,
            company_name=self.app_config.company_name,
            company_address=self.app_config.company_address,
        )

    def print_slip(self, directory: Path | None = None) -> Path | None:
        slip = self.packing_slip()
        if slip is None:
            return None
        return slip.open_print_view(directory)

    def logout(self) -> object:
        if self.on_logout is None:
            return None
        return self.on_logout()

    def _active_payload(self) -> dict[str, Any]:
        if self.active_tab == Tab.INVENTORY:
            return self.inventory.render()
        if self.active_tab == Tab.ORDERS:
            return self.orders.render()
        return self.analytics.render()

    def _has_data(self) -> bool:
        if self.active_tab == Tab.INVENTORY:
            return bool(self.inventory.items.rows)
        if self.active_tab == Tab.ORDERS:
            return bool(self.orders.orders.rows)
        return bool(self.inventory.items.rows or self.orders.orders.rows)

    def render(self) -> dict[str, Any]:
        state = resolve_state(is_loading=self.is_loading, error=self.banner.message, has_data=self._has_data())
        return {
            "tabs": [{"key": spec.tab.value, "label": spec.label} for spec in TAB_SPECS],
            "active_tab": self.active_tab.value,
            "loading": self.is_loading,
            "banner": self.banner.render(),
            "modals": {
                "edit_item": self.edit_dialog.render() if self.edit_dialog else None,
                "order_details": self.details_dialog.render() if self.details_dialog else None,
                "status_picker": self.status_picker.render() if self.status_picker else None,
            },
            "view": self._active_payload(),
            "view_state": state.render(),
        }

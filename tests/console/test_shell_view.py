from __future__ import annotations

from decimal import Decimal

import pytest

from wms_app.config import AppConfig
from wms_app.services.inventory_service import InventoryService
from wms_app.services.orders_service import OrdersService
from wms_app.ui.inventory.inventory_view import UPDATE_FAILED
from wms_app.ui.orders.orders_view import STATUS_FAILED
from wms_app.ui.shell_view import WmsShell
from wms_client_sdk.models import OrderStatus
from wms_fakes import make_item, make_order, server_error


def _shell(fake_session, **kwargs) -> WmsShell:
    return WmsShell.create(InventoryService(fake_session), OrdersService(fake_session), **kwargs)


def test_mount_activates_inventory(fake_session) -> None:
    fake_session.items.items = [make_item("A")]
    shell = _shell(fake_session)

    shell.mount()

    payload = shell.render()
    assert payload["active_tab"] == "inventory"
    assert [tab["key"] for tab in payload["tabs"]] == ["inventory", "orders", "analytics"]
    assert payload["view"]["count"] == 1
    assert payload["view_state"]["status"] == "success"


def test_tab_activation_refetches_except_analytics(fake_session) -> None:
    fake_session.orders.orders = [make_order("ORD-1")]
    shell = _shell(fake_session)
    shell.activate("orders")
    fake_session.orders.orders = [make_order("ORD-1"), make_order("ORD-2")]

    shell.activate("analytics")
    assert len(shell.orders.orders.rows) == 1

    shell.activate("orders")
    assert len(shell.orders.orders.rows) == 2


def test_edit_modal_closes_before_the_call(fake_session) -> None:
    fake_session.items.items = [make_item("A", qty=3)]
    fake_session.items.update_error = server_error()
    shell = _shell(fake_session)
    shell.mount()

    dialog = shell.open_edit_item("A")
    dialog.adjust_qty(6)
    outcome = shell.save_item()

    assert outcome is not None and outcome.rolled_back
    assert shell.edit_dialog is None
    assert shell.inventory.find("A").qty == 3
    assert shell.render()["banner"] == {"visible": True, "message": UPDATE_FAILED}


def test_open_edit_for_unknown_sku(fake_session) -> None:
    shell = _shell(fake_session)
    assert shell.open_edit_item("missing") is None
    assert shell.save_item() is None


def test_status_picker_flow(fake_session) -> None:
    fake_session.orders.orders = [make_order("ORD-1")]
    fake_session.orders.update_error = server_error()
    shell = _shell(fake_session)
    shell.activate("orders")

    shell.open_status_picker("ORD-1")
    shell.change_status("Delivered")

    assert shell.status_picker is None
    assert shell.orders.find("ORD-1").status == OrderStatus.PENDING
    assert shell.banner.message == STATUS_FAILED


def test_details_modal_prefills_and_saves_tracking(fake_session) -> None:
    fake_session.orders.orders = [make_order("ORD-1", carrier=None, tracking_number=None)]
    shell = _shell(fake_session)
    shell.activate("orders")

    dialog = shell.open_order_details("ORD-1")
    assert (dialog.carrier, dialog.tracking_number) == ("", "")
    dialog.set_carrier("DHL")
    dialog.set_tracking_number("JD014")
    outcome = shell.save_tracking()

    assert outcome is not None and outcome.ok
    assert shell.details_dialog is None
    assert shell.orders.find("ORD-1").tracking_number == "JD014"


def test_print_slip_uses_configured_company(fake_session, tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("webbrowser.open", lambda url: True)
    fake_session.orders.orders = [make_order("ORD-7")]
    shell = _shell(fake_session, app_config=AppConfig(company_name="Acme Depot"))
    shell.activate("orders")

    assert shell.print_slip(tmp_path) is None
    shell.open_order_details("ORD-7")
    path = shell.print_slip(tmp_path)

    assert path is not None
    assert "Acme Depot" in path.read_text(encoding="utf-8")


def test_analytics_tab_renders_from_held_lists(fake_session) -> None:
    fake_session.items.items = [make_item("A", qty=4, price=Decimal("2.50"))]
    shell = _shell(fake_session)
    shell.mount()
    shell.set_analytics_window(30)

    shell.activate("analytics")
    view = shell.render()["view"]

    assert view["days"] == 30
    assert view["total_inventory_value"] == "10.00"
    assert view["windows"] == [7, 14, 30, 90]
    with pytest.raises(ValueError):
        shell.set_analytics_window(45)


def test_unknown_tab_is_rejected(fake_session) -> None:
    with pytest.raises(ValueError):
        _shell(fake_session).activate("reports")

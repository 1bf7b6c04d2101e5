from __future__ import annotations

import pytest

from wms_app.ui.orders.status_badge import status_badge
from wms_app.ui.orders.status_picker import StatusPicker
from wms_client_sdk.models import OrderStatus
from wms_fakes import make_order


@pytest.mark.parametrize(
    ("status", "color", "icon"),
    [
        ("Shipped", "green", "truck"),
        ("delivered", "green", "check_circle"),
        (OrderStatus.PENDING, "yellow", "clock"),
        ("CANCELLED", "red", "x"),
        ("Processing", "blue", "package"),
        ("Returned", "gray", "clock"),
        (None, "gray", "clock"),
    ],
)
def test_status_badge(status, color: str, icon: str) -> None:
    badge = status_badge(status)
    assert (badge.color, badge.icon) == (color, icon)


def test_picker_marks_current_status() -> None:
    payload = StatusPicker(order=make_order("ORD-1", status=OrderStatus.SHIPPED)).render()
    selected = [choice["label"] for choice in payload["choices"] if choice["selected"]]
    assert selected == ["Shipped"]
    assert len(payload["choices"]) == 5


def test_picker_for_unrecognized_status_selects_nothing() -> None:
    payload = StatusPicker(order=make_order("ORD-1", status="On Hold")).render()
    assert payload["current"] == "On Hold"
    assert not any(choice["selected"] for choice in payload["choices"])

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wms_client_sdk.models import OrderStatus


@dataclass(frozen=True)
class StatusBadge:
    label: str
    color: str
    icon: str

    def render(self) -> dict[str, Any]:
        return {"label": self.label, "color": self.color, "icon": self.icon}


_BADGES: dict[str, tuple[str, str]] = {
    "shipped": ("green", "truck"),
    "delivered": ("green", "check_circle"),
    "pending": ("yellow", "clock"),
    "cancelled": ("red", "x"),
    "processing": ("blue", "package"),
}
_FALLBACK = ("gray", "clock")


def status_badge(status: OrderStatus | str | None) -> StatusBadge:
    label = status.value if isinstance(status, OrderStatus) else str(status or "")
    color, icon = _BADGES.get(label.lower(), _FALLBACK)
    return StatusBadge(label=label, color=color, icon=icon)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tab(str, Enum):
    INVENTORY = "inventory"
    ORDERS = "orders"
    ANALYTICS = "analytics"


@dataclass(frozen=True)
class TabSpec:
    tab: Tab
    label: str
    refetches: bool


TAB_SPECS: tuple[TabSpec, ...] = (
    TabSpec(Tab.INVENTORY, "Inventory", True),
    TabSpec(Tab.ORDERS, "Orders", True),
    TabSpec(Tab.ANALYTICS, "Analytics", False),
)
DEFAULT_TAB = Tab.INVENTORY


def tab_spec(tab: Tab | str) -> TabSpec:
    key = Tab(tab)
    return next(spec for spec in TAB_SPECS if spec.tab == key)

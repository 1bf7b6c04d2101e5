from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from functools import cmp_to_key
from typing import Any, Iterable, Sequence

from wms_client_sdk.models import Item, as_local
from wms_client_sdk.stock_status import STOCK_FILTERS, STOCK_LOW, STOCK_OUT, is_low_stock, is_out_of_stock

ALL = "all"
ASCENDING = "ascending"
DESCENDING = "descending"
SORTABLE_FIELDS: tuple[str, ...] = ("sku", "item_desc", "item_type", "bin", "dsu", "qty", "price", "last_updated")


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: str = ASCENDING

    def __post_init__(self) -> None:
        if self.key not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort inventory by {self.key!r}")
        if self.direction not in {ASCENDING, DESCENDING}:
            raise ValueError(f"Unknown sort direction {self.direction!r}")


@dataclass
class InventoryQuery:
    search_term: str = ""
    item_type: str = ALL
    bin: str = ALL
    stock_filters: set[str] = field(default_factory=set)
    sort: SortConfig | None = None

    def toggle_stock_filter(self, name: str) -> None:
        if name not in STOCK_FILTERS:
            raise ValueError(f"Unknown stock filter {name!r}")
        if name in self.stock_filters:
            self.stock_filters.discard(name)
        else:
            self.stock_filters.add(name)

    def request_sort(self, key: str) -> SortConfig:
        direction = ASCENDING
        if self.sort and self.sort.key == key and self.sort.direction == ASCENDING:
            direction = DESCENDING
        self.sort = SortConfig(key=key, direction=direction)
        return self.sort

    def render(self) -> dict[str, Any]:
        return {
            "search_term": self.search_term,
            "item_type": self.item_type,
            "bin": self.bin,
            "stock_filters": sorted(self.stock_filters),
            "sort": {"key": self.sort.key, "direction": self.sort.direction} if self.sort else None,
        }


def matches_search(item: Item, term: str) -> bool:
    needle = term.lower()
    return needle in item.item_desc.lower() or needle in item.sku.lower() or needle in item.bin.lower()


def matches_stock_filters(item: Item, stock_filters: Iterable[str]) -> bool:
    active = set(stock_filters)
    if not active:
        return True
    if STOCK_LOW in active and is_low_stock(item):
        return True
    if STOCK_OUT in active and is_out_of_stock(item):
        return True
    return False


def _compare(a: Any, b: Any, direction: str) -> int:
    # falsy values (None, "", 0) always go last, whatever the direction
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    if a < b:
        return -1 if direction == ASCENDING else 1
    if a > b:
        return 1 if direction == ASCENDING else -1
    return 0


def _sort_value(item: Item, key: str) -> Any:
    value = getattr(item, key)
    if isinstance(value, datetime):
        return as_local(value)
    return value


def sort_items(items: Sequence[Item], sort: SortConfig) -> list[Item]:
    return sorted(
        items,
        key=cmp_to_key(lambda a, b: _compare(_sort_value(a, sort.key), _sort_value(b, sort.key), sort.direction)),
    )


def filter_inventory(items: Sequence[Item], query: InventoryQuery) -> list[Item]:
    filtered = [
        item
        for item in items
        if matches_search(item, query.search_term)
        and (query.item_type == ALL or item.item_type == query.item_type)
        and (query.bin == ALL or item.bin == query.bin)
        and matches_stock_filters(item, query.stock_filters)
    ]
    if query.sort is not None:
        filtered = sort_items(filtered, query.sort)
    return filtered


def distinct_item_types(items: Iterable[Item]) -> list[str]:
    return list(dict.fromkeys(item.item_type for item in items if item.item_type))


def distinct_bins(items: Iterable[Item]) -> list[str]:
    return list(dict.fromkeys(item.bin for item in items))

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import Item

LOW_STOCK_THRESHOLD = 100

STOCK_OUT = "out"
STOCK_LOW = "low"
STOCK_GOOD = "good"
STOCK_FILTERS: tuple[str, ...] = (STOCK_LOW, STOCK_OUT)

_TONES = {STOCK_OUT: "red", STOCK_LOW: "orange", STOCK_GOOD: "green"}


@dataclass(frozen=True)
class StockLevel:
    status: str
    tone: str


def stock_status(qty: int) -> str:
    if qty == 0:
        return STOCK_OUT
    if qty <= LOW_STOCK_THRESHOLD:
        return STOCK_LOW
    return STOCK_GOOD


def stock_level(qty: int) -> StockLevel:
    status = stock_status(qty)
    return StockLevel(status=status, tone=_TONES[status])


def is_low_stock(item: Item) -> bool:
    return 0 < item.qty <= LOW_STOCK_THRESHOLD


def is_out_of_stock(item: Item) -> bool:
    return item.qty == 0


def count_low_stock(items: Iterable[Item]) -> int:
    return sum(1 for item in items if is_low_stock(item))


def count_out_of_stock(items: Iterable[Item]) -> int:
    return sum(1 for item in items if is_out_of_stock(item))

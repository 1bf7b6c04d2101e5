from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from wms_client_sdk.models import CENTS, EDITABLE_ITEM_FIELDS, Item, ItemUpdate
from wms_client_sdk.stock_status import stock_level

QTY_STEPS: tuple[int, ...] = (-12, -6, -1, 1, 6, 12)
_PRICE_INPUT = re.compile(r"^\d*\.?\d{0,2}$")
_TEXT_FIELDS = {"item_desc", "bin", "dsu", "item_type"}


@dataclass
class EditItemDialog:
    """Draft copy of one item; the list row is untouched until save."""

    item: Item
    draft: dict[str, Any] = field(default_factory=dict)
    price_text: str = ""

    def __post_init__(self) -> None:
        if not self.draft:
            self.draft = {name: getattr(self.item, name) for name in EDITABLE_ITEM_FIELDS}
        self.price_text = str(self.draft["price"])

    @property
    def sku(self) -> str:
        return self.item.sku

    def set_field(self, name: str, value: str | None) -> None:
        if name not in _TEXT_FIELDS:
            raise ValueError(f"{name!r} is not a free-text item field")
        self.draft[name] = value

    def adjust_qty(self, delta: int) -> int:
        self.draft["qty"] = max(0, int(self.draft["qty"]) + int(delta))
        return self.draft["qty"]

    def set_qty_text(self, text: str) -> bool:
        clean = text.strip()
        if clean == "":
            self.draft["qty"] = 0
            return True
        if not clean.isdigit():
            return False
        self.draft["qty"] = int(clean)
        return True

    def set_price_text(self, text: str) -> bool:
        if text != "" and not _PRICE_INPUT.match(text):
            return False
        self.price_text = text
        return True

    def commit_price(self) -> Decimal:
        try:
            price = Decimal(self.price_text).quantize(CENTS)
        except InvalidOperation:
            price = Decimal("0.00")
        self.draft["price"] = price
        self.price_text = str(price)
        return price

    def to_item(self) -> Item:
        self.commit_price()
        return self.item.model_copy(update=dict(self.draft))

    def to_update(self) -> ItemUpdate:
        self.commit_price()
        return ItemUpdate(**self.draft)

    def render(self) -> dict[str, Any]:
        level = stock_level(int(self.draft["qty"]))
        return {
            "sku": self.sku,
            "fields": {
                "item_desc": self.draft["item_desc"],
                "bin": self.draft["bin"],
                "dsu": self.draft["dsu"],
                "item_type": self.draft["item_type"],
                "qty": self.draft["qty"],
                "price": self.price_text,
            },
            "qty_steps": list(QTY_STEPS),
            "stock": {"status": level.status, "tone": level.tone},
        }

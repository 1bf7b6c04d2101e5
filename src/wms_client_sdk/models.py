from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

CENTS = Decimal("0.01")


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: Any) -> "OrderStatus":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"Unknown order status: {value!r}")


ORDER_STATUSES: tuple[OrderStatus, ...] = tuple(OrderStatus)
FULFILLED_STATUSES = frozenset({OrderStatus.SHIPPED, OrderStatus.DELIVERED})


def parse_quantity(value: Any) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError("quantity must be a number")
    try:
        return int(Decimal(str(value).strip()))
    except InvalidOperation as exc:
        raise ValueError(f"quantity is not numeric: {value!r}") from exc


def parse_money(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0.00")
    if isinstance(value, bool):
        raise ValueError("amount must be a number")
    try:
        return Decimal(str(value).strip()).quantize(CENTS)
    except InvalidOperation as exc:
        raise ValueError(f"amount is not numeric: {value!r}") from exc


def parse_timestamp(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    clean = value.strip()
    try:
        return datetime.fromisoformat(clean.replace("Z", "+00:00"))
    except ValueError:
        # leave anything else to pydantic's own datetime parsing
        return clean


class Item(BaseModel):
    """One stock-keeping unit, with domain field names.

    The wire uses ``bin_loc``, ``default_selling_unit`` and ``qty_on_hand``;
    validation accepts either spelling and ``to_wire`` writes the backend one.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sku: str
    item_desc: str = ""
    bin: str = Field(default="", validation_alias=AliasChoices("bin", "bin_loc"), serialization_alias="bin_loc")
    dsu: str = Field(
        default="",
        validation_alias=AliasChoices("dsu", "default_selling_unit"),
        serialization_alias="default_selling_unit",
    )
    item_type: str | None = None
    qty: int = Field(default=0, validation_alias=AliasChoices("qty", "qty_on_hand"), serialization_alias="qty_on_hand")
    price: Decimal = Decimal("0.00")
    last_updated: datetime = Field(default_factory=datetime.now)

    @field_validator("qty", mode="before")
    @classmethod
    def _parse_qty(cls, value: Any) -> int:
        return parse_quantity(value)

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal:
        return parse_money(value)

    @field_validator("last_updated", mode="before")
    @classmethod
    def _default_last_updated(cls, value: Any) -> Any:
        if value is None or value == "":
            return datetime.now()
        return parse_timestamp(value)

    @field_validator("bin", "dsu", "item_desc", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


EDITABLE_ITEM_FIELDS: tuple[str, ...] = ("item_desc", "bin", "dsu", "item_type", "qty", "price")


class ItemUpdate(BaseModel):
    """Sparse item patch; only fields explicitly set are sent."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    item_desc: str | None = None
    bin: str | None = Field(default=None, serialization_alias="bin_loc")
    dsu: str | None = Field(default=None, serialization_alias="default_selling_unit")
    item_type: str | None = None
    qty: int | None = Field(default=None, serialization_alias="qty_on_hand")
    price: Decimal | None = None

    @field_validator("qty", mode="before")
    @classmethod
    def _parse_qty(cls, value: Any) -> int | None:
        if value is None:
            return None
        qty = parse_quantity(value)
        if qty < 0:
            raise ValueError("qty must be >= 0")
        return qty

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal | None:
        if value is None:
            return None
        price = parse_money(value)
        if price < 0:
            raise ValueError("price must be >= 0")
        return price

    @classmethod
    def from_item(cls, item: Item) -> "ItemUpdate":
        return cls(**{name: getattr(item, name) for name in EDITABLE_ITEM_FIELDS})

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class LineItem(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sku: str = ""
    item_desc: str = ""
    item_type: str | None = None
    bin: str = Field(default="", validation_alias=AliasChoices("bin", "bin_loc"))
    qty: int = Field(default=0, validation_alias=AliasChoices("qty", "qty_on_hand"))
    price: Decimal = Decimal("0.00")

    @field_validator("qty", mode="before")
    @classmethod
    def _parse_qty(cls, value: Any) -> int:
        return parse_quantity(value)

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal:
        return parse_money(value)

    @field_validator("bin", "item_desc", "sku", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class Order(BaseModel):
    model_config = ConfigDict(extra="ignore")

    order_id: str
    customer_id: str
    customer: str = ""
    customer_phone: str = ""
    customer_email: str | None = None
    address: str = ""
    timestamp: datetime
    item_list: List[LineItem] = Field(default_factory=list)
    subtotal: Decimal = Decimal("0.00")
    # statuses outside the known five are kept verbatim and shown with the neutral badge
    status: Union[OrderStatus, str] = OrderStatus.PENDING
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None
    shipping_method: Optional[str] = None

    @field_validator("subtotal", mode="before")
    @classmethod
    def _parse_subtotal(cls, value: Any) -> Decimal:
        return parse_money(value)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> Union[OrderStatus, str]:
        if value is None or str(value).strip() == "":
            return OrderStatus.PENDING
        try:
            return OrderStatus.parse(value)
        except ValueError:
            return str(value).strip()

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        return parse_timestamp(value)

    @field_validator("customer", "customer_phone", "address", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class SessionData(BaseModel):
    username: str
    access_token: str
    id_token: str | None = None
    refresh_token: str | None = None
    env_name: str | None = None


def as_local(moment: datetime) -> datetime:
    """Naive local time; aware values are converted first."""
    if moment.tzinfo is not None:
        return moment.astimezone().replace(tzinfo=None)
    return moment

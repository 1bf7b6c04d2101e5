from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from wms_client_sdk.exceptions import ApiError, NoSessionError, TransportError
from wms_client_sdk.identity import IdentitySession
from wms_client_sdk.models import Item, ItemUpdate, LineItem, Order, OrderStatus


def server_error(status_code: int = 500) -> ApiError:
    return ApiError(
        code=f"HTTP_{status_code}",
        message=f"HTTP error! status: {status_code}",
        details=None,
        trace_id="trace-fail",
        status_code=status_code,
    )


def network_error() -> TransportError:
    return TransportError(code="TRANSPORT_ERROR", message="refused", details=None, trace_id=None, status_code=0)


def make_item(sku: str, *, qty: int = 10, **overrides: Any) -> Item:
    values: dict[str, Any] = {
        "sku": sku,
        "item_desc": f"Item {sku}",
        "bin": "B-01",
        "dsu": "EA",
        "item_type": "Standard",
        "qty": qty,
        "price": Decimal("2.00"),
        "last_updated": datetime(2026, 10, 18, 9, 30),
    }
    values.update(overrides)
    return Item(**values)


def make_order(order_id: str, *, status: OrderStatus | str = OrderStatus.PENDING, **overrides: Any) -> Order:
    values: dict[str, Any] = {
        "order_id": order_id,
        "customer_id": "CUST-1",
        "customer": "Ada Lovelace",
        "customer_phone": "555-0100",
        "address": "1 Analytical Way",
        "timestamp": datetime(2026, 10, 18, 14, 30),
        "item_list": [LineItem(sku="A", item_desc="Mug", item_type="Large", bin="B-01", qty=2, price=Decimal("5.00"))],
        "subtotal": Decimal("10.00"),
        "status": status,
    }
    values.update(overrides)
    return Order(**values)


@dataclass
class FakeItemsClient:
    items: list[Item] = field(default_factory=list)
    list_error: Exception | None = None
    update_error: Exception | None = None
    ack: dict[str, Any] = field(default_factory=dict)
    updates: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def list_items(self) -> list[Item]:
        if self.list_error:
            raise self.list_error
        return list(self.items)

    def update_item(self, sku: str, changes: ItemUpdate | Mapping[str, Any]) -> dict[str, Any]:
        update = changes if isinstance(changes, ItemUpdate) else ItemUpdate.model_validate(dict(changes))
        self.updates.append((sku, update.to_wire()))
        if self.update_error:
            raise self.update_error
        return dict(self.ack)


@dataclass
class FakeOrdersClient:
    orders: list[Order] = field(default_factory=list)
    list_error: Exception | None = None
    update_error: Exception | None = None
    ack: dict[str, Any] = field(default_factory=dict)
    patches: list[tuple[str, str, dict[str, Any]]] = field(default_factory=list)

    def list_orders(self) -> list[Order]:
        if self.list_error:
            raise self.list_error
        return list(self.orders)

    def update_status(self, customer_id: str, order_id: str, status: OrderStatus | str) -> dict[str, Any]:
        body = {"status": OrderStatus.parse(status).value}
        return self._patch(customer_id, order_id, body)

    def update_tracking(
        self, customer_id: str, order_id: str, *, carrier: str | None, tracking_number: str | None
    ) -> dict[str, Any]:
        return self._patch(customer_id, order_id, {"carrier": carrier, "tracking_number": tracking_number})

    def _patch(self, customer_id: str, order_id: str, body: dict[str, Any]) -> dict[str, Any]:
        self.patches.append((customer_id, order_id, body))
        if self.update_error:
            raise self.update_error
        return dict(self.ack)


@dataclass
class FakeIdentity:
    session_error: Exception | None = field(default_factory=lambda: NoSessionError("No current user"))
    sign_in_error: Exception | None = None
    sign_out_error: Exception | None = None
    signed_in: list[str] = field(default_factory=list)
    sign_outs: int = 0

    def get_current_session(self) -> IdentitySession:
        if self.session_error:
            raise self.session_error
        return IdentitySession(username="ada", access_token="stored-token")

    def sign_in(self, username: str, password: str) -> IdentitySession:
        self.signed_in.append(username)
        if self.sign_in_error:
            raise self.sign_in_error
        return IdentitySession(username=username, access_token="fresh-token")

    def sign_out(self) -> None:
        self.sign_outs += 1
        if self.sign_out_error:
            raise self.sign_out_error


class FakeSession:
    def __init__(
        self,
        config,
        *,
        items: FakeItemsClient | None = None,
        orders: FakeOrdersClient | None = None,
        identity: FakeIdentity | None = None,
    ) -> None:
        self.config = config
        self.items = items or FakeItemsClient()
        self.orders = orders or FakeOrdersClient()
        self.identity = identity or FakeIdentity()
        self.token: str | None = None
        self.username: str | None = None

    def items_client(self) -> FakeItemsClient:
        return self.items

    def orders_client(self) -> FakeOrdersClient:
        return self.orders

    def establish(self, identity_session: IdentitySession) -> None:
        self.token = identity_session.access_token
        self.username = identity_session.username

    def clear(self) -> None:
        self.token = None
        self.username = None


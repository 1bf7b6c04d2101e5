from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal

import pytest
import requests
import responses

from wms_client_sdk.clients.items_client import ItemsClient
from wms_client_sdk.exceptions import ApiError, TransportError
from wms_client_sdk.http_client import HttpClient, TraceContext
from wms_client_sdk.models import ItemUpdate


def _client(config, token: str | None = "token-abc") -> ItemsClient:
    return ItemsClient(http=HttpClient(config, trace=TraceContext()), access_token=token)


@responses.activate
def test_list_items_maps_wire_names(client_config) -> None:
    responses.add(
        responses.GET,
        f"{client_config.api_base_url}/item",
        json=[
            {
                "sku": "A-100",
                "item_desc": "Blue Mug",
                "bin_loc": "B-01",
                "default_selling_unit": "EA",
                "item_type": "Large",
                "qty_on_hand": "42",
                "price": "12.5",
                "last_updated": "2026-10-18T09:30:00Z",
            },
            {"sku": "A-200", "item_desc": "Plate", "qty_on_hand": 0, "price": None, "last_updated": ""},
        ],
        status=200,
    )
    items = _client(client_config).list_items()

    first, second = items
    assert first.bin == "B-01"
    assert first.dsu == "EA"
    assert first.qty == 42
    assert first.price == Decimal("12.50")
    assert first.last_updated.year == 2026
    assert second.qty == 0
    assert second.price == Decimal("0.00")
    assert isinstance(second.last_updated, datetime)
    assert responses.calls[0].request.headers["Authorization"] == "Bearer token-abc"


@responses.activate
def test_no_authorization_header_without_token(client_config) -> None:
    responses.add(responses.GET, f"{client_config.api_base_url}/item", json=[], status=200)
    assert _client(client_config, token=None).list_items() == []
    assert "Authorization" not in responses.calls[0].request.headers


@responses.activate
def test_list_items_rejects_non_list_payload(client_config) -> None:
    responses.add(responses.GET, f"{client_config.api_base_url}/item", json={"items": []}, status=200)
    with pytest.raises(ValueError):
        _client(client_config).list_items()


@responses.activate
def test_update_item_sends_only_present_fields(client_config) -> None:
    responses.add(
        responses.PATCH,
        f"{client_config.api_base_url}/item/A-100",
        json={"item_desc": "Blue Mug", "qty_on_hand": 7, "price": "12.50", "bin_loc": "B-01"},
        status=200,
    )
    ack = _client(client_config).update_item("A-100", {"qty": 7, "price": 12.5})

    body = json.loads(responses.calls[0].request.body)
    assert body == {"qty_on_hand": 7, "price": "12.50"}
    assert ack["qty_on_hand"] == 7


@responses.activate
def test_update_item_renames_every_editable_field(client_config) -> None:
    responses.add(responses.PATCH, f"{client_config.api_base_url}/item/A-100", json={}, status=200)
    changes = ItemUpdate(item_desc="Mug", bin="C-9", dsu="CS", item_type="Small", qty=1, price=Decimal("3"))

    _client(client_config).update_item("A-100", changes)

    body = json.loads(responses.calls[0].request.body)
    assert body == {
        "item_desc": "Mug",
        "bin_loc": "C-9",
        "default_selling_unit": "CS",
        "item_type": "Small",
        "qty_on_hand": 1,
        "price": "3.00",
    }


@responses.activate
def test_update_item_accepts_any_success_body(client_config) -> None:
    responses.add(
        responses.PATCH,
        f"{client_config.api_base_url}/item/A-100",
        json={"sku": "A-100", "qty_on_hand": None, "last_updated": "yesterday"},
        status=200,
    )
    ack = _client(client_config).update_item("A-100", {"qty": 2})
    assert ack == {"sku": "A-100", "qty_on_hand": None, "last_updated": "yesterday"}


@responses.activate
def test_update_item_empty_body_is_an_empty_acknowledgement(client_config) -> None:
    responses.add(responses.PATCH, f"{client_config.api_base_url}/item/A-100", body="", status=204)
    assert _client(client_config).update_item("A-100", {"qty": 2}) == {}

@responses.activate
def test_update_item_quotes_the_sku(client_config) -> None:
    responses.add(responses.PATCH, f"{client_config.api_base_url}/item/A%2F1%20X", json={}, status=200)
    _client(client_config).update_item("A/1 X", {"qty": 1})
    assert responses.calls[0].request.url.endswith("/item/A%2F1%20X")


def test_update_rejects_negative_qty() -> None:
    with pytest.raises(ValueError):
        ItemUpdate(qty=-1)


@responses.activate
def test_update_item_server_error(client_config) -> None:
    responses.add(responses.PATCH, f"{client_config.api_base_url}/item/A-100", json={}, status=500)
    with pytest.raises(ApiError) as excinfo:
        _client(client_config).update_item("A-100", {"qty": 1})
    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "HTTP error! status: 500"


@responses.activate
def test_list_items_network_failure(client_config) -> None:
    responses.add(responses.GET, f"{client_config.api_base_url}/item", body=requests.ConnectTimeout("slow"))
    with pytest.raises(TransportError) as excinfo:
        _client(client_config).list_items()
    assert excinfo.value.status_code == 0

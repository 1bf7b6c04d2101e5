from __future__ import annotations

from decimal import Decimal

import pytest

from wms_app.ui.inventory.inventory_query import (
    ASCENDING,
    DESCENDING,
    InventoryQuery,
    SortConfig,
    distinct_bins,
    distinct_item_types,
    filter_inventory,
)
from wms_fakes import make_item


def _items():
    return [
        make_item("A", qty=0),
        make_item("B", qty=50),
        make_item("C", qty=500),
    ]


def test_no_stock_filter_keeps_everything() -> None:
    assert [item.sku for item in filter_inventory(_items(), InventoryQuery())] == ["A", "B", "C"]


def test_low_filter_only() -> None:
    query = InventoryQuery(stock_filters={"low"})
    assert [item.sku for item in filter_inventory(_items(), query)] == ["B"]


def test_low_and_out_filters_are_ored() -> None:
    query = InventoryQuery(stock_filters={"low", "out"})
    assert [item.sku for item in filter_inventory(_items(), query)] == ["A", "B"]


def test_toggle_stock_filter() -> None:
    query = InventoryQuery()
    query.toggle_stock_filter("out")
    assert query.stock_filters == {"out"}
    query.toggle_stock_filter("out")
    assert query.stock_filters == set()
    with pytest.raises(ValueError):
        query.toggle_stock_filter("good")


def test_search_matches_desc_sku_or_bin_case_insensitively() -> None:
    items = [
        make_item("SKU-1", item_desc="Blue Mug", bin="X-1"),
        make_item("SKU-2", item_desc="Plate", bin="mug-shelf"),
        make_item("MUG-3", item_desc="Bowl", bin="Y-2"),
        make_item("SKU-4", item_desc="Fork", bin="Z-9"),
    ]
    query = InventoryQuery(search_term="MUG")
    assert [item.sku for item in filter_inventory(items, query)] == ["SKU-1", "SKU-2", "MUG-3"]


def test_type_and_bin_filters_are_exact() -> None:
    items = [
        make_item("A", item_type="Large", bin="B-1"),
        make_item("B", item_type="Large", bin="B-10"),
        make_item("C", item_type="Small", bin="B-1"),
    ]
    query = InventoryQuery(item_type="Large", bin="B-1")
    assert [item.sku for item in filter_inventory(items, query)] == ["A"]


def test_request_sort_toggles_direction() -> None:
    query = InventoryQuery()
    assert query.request_sort("qty") == SortConfig("qty", ASCENDING)
    assert query.request_sort("qty") == SortConfig("qty", DESCENDING)
    assert query.request_sort("qty") == SortConfig("qty", ASCENDING)
    assert query.request_sort("sku") == SortConfig("sku", ASCENDING)


def test_falsy_values_sort_last_in_both_directions() -> None:
    items = [
        make_item("A", item_type=None),
        make_item("B", item_type="Small"),
        make_item("C", item_type=""),
        make_item("D", item_type="Large"),
    ]
    ascending = filter_inventory(items, InventoryQuery(sort=SortConfig("item_type", ASCENDING)))
    descending = filter_inventory(items, InventoryQuery(sort=SortConfig("item_type", DESCENDING)))
    assert [item.sku for item in ascending] == ["D", "B", "A", "C"]
    assert [item.sku for item in descending] == ["B", "D", "A", "C"]


def test_sort_is_stable_for_equal_keys() -> None:
    items = [make_item("A", qty=5), make_item("B", qty=1), make_item("C", qty=5), make_item("D", qty=0)]
    result = filter_inventory(items, InventoryQuery(sort=SortConfig("qty", ASCENDING)))
    assert [item.sku for item in result] == ["B", "A", "C", "D"]


def test_zero_price_sorts_last() -> None:
    items = [make_item("A", price=Decimal("0")), make_item("B", price=Decimal("3")), make_item("C", price=Decimal("1"))]
    result = filter_inventory(items, InventoryQuery(sort=SortConfig("price", DESCENDING)))
    assert [item.sku for item in result] == ["B", "C", "A"]


def test_unknown_sort_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        SortConfig("colour")


def test_distinct_values_keep_first_seen_order() -> None:
    items = [
        make_item("A", item_type="Small", bin="B-2"),
        make_item("B", item_type=None, bin="B-1"),
        make_item("C", item_type="Large", bin="B-2"),
        make_item("D", item_type="Small", bin="B-3"),
    ]
    assert distinct_item_types(items) == ["Small", "Large"]
    assert distinct_bins(items) == ["B-2", "B-1", "B-3"]

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import Item, ItemUpdate
from .base import BaseClient, path_segment


@dataclass
class ItemsClient(BaseClient):
    def list_items(self) -> list[Item]:
        payload = self._request("GET", "/item", module="inventory", operation="list_items")
        if not isinstance(payload, list):
            raise ValueError("Expected item list response to be a JSON array")
        return [Item.model_validate(row) for row in payload]

    def update_item(self, sku: str, changes: ItemUpdate | Mapping[str, Any]) -> dict[str, Any]:
        """Any 2xx is accepted; the body is returned as-is, {} when empty."""
        update = changes if isinstance(changes, ItemUpdate) else ItemUpdate.model_validate(dict(changes))
        data = self._request(
            "PATCH",
            f"/item/{path_segment(sku)}",
            json_body=update.to_wire(),
            module="inventory",
            operation="update_item",
        )
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Expected item update response to be a JSON object")
        return data

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from wms_client_sdk import ApiSession, to_user_facing_error
from wms_client_sdk.exceptions import ApiError
from wms_client_sdk.models import Item, ItemUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryServiceError(RuntimeError):
    message: str
    details: str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


class InventoryService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_items(self) -> list[Item]:
        try:
            items = self.session.items_client().list_items()
        except Exception as exc:
            raise self._normalize_error(exc, "list_items") from exc
        logger.info("inventory_loaded", extra={"count": len(items)})
        return items

    def update_item(self, sku: str, changes: ItemUpdate | Mapping[str, Any]) -> dict[str, Any]:
        try:
            ack = self.session.items_client().update_item(sku, changes)
        except Exception as exc:
            raise self._normalize_error(exc, "update_item", sku=sku) from exc
        logger.info("item_updated", extra={"sku": sku})
        return ack

    @staticmethod
    def _normalize_error(exc: Exception, operation: str, **context: Any) -> InventoryServiceError:
        if isinstance(exc, InventoryServiceError):
            return exc
        if isinstance(exc, ApiError):
            user_facing = to_user_facing_error(exc)
            logger.warning(
                "inventory_request_failed",
                extra={"operation": operation, "status_code": exc.status_code, "trace_id": exc.trace_id, **context},
            )
            return InventoryServiceError(
                message=user_facing.message,
                details=user_facing.technical_details,
                trace_id=user_facing.trace_id,
                status_code=exc.status_code,
            )
        logger.exception("inventory_unexpected_error", extra={"operation": operation, **context})
        return InventoryServiceError(message=str(exc) or "Unexpected inventory client error", details="CLIENT_ERROR")

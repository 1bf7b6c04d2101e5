from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from wms_client_sdk import ApiSession, to_user_facing_error
from wms_client_sdk.exceptions import ApiError
from wms_client_sdk.models import Order, OrderStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrdersServiceError(RuntimeError):
    message: str
    details: str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


class OrdersService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_orders(self) -> list[Order]:
        try:
            orders = self.session.orders_client().list_orders()
        except Exception as exc:
            raise self._normalize_error(exc, "list_orders") from exc
        logger.info("orders_loaded", extra={"count": len(orders)})
        return orders

    def update_status(self, order: Order, status: OrderStatus) -> dict[str, Any]:
        try:
            ack = self.session.orders_client().update_status(order.customer_id, order.order_id, status)
        except Exception as exc:
            raise self._normalize_error(exc, "update_status", order_id=order.order_id) from exc
        logger.info("order_status_updated", extra={"order_id": order.order_id, "status": status.value})
        return ack

    def update_tracking(self, order: Order, *, carrier: str | None, tracking_number: str | None) -> dict[str, Any]:
        try:
            ack = self.session.orders_client().update_tracking(
                order.customer_id,
                order.order_id,
                carrier=carrier,
                tracking_number=tracking_number,
            )
        except Exception as exc:
            raise self._normalize_error(exc, "update_tracking", order_id=order.order_id) from exc
        logger.info("order_tracking_updated", extra={"order_id": order.order_id})
        return ack

    @staticmethod
    def _normalize_error(exc: Exception, operation: str, **context: Any) -> OrdersServiceError:
        if isinstance(exc, OrdersServiceError):
            return exc
        if isinstance(exc, ApiError):
            user_facing = to_user_facing_error(exc)
            logger.warning(
                "orders_request_failed",
                extra={"operation": operation, "status_code": exc.status_code, "trace_id": exc.trace_id, **context},
            )
            return OrdersServiceError(
                message=user_facing.message,
                details=user_facing.technical_details,
                trace_id=user_facing.trace_id,
                status_code=exc.status_code,
            )
        logger.exception("orders_unexpected_error", extra={"operation": operation, **context})
        return OrdersServiceError(message=str(exc) or "Unexpected orders client error", details="CLIENT_ERROR")

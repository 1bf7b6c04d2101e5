from __future__ import annotations

from wms_client_sdk.error_mapper import map_error
from wms_client_sdk.exceptions import ApiError, TransportError


def test_map_error_uses_payload_fields() -> None:
    error = map_error(
        409,
        {"code": "CONFLICT", "message": "stale item", "details": {"sku": "A"}, "trace_id": "trace-body"},
        "trace-header",
    )
    assert isinstance(error, ApiError)
    assert error.status_code == 409
    assert error.code == "CONFLICT"
    assert error.message == "stale item"
    assert error.details == {"sku": "A"}
    assert error.trace_id == "trace-body"


def test_map_error_without_payload_falls_back_to_status() -> None:
    error = map_error(500, None, "trace-header")
    assert error.code == "HTTP_500"
    assert error.message == "HTTP error! status: 500"
    assert error.trace_id == "trace-header"
    assert str(error) == "[500] HTTP_500: HTTP error! status: 500 trace_id=trace-header"


def test_transport_error_is_an_api_error() -> None:
    error = TransportError(code="TRANSPORT_ERROR", message="down", details=None, trace_id=None, status_code=0)
    assert isinstance(error, ApiError)
    assert error.status_code == 0

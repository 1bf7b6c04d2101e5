from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import ApiError, TransportError

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-ID"
TRACE_HEADER_ALIASES = (TRACE_HEADER, "X-Trace-Id", "x-trace-id", "X-Amzn-RequestId")


@dataclass
class TraceContext:
    trace_id: str | None = None

    def ensure(self) -> str:
        if not self.trace_id:
            self.trace_id = str(uuid.uuid4())
        return self.trace_id

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        for key in TRACE_HEADER_ALIASES:
            trace_id = headers.get(key)
            if trace_id:
                self.trace_id = trace_id
                return


@dataclass
class HttpClient:
    """One request, one response: no retries, no caching."""

    config: ClientConfig
    trace: TraceContext | None = None
    session: requests.Session | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if json_body is not None:
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)
        trace_context = self.trace or TraceContext()
        request_headers[TRACE_HEADER] = trace_context.ensure()

        normalized_method = method.upper()
        url = self._build_url(path)
        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._log_operation(module, operation, started, "error", 0, trace_context.trace_id)
            logger.warning(
                "http_transport_error",
                extra={"method": normalized_method, "path": path, "error_type": type(exc).__name__},
            )
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc),
                details={"type": type(exc).__name__},
                trace_id=trace_context.trace_id,
                status_code=0,
                raw_payload=None,
            ) from exc

        trace_context.update_from_headers(response.headers)

        if response.ok:
            self._log_operation(
                module, operation, started, "success", response.status_code, trace_context.trace_id
            )
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise ApiError(
                    code="INVALID_JSON",
                    message="Response body is not valid JSON",
                    details={"content_type": response.headers.get("Content-Type")},
                    trace_id=trace_context.trace_id,
                    status_code=response.status_code,
                    raw_payload=response.text,
                ) from exc

        payload: Any
        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError):
            payload = {"message": response.text} if response.text else None
        self._log_operation(module, operation, started, "error", response.status_code, trace_context.trace_id)
        logger.warning(
            "http_error_response",
            extra={"method": normalized_method, "path": path, "status_code": response.status_code},
        )
        raise map_error(response.status_code, payload if isinstance(payload, dict) else None, trace_context.trace_id)

    def _log_operation(
        self,
        module: str,
        operation: str,
        started: float,
        result: str,
        status_code: int,
        trace_id: str | None,
    ) -> None:
        logger.info(
            "http_operation",
            extra={
                "api_module": module,
                "operation": operation,
                "duration_ms": int((time.monotonic() - started) * 1000),
                "result": result,
                "status_code": status_code,
                "trace_id": trace_id,
            },
        )

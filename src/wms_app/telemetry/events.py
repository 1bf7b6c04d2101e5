"""Console telemetry events.

Events describe what the operator did and whether the backend agreed; they
never carry customer or credential data.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

AUTH = "auth"
NAVIGATION = "navigation"
API_CALL_RESULT = "api_call_result"
ERROR = "error"
TELEMETRY_CATEGORIES = {AUTH, NAVIGATION, API_CALL_RESULT, ERROR}

# order records are full of customer details; none of it belongs here
_PII_KEYS = frozenset(
    {
        "password",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
        "customer",
        "customer_email",
        "customer_phone",
        "email",
        "phone",
        "address",
    }
)


@dataclass(frozen=True)
class TelemetryEvent:
    category: str
    name: str
    module: str
    action: str
    timestamp_utc: str
    trace_id: str | None = None
    duration_ms: int | None = None
    success: bool | None = None
    error_code: str | None = None
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


def build_event(
    *,
    category: str,
    name: str,
    module: str,
    action: str,
    trace_id: str | None = None,
    duration_ms: int | None = None,
    success: bool | None = None,
    error_code: str | None = None,
    context: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> TelemetryEvent:
    if category not in TELEMETRY_CATEGORIES:
        raise ValueError(f"Unsupported telemetry category: {category}")
    leaked = sorted(key for key in (context or {}) if key.lower() in _PII_KEYS)
    if leaked:
        raise ValueError(f"PII-like keys are forbidden in telemetry context: {leaked}")
    return TelemetryEvent(
        category=category,
        name=name,
        module=module,
        action=action,
        timestamp_utc=(now or datetime.now(timezone.utc)).isoformat(),
        trace_id=trace_id,
        duration_ms=duration_ms,
        success=success,
        error_code=error_code,
        context=context,
    )


def screen_view(tab: str) -> TelemetryEvent:
    return build_event(category=NAVIGATION, name="screen_view", module="shell", action=tab, success=True)


def api_call_failed(module: str, action: str, error_code: str, trace_id: str | None = None) -> TelemetryEvent:
    return build_event(
        category=API_CALL_RESULT,
        name="api_call_result",
        module=module,
        action=action,
        success=False,
        trace_id=trace_id,
        error_code=error_code,
    )


def login_result(success: bool, duration_ms: int) -> TelemetryEvent:
    return build_event(
        category=AUTH,
        name="auth_login_result",
        module="auth",
        action="login",
        success=success,
        duration_ms=duration_ms,
    )

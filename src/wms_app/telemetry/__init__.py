from .events import TELEMETRY_CATEGORIES, TelemetryEvent, api_call_failed, build_event, login_result, screen_view
from .logger import TelemetryLogger

__all__ = [
    "TELEMETRY_CATEGORIES",
    "TelemetryEvent",
    "TelemetryLogger",
    "api_call_failed",
    "build_event",
    "login_result",
    "screen_view",
]

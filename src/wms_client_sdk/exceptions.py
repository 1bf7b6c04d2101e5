from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: object | None
    trace_id: str | None
    status_code: int
    raw_payload: object | None = None

    def __str__(self) -> str:
        trace = f" trace_id={self.trace_id}" if self.trace_id else ""
        return f"[{self.status_code}] {self.code}: {self.message}{trace}"


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class IdentityError(Exception):
    """The identity provider rejected or failed an operation.

    ``message`` is the provider's own text so callers can show it verbatim.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class NoSessionError(IdentityError):
    """No stored session exists for the current user."""

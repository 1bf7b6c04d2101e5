from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from wms_client_sdk.models import as_local


def format_datetime(moment: datetime) -> str:
    """Order-table style in local time, e.g. ``Oct 19, 2026, 02:30 PM``."""
    local = as_local(moment)
    return f"{local:%b} {local.day}, {local:%Y, %I:%M %p}"


def format_money(value: Decimal) -> str:
    return f"${value:,.2f}"

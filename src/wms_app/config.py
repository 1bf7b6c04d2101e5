from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_COMPANY_NAME = "Dream World"
DEFAULT_COMPANY_ADDRESS = "123 Warehouse St, Distribution City, DC 12345"


@dataclass(frozen=True)
class AppConfig:
    company_name: str = DEFAULT_COMPANY_NAME
    company_address: str = DEFAULT_COMPANY_ADDRESS
    telemetry_enabled: bool = False
    telemetry_file: str | None = None


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_app_config(env_file: str | None = None) -> AppConfig:
    load_dotenv(env_file)
    return AppConfig(
        company_name=os.getenv("WMS_SLIP_COMPANY_NAME", DEFAULT_COMPANY_NAME).strip() or DEFAULT_COMPANY_NAME,
        company_address=os.getenv("WMS_SLIP_COMPANY_ADDRESS", DEFAULT_COMPANY_ADDRESS).strip(),
        telemetry_enabled=_coerce_bool(os.getenv("WMS_TELEMETRY_ENABLED"), False),
        telemetry_file=os.getenv("WMS_TELEMETRY_FILE") or None,
    )

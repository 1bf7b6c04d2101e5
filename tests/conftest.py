from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = BASE_DIR / "src"

sys.path.insert(0, str(SRC_DIR))

from wms_client_sdk.config import ClientConfig  # noqa: E402

API_BASE_URL = "https://api.example.com/dev"


@pytest.fixture(autouse=True)
def _clean_wms_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("WMS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        env_name="test",
        api_base_url=API_BASE_URL,
        cognito_user_pool_id="us-east-1_pool",
        cognito_client_id="client-123",
    )

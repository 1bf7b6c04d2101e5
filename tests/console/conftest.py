from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent))

from wms_fakes import FakeSession  # noqa: E402


@pytest.fixture
def fake_session(client_config) -> FakeSession:
    return FakeSession(client_config)

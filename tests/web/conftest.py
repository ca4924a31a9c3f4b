"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wplace_tools.web.app import app


@pytest.fixture
def client(monkeypatch):
    """FastAPI test client with default settings."""
    for name in ("WPLACE_OUT_ZOOM", "WPLACE_DETAIL_ZOOM", "WPLACE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    with TestClient(app) as c:
        yield c

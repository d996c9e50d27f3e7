"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • regular           — the built-in Regular earning template
  • registry          — a fresh default earning registry
  • make_request(...) — build a bare starlette Request for direct handler calls
  • client            — TestClient over a freshly created app
"""

from __future__ import annotations

import os
import sys

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

# Ensure the project root is on the path so all earning_templates imports resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from earning_templates.app import create_app  # noqa: E402
from earning_templates.domain.enums import OverrideMode  # noqa: E402
from earning_templates.metrics import reset_metrics_for_tests  # noqa: E402
from earning_templates.templates.earnings import RegularEarningTemplate  # noqa: E402
from earning_templates.templates.registry import build_earning_registry  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_metrics_for_tests()
    yield
    reset_metrics_for_tests()


@pytest.fixture
def regular():
    return RegularEarningTemplate()


@pytest.fixture
def registry():
    return build_earning_registry()


@pytest.fixture
def make_request():
    def _factory(path: str = "/EarningTemplate", method: str = "POST", headers=None) -> Request:
        scope = {
            "type": "http",
            "method": method,
            "path": path,
            "headers": headers or [],
            "query_string": b"",
            "client": ("127.0.0.1", 50000),
            "scheme": "http",
            "server": ("testserver", 80),
        }
        return Request(scope)
    return _factory


@pytest.fixture
def client(registry):
    app = create_app(registry=registry, override_mode=OverrideMode.REPLACE)
    with TestClient(app) as c:
        yield c

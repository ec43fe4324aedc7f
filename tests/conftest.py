"""
Shared fixtures for the test suite.

Apps are built through ``create_app`` with explicit Settings so that
each test gets its own limiter and message bundles.
"""

from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

ERROR_URI = "https://example.com/error"


def _write_bundle(directory: Path, name: str, content: str) -> Path:
    path = directory / f"{name}.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write_bundle() -> Callable[[Path, str, str], Path]:
    """Helper that writes a YAML message bundle into a directory."""
    return _write_bundle


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Factory for a TestClient over a freshly configured app."""

    def _make(**overrides) -> TestClient:
        overrides.setdefault("error_uri", ERROR_URI)
        return TestClient(create_app(Settings(**overrides)))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    """TestClient over an app using the bundled message files."""
    return make_client()

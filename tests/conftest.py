"""Pytest fixtures for Dev Dashboard tests."""

import io
import sys
from pathlib import Path

import pytest
import yaml

# Ensure project root is in path for src imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def project_root() -> Path:
    return _project_root


@pytest.fixture
def config(project_root: Path) -> dict:
    """Load config dict from the example YAML."""
    with open(project_root / "config" / "config.yaml.example", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@pytest.fixture
def dashboard_client(config: dict):
    from fastapi.testclient import TestClient

    from src.status_server.app import create_app

    with TestClient(create_app("dashboard", config)) as client:
        yield client


@pytest.fixture
def app_client(config: dict):
    from fastapi.testclient import TestClient

    from src.status_server.app import create_app

    with TestClient(create_app("app", config)) as client:
        yield client


def open_png(data: bytes):
    """Decode PNG bytes with Pillow (RGBA)."""
    from PIL import Image

    img = Image.open(io.BytesIO(data))
    assert img.format == "PNG"
    return img.convert("RGBA")


@pytest.fixture
def png():
    return open_png

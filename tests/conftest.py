"""
Test configuration and fixtures for the palette calculator tests.
"""
import pytest
from fastapi.testclient import TestClient

from main import app, create_app
from palette_calculator.schemas import Color


@pytest.fixture
def dominant():
    """The reference dominant color (hex 186277)."""
    return Color(red=24, green=98, blue=119)


@pytest.fixture
def test_client():
    """Create test client for the app without an image source."""
    return TestClient(app)


@pytest.fixture
def client_with_source():
    """Build a test client around a given dominant color source."""
    def _build(source):
        return TestClient(create_app(source=source))
    return _build

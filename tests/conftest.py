"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from fincalc.config import get_settings
from fincalc.site.routes import get_catalog


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point file outputs at a temp dir and reload settings for each test."""
    monkeypatch.setenv("PREFERENCES_PATH", str(tmp_path / "preferences.json"))
    monkeypatch.setenv("DIST_DIR", str(tmp_path / "dist"))
    monkeypatch.setenv("SITE_URL", "https://calc.example.com/")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def site_url():
    return get_settings().canonical_site_url


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def client():
    """Test client with the app lifespan running."""
    from fincalc.main import app

    with TestClient(app) as test_client:
        yield test_client

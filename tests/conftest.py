"""Shared pytest fixtures for testing."""

import pytest
import respx

BASE_URL = "https://api.wavix.com"
APPID = "test-appid"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials out of tests."""
    monkeypatch.delenv("WAVIX_APPID", raising=False)
    monkeypatch.delenv("WAVIX_BASE_URL", raising=False)


@pytest.fixture
def client():
    """Create a Wavix client against the default base URL."""
    from wavix import Wavix

    client = Wavix(appid=APPID)
    yield client
    client.close()


@pytest.fixture
def api():
    """Mock the Wavix HTTP API."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock

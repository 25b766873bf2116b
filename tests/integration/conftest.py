"""Fixtures for integration tests against the in-process mock FusionAuth server."""
import pytest

from fusionauth.core.api import FusionAuthClient

from mock_server import API_KEY, MockServer, create_mock_app


@pytest.fixture(scope="module")
def mock_fusionauth():
    """Start a fresh mock server per test module."""
    server = MockServer(create_mock_app()).start()
    yield server
    server.stop()


@pytest.fixture
def live_client(mock_fusionauth):
    return FusionAuthClient(API_KEY, mock_fusionauth.url)

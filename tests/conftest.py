import httpx
import pytest

from tests.fixtures.mock_clients import RecordingHTTPClient
from tests.fixtures.responses import (
    MOCK_BRAVE_SEARCH_API_RESPONSE,
    OPENAI_TEST_KEY,
    BRAVE_TEST_KEY,
    openai_completion,
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_config():
    """Config with both API keys set."""
    from config import Config
    return Config(openai_api_key=OPENAI_TEST_KEY, brave_search_api_key=BRAVE_TEST_KEY)


@pytest.fixture
def search_client():
    """Search client returning a standard Brave response."""
    return RecordingHTTPClient(httpx.Response(200, json=MOCK_BRAVE_SEARCH_API_RESPONSE))


@pytest.fixture
def completion_client():
    """Completion client returning a standard OpenAI reply."""
    return RecordingHTTPClient(httpx.Response(200, json=openai_completion("Inflation is...")))


@pytest.fixture
def patched_clients(mocker, search_client, completion_client):
    """Route outbound HTTP through the recording clients."""
    from utils.http_client import HTTPClientManager

    mocker.patch.object(HTTPClientManager, "get_search_client", return_value=search_client)
    mocker.patch.object(HTTPClientManager, "get_completion_client", return_value=completion_client)
    return search_client, completion_client


@pytest.fixture
def app_factory(patched_clients):
    """Build a TestClient around a given config."""
    from fastapi.testclient import TestClient
    from main import create_app

    def _build(config):
        return TestClient(create_app(config))

    return _build


@pytest.fixture
def configured_app(app_factory, test_config):
    """Pre-configured app with all standard mocks."""
    with app_factory(test_config) as client:
        yield client

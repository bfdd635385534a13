"""Shared fixtures."""
import httpx
import pytest
import pytest_asyncio

from financefreedom.config import Settings
from financefreedom.container import AppContainer
from financefreedom.mock_backend import create_app
from financefreedom.storage.session import SessionState
from financefreedom.storage.token_store import TokenStore

BASE_URL = "http://testserver/api/"


@pytest.fixture
def backend():
    """Fresh in-memory stub backend."""
    return create_app()


@pytest.fixture
def test_settings(tmp_path):
    return Settings(base_url=BASE_URL, token_store_path=str(tmp_path / "prefs.db"))


@pytest.fixture
def token_store(tmp_path):
    return TokenStore(db_path=str(tmp_path / "tokens.db"))


@pytest.fixture
def session():
    return SessionState()


@pytest_asyncio.fixture
async def container(backend, test_settings):
    """Container wired to the stub backend through httpx.ASGITransport."""
    app_container = AppContainer.create(test_settings, transport=httpx.ASGITransport(app=backend))
    yield app_container
    await app_container.aclose()

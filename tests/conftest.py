"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from shortener.storage.memory import InMemoryStore
from shortener.service import URLShortenerService
from shortener.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create an empty store."""
    return InMemoryStore(logger=logger)


@pytest.fixture
def service(store, logger):
    """Create service instance over the test store."""
    return URLShortenerService(store=store, logger=logger)


@pytest.fixture
def config():
    """Configuration with a fixed base URL."""
    return Config(base_url="http://localhost:8080")


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def domain_urls():
    """6 udemy, 3 youtube, 2 wikipedia and 1 stackoverflow URLs."""
    return (
        [f"https://udemy.com/course/{i}" for i in range(6)]
        + [f"https://youtube.com/watch?v={i}" for i in range(3)]
        + [f"https://wikipedia.org/wiki/Page_{i}" for i in range(2)]
        + ["https://stackoverflow.com/questions/1"]
    )

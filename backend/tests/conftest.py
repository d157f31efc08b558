"""Root conftest — shared test configuration.

Invariants:
    - Every test starts with none of the configuration variables set
    - get_settings() cache is cleared around every test (env changes take effect)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tareas_api.config import get_settings
from tareas_api.main import app

CONFIG_ENV_VARS = (
    "PORT", "USERNAME", "API_KEY", "DATABASE_HOST", "DATABASE_PORT",
    "LOG_LEVEL", "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client():
    """FastAPI test client over ASGI (no network)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

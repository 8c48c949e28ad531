"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, patch

from apps.catalog_api.deps import get_tool_store
from apps.catalog_api.main import app
from netbox_catalog.schemas import Tool, ToolCreate
from netbox_config.settings import Settings
from netbox_store.stores import MemoryToolStore


def make_tool(name: str = "Alpha", tool_id: int | None = None, **overrides):
    """Build a ToolCreate (or a Tool when ``tool_id`` is given) with sane defaults."""
    data = {
        "name": name,
        "description": f"{name} description",
        "category": "text",
        "image_url": f"https://example.com/{name.lower()}.png",
        "rating": 400,
        "tags": [],
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    if tool_id is not None:
        return Tool.model_validate({**data, "id": tool_id})
    return ToolCreate.model_validate(data)


@pytest.fixture
def memory_store():
    """In-memory store preloaded with the sample catalog."""
    return MemoryToolStore.with_sample_tools()


@pytest.fixture
def client(memory_store):
    """FastAPI test client backed by the in-memory store."""
    app.dependency_overrides[get_tool_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def auth_headers(settings):
    """Headers identifying a signed-in visitor."""
    return {settings.AUTH_USER_HEADER: "42"}


@pytest.fixture
def mock_redis():
    """Mock Redis client for testing."""
    mock = AsyncMock()
    mock.zremrangebyscore = AsyncMock()
    mock.zcard = AsyncMock(return_value=0)
    mock.zrange = AsyncMock(return_value=[])
    mock.zadd = AsyncMock()
    mock.expire = AsyncMock()
    return mock


@pytest.fixture(autouse=True)
def mock_redis_client(mock_redis):
    """Auto-mock Redis client for all tests."""
    with patch("apps.catalog_api.deps.get_redis_client", return_value=mock_redis):
        yield mock_redis

"""Pytest configuration and fixtures."""
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.database import get_store


@pytest.fixture
def mock_store():
    """
    Store double exposing the MongoStore interface.

    Every insert echoes its draft back, like the real store.
    """
    store = AsyncMock()
    store.insert_project.side_effect = lambda draft: draft
    store.insert_task.side_effect = lambda draft: draft
    store.insert_goal.side_effect = lambda draft: draft
    store.list_projects.return_value = []
    store.list_tasks.return_value = []
    store.list_goals.return_value = []
    return store


@pytest_asyncio.fixture
async def app_client(mock_store):
    """
    Create a test client backed by the mock store.

    This fixture:
    - Overrides the store dependency
    - Yields an async HTTP client for testing
    - Removes the override after each test
    """
    app.dependency_overrides[get_store] = lambda: mock_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()

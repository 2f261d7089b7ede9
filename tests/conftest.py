"""
Pytest fixtures for the task manager API tests.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from task_api.deps import get_comment_service, get_profile_service, get_task_service
from task_api.main import app
from task_api.services import CommentService, ProfileService, TaskManager

from .fakes import FakeCollection

# 2019-09-22 12:42:31 +07:00
NOW = 1569130951


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def task_store() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def comment_store() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def profile_store() -> FakeCollection:
    return FakeCollection(
        [
            {
                "owner_id": "o1",
                "display_name": "Owner One",
                "email": "o1@example.com",
                "display_pic": "https://example.com/o1.png",
                "create_date": NOW,
                "update_date": NOW,
            },
        ]
    )


@pytest.fixture
def task_manager(task_store, clock) -> TaskManager:
    return TaskManager(task_store, clock=clock)


@pytest.fixture
def comment_service(comment_store, clock) -> CommentService:
    return CommentService(comment_store, clock=clock)


@pytest.fixture
def profile_service(profile_store) -> ProfileService:
    return ProfileService(profile_store)


@pytest_asyncio.fixture
async def client(task_manager, comment_service, profile_service):
    """HTTP client against the app with services backed by fake collections."""
    app.dependency_overrides[get_task_service] = lambda: task_manager
    app.dependency_overrides[get_comment_service] = lambda: comment_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()

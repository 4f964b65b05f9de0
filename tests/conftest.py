"""
Contactbook — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_repository: empty InMemoryContactRepository
    ├── contact_service:   ContactService over memory_repository
    ├── mock_repository:   AsyncMock with the ContactRepository interface
    ├── sample_form_data:  a valid submitted contact form
    ├── test_client:       HTTPX AsyncClient wired to contact_service
    └── mock_client:       HTTPX AsyncClient wired to mock_repository
"""

import os

# Override settings for testing BEFORE any contactbook imports
os.environ["CONTACT_STORE"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from contactbook.main import app  # noqa: E402
from contactbook.repositories import ContactRepository, InMemoryContactRepository  # noqa: E402
from contactbook.services.contact_service import ContactService, get_contact_service  # noqa: E402


@pytest.fixture
def memory_repository():
    """A fresh, empty in-memory store per test."""
    return InMemoryContactRepository()


@pytest.fixture
def contact_service(memory_repository):
    return ContactService(memory_repository)


@pytest.fixture
def mock_repository():
    """
    Provides a mock repository.

    Usage:
        async def test_create_fails(mock_repository):
            mock_repository.create_contact.return_value = None
    """
    return AsyncMock(spec=ContactRepository)


@pytest.fixture
def sample_form_data():
    return {
        "firstName": "Ann",
        "lastName": "Lee",
        "emailAddress": "a@x.com",
        "notes": "hi",
    }


async def _client_for(service: ContactService):
    app.dependency_overrides[get_contact_service] = lambda: service
    # raise_app_exceptions=False: unexpected errors come back as the 500 response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(contact_service):
    """
    Provides an async HTTP test client backed by the in-memory store.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/contacts/")
            assert response.status_code == 200
    """
    async for client in _client_for(contact_service):
        yield client


@pytest_asyncio.fixture
async def mock_client(mock_repository):
    """HTTP client whose service talks to mock_repository."""
    async for client in _client_for(ContactService(mock_repository)):
        yield client

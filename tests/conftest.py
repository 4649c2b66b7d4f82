import os

# Settings are read at import time, so the environment must be prepared first.
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["REPOSITORY_BACKEND"] = "memory"
os.environ["LOG_JSON"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_WORK_FACTOR"] = "4"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin-password-123"
os.environ["ADMIN_SECURITY_CODE"] = "security-code-4321"
os.environ["ADMIN_FULL_NAME"] = "Site Admin"
os.environ["EMAIL_TEST_MODE"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from eventdesk.core.application import create_application
from eventdesk.core.config.settings import settings
from eventdesk.core.lifecycle import bootstrap_admin
from eventdesk.domain.services.auth.credential_service import CredentialService
from eventdesk.infrastructure.database import build_engine, create_db_and_tables
from eventdesk.infrastructure.repositories import InMemoryAdminRepository, InMemoryStore
from eventdesk.utils.i18n import setup_i18n

ADMIN_CREDENTIALS = {
    "email": "admin@example.com",
    "password": "admin-password-123",
    "securityCode": "security-code-4321",
}


@pytest.fixture(scope="session", autouse=True)
def setup_translations():
    setup_i18n()


@pytest.fixture
def credentials() -> CredentialService:
    return CredentialService(bcrypt_rounds=4)


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def app(memory_store):
    """A fresh application wired to an empty in-memory store."""
    application = create_application()
    application.state.memory_store = memory_store
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def admin_headers(memory_store, async_client):
    await bootstrap_admin(InMemoryAdminRepository(memory_store))
    response = await async_client.post("/api/admin/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def signup_and_login(async_client):
    """Returns a coroutine creating a customer account and its auth headers."""

    async def _signup_and_login(email: str = "jane@example.com", password: str = "secret1", full_name: str = "Jane Doe"):
        response = await async_client.post(
            "/api/signup", json={"fullName": full_name, "email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        login = await async_client.post("/api/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        body = login.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _signup_and_login


@pytest_asyncio.fixture
async def sql_engine():
    """An isolated in-memory SQLite database with every table created."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def settings_override(monkeypatch):
    """Temporarily overrides attributes on the global settings object."""

    def _override(**values):
        for name, value in values.items():
            monkeypatch.setattr(settings, name, value)

    return _override

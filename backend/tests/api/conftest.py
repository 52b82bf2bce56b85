"""API test fixtures — app around a fresh MemoryStorage + httpx clients.

Invariants:
    - Every test gets its own storage with the two default admins seeded
    - Each client fixture is a separate cookie jar (separate session)
    - Lifespan does not run under ASGITransport; storage is injected directly

Design Decisions:
    - Accounts created over HTTP (signup) so session cookies are real
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from hackerhire.infrastructure.memory_storage import MemoryStorage
from hackerhire.infrastructure.seed import seed_admin_users
from hackerhire.main import create_app

PASSWORD = "Secret123"


@pytest.fixture
async def storage():
    storage = MemoryStorage()
    await seed_admin_users(storage)
    return storage


@pytest.fixture
def app(storage):
    return create_app(storage)


@pytest.fixture
async def make_client(app):
    """Factory for extra independent clients; closed at teardown."""
    clients = []

    def build() -> AsyncClient:
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield build
    for ac in clients:
        await ac.aclose()


@pytest.fixture
async def client(app):
    """Anonymous client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def signup_payload():
    def build(username: str, user_type: str = "client", **overrides) -> dict:
        data = {
            "username": username,
            "email": f"{username}@example.com",
            "password": PASSWORD,
            "full_name": f"{username.title()} Person",
            "user_type": user_type,
            "terms_agreed": True,
        }
        data.update(overrides)
        return data
    return build


@asynccontextmanager
async def _signed_up(app, payload: dict):
    """Open a client, sign it up, and hand back (client, user summary)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        res = await ac.post("/api/auth/signup", json=payload)
        assert res.status_code == 201, res.text
        yield ac, res.json()["user"]


@pytest.fixture
async def admin_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        res = await ac.post(
            "/api/admin/login", json={"username": "admin", "password": "admin123"},
        )
        assert res.status_code == 200, res.text
        yield ac


@pytest.fixture
async def client_session(app, signup_payload):
    """(client, user summary) for a signed-up client account."""
    async with _signed_up(app, signup_payload("acme", "client")) as session:
        yield session


@pytest.fixture
async def hacker_session(app, signup_payload):
    """(client, user summary) for a signed-up hacker account."""
    async with _signed_up(app, signup_payload("neo", "hacker")) as session:
        yield session


@pytest.fixture
def project_payload():
    def build(**overrides) -> dict:
        data = {
            "title": "API pentest",
            "description": "Grey-box test of the public REST API",
            "requirements": "OSCP or equivalent",
            "budget": "$5,000",
            "timeframe": "2 weeks",
            "skills": ["Web Security", "API"],
        }
        data.update(overrides)
        return data
    return build


@pytest.fixture
async def project(client_session, project_payload):
    """A project posted by the `acme` client."""
    ac, _ = client_session
    res = await ac.post("/api/projects", json=project_payload())
    assert res.status_code == 201, res.text
    return res.json()

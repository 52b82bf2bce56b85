"""Storage fixtures — every contract test runs against both backends.

Invariants:
    - Each test gets a fresh store (new MemoryStorage, new in-memory SQLite engine)
    - SQL engines are disposed after the test
"""

import pytest

from hackerhire.infrastructure.database import DatabaseSessionManager
from hackerhire.infrastructure.memory_storage import MemoryStorage
from hackerhire.infrastructure.sql_storage import SqlStorage


@pytest.fixture(params=["memory", "sql"])
async def storage(request):
    if request.param == "memory":
        yield MemoryStorage()
        return
    db = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await db.create_schema()
    sql_storage = SqlStorage(db)
    yield sql_storage
    await sql_storage.dispose()


@pytest.fixture
def user_data():
    def build(username: str, user_type: str = "client", **overrides) -> dict:
        data = {
            "username": username,
            "email": f"{username}@example.com",
            "password_hash": "not-a-real-hash",
            "user_type": user_type,
            "full_name": username.title(),
        }
        data.update(overrides)
        return data
    return build


@pytest.fixture
def project_data():
    def build(client_id: int = 1, **overrides) -> dict:
        data = {
            "client_id": client_id,
            "title": "External pentest",
            "description": "Black-box test of the public API",
            "requirements": "OSCP",
            "budget": "$5,000",
            "timeframe": "3 weeks",
        }
        data.update(overrides)
        return data
    return build

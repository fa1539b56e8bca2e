"""Route test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - get_now overridden by a controllable clock (Monday 2023-01-16 09:30 by default)
    - db_manager patched for the readiness probe, which bypasses get_db
    - managed_client keeps the real get_db over a file-backed DatabaseSessionManager,
      so database errors travel the production path to the HTTP response
"""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from habitrack.api.dependencies import get_now
from habitrack.infrastructure.database import get_db, init_db, DatabaseSessionManager
import habitrack.infrastructure.database as db_module
from habitrack.main import app


class FakeClock:
    """Mutable stand-in for the server clock."""

    def __init__(self, now: datetime):
        self.now = now


@pytest.fixture
def clock():
    return FakeClock(datetime(2023, 1, 16, 9, 30))


@pytest.fixture
async def client(test_engine, test_session_factory, clock):
    """FastAPI test client with DB and clock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: clock.now

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def create_habit(client):
    """POST /habits and return the parsed response body."""
    async def _create(title: str, week_days: list[int]) -> dict:
        res = await client.post(
            "/habits", json={"title": title, "weekDays": week_days},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
async def managed_client(tmp_path, clock):
    """Test client over a real DatabaseSessionManager (no get_db override)."""
    original_manager = db_module.db_manager
    manager = init_db(f"sqlite+aiosqlite:///{tmp_path / 'habits.db'}")
    await manager.create_tables()
    app.dependency_overrides[get_now] = lambda: clock.now

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    await manager.close()
    db_module.db_manager = original_manager

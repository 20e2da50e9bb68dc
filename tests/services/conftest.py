"""Service test fixtures — file-backed SQLite store, dispatch, FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - Handlers, dispatch and the API all run against a real DatabaseSessionManager
    - The client fixture builds its own app via create_app(Settings(...)): no patching

Design Decisions:
    - File database instead of :memory: project_dashboard opens one session per
      concurrent fetch, and each pooled connection must see the same data
"""

import pytest
from httpx import ASGITransport, AsyncClient

from backlog.config import Settings
from backlog.db.base import Base
from backlog.infrastructure.database import DatabaseSessionManager
from backlog.main import create_app
import backlog.models  # noqa: F401
from backlog.services.tool_dispatch import ToolDispatch


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'backlog.db'}"


async def _create_schema(manager: DatabaseSessionManager) -> None:
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
async def db_manager(db_url):
    manager = DatabaseSessionManager(db_url)
    await _create_schema(manager)
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def dispatch(test_db, db_manager):
    return ToolDispatch(test_db, db_manager.session)


@pytest.fixture
async def project(dispatch):
    """A freshly created 'Acme Launch' project (result dict)."""
    result = await dispatch.execute(
        "project_create", {"name": "Acme Launch", "agent": "Orchestrator"},
    )
    return result["project"]


@pytest.fixture
async def app(db_url):
    application = create_app(Settings(
        database_url=db_url,
        database_password="test-password",
        log_format="text",
    ))
    await _create_schema(application.state.db_manager)
    yield application
    await application.state.db_manager.dispose()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

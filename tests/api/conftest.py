"""API test fixtures: per-test SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite file with the university tables created
    - The store is injected through create_app(store=...), never patched globally
    - failing_client uses a store whose every call raises DatabaseError

Design Decisions:
    - SQLite file over :memory:: the pooled engine hands out several connections,
      and each :memory: connection would see its own empty database
    - httpx ASGITransport does not run the lifespan, so the injected store is used as-is
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from unibridge.config import Settings
from unibridge.core.errors import DatabaseError
from unibridge.db.base import Base
from unibridge.infrastructure.database import DatabaseSessionManager
from unibridge.main import create_app
from unibridge.models import Student


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'university.db'}",
        db_name="universitydb",
        static_dir=str(tmp_path / "public"),
        log_format="text",
    )


@pytest.fixture
async def store(settings):
    manager = DatabaseSessionManager(
        settings.sqlalchemy_url, pool_size=5, max_overflow=0,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


def _client_for(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(settings, store):
    """FastAPI test client backed by the SQLite store."""
    async with _client_for(create_app(settings, store=store)) as c:
        yield c


class FailingStore:
    """Store whose every statement fails like a dropped connection."""

    def __init__(self):
        self.calls = 0

    def _fail(self):
        self.calls += 1
        raise DatabaseError("Connection or operational error", "execute")

    async def fetch_all(self, statement):
        self._fail()

    async def fetch_scalar(self, statement):
        self._fail()

    async def execute(self, statement):
        self._fail()

    async def dispose(self):
        pass


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
async def failing_client(settings, failing_store):
    async with _client_for(create_app(settings, store=failing_store)) as c:
        yield c


@pytest.fixture
def seed(store):
    """Insert ORM rows directly, bypassing the API."""

    async def _seed(*rows):
        async with store.session() as db:
            db.add_all(rows)
            await db.commit()

    return _seed


@pytest.fixture
def replace_table(store):
    """Swap a model table for one created with raw DDL, as an external store might hold it."""

    async def _replace(name: str, ddl: str, *inserts: str):
        async with store.engine.begin() as conn:
            await conn.execute(text(f'DROP TABLE "{name}"'))
            await conn.execute(text(ddl))
            for stmt in inserts:
                await conn.execute(text(stmt))

    return _replace


@pytest.fixture
def make_student():
    def _make(num: str, first: str = "Ada", last: str = "Lovelace"):
        return Student(
            studentNum=num, fName=first, lName=last,
            studentEmail=f"{num}@uni.test", studentMainPhone="555-0100",
        )
    return _make

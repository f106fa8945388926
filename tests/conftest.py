"""
Shared fixtures: a throwaway SQLite database per test and a TestClient
whose ``get_db`` dependency points at it.
"""
import asyncio
import os

import pytest

os.environ.setdefault("PORT", "8080")
os.environ.setdefault("DB_URL", "sqlite+aiosqlite://")

from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from rssagg.core.database import Base, get_db
from rssagg.main import app
import rssagg.models  # noqa: F401


@pytest.fixture()
def db_engine(tmp_path):
    db_file = tmp_path / "rssagg.db"
    # NullPool keeps connections from leaking across event loops
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", poolclass=NullPool)

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())

    yield engine

    asyncio.run(engine.dispose())


@pytest.fixture()
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture()
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(client):
    """Register a user and return its JSON view"""
    def _make_user(name="alice"):
        response = client.post("/v1/users", json={"name": name})
        assert response.status_code == 200
        return response.json()
    return _make_user


def auth(user):
    return {"Authorization": f"ApiKey {user['api_key']}"}

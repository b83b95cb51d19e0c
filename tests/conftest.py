import os

# Must be set before main is imported: it builds its module-level app from the environment
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("TRACING_ENABLED", "false")
os.environ.setdefault("METRICS_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shared.config import database
from shared.config.settings import Settings


def make_settings(**overrides) -> Settings:
    values = dict(
        store_backend="memory",
        tracing_enabled=False,
        metrics_enabled=False,
        log_level="WARNING",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client():
    """Memory-backed API seeded with the three default products."""
    with TestClient(create_app(make_settings())) as c:
        yield c


@pytest.fixture
def empty_client():
    """Memory-backed API with nothing in it."""
    with TestClient(create_app(make_settings(seed_data=False))) as c:
        yield c


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'kasir.db'}"


@pytest.fixture
def db_client(db_url):
    """Database-backed API running against a throwaway SQLite file."""
    with TestClient(create_app(make_settings(store_backend="database", db_conn=db_url))) as c:
        yield c


@pytest.fixture
async def db_session(db_url):
    await database.init_db(db_url)
    async with database.session_scope() as session:
        yield session
    await database.close_db()

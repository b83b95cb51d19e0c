from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from shared.exceptions import StoreError

logger = structlog.get_logger(__name__)

Base = declarative_base()

# Populated by init_db() on startup, cleared by close_db() on shutdown
engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[async_sessionmaker] = None


def async_database_url(connection_string: str) -> str:
    """Rewrite plain postgres URLs so SQLAlchemy picks the asyncpg driver."""
    for prefix in ("postgres://", "postgresql://"):
        if connection_string.startswith(prefix):
            return "postgresql+asyncpg://" + connection_string[len(prefix):]
    return connection_string


def asyncpg_connect_args(url: str) -> Tuple[str, Dict[str, object]]:
    """
    Move a libpq-style ``sslmode`` query parameter into asyncpg connect_args.

    asyncpg rejects unknown keyword arguments, but accepts the same mode names
    (disable, allow, prefer, require, verify-ca, verify-full) as its ``ssl`` argument.
    """
    if not url.startswith("postgresql+asyncpg://"):
        return url, {}
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    ssl_modes = [value for key, value in query if key == "sslmode"]
    if not ssl_modes:
        return url, {}
    rest = [(key, value) for key, value in query if key != "sslmode"]
    return urlunsplit(parts._replace(query=urlencode(rest))), {"ssl": ssl_modes[-1]}


async def init_db(
    connection_string: str,
    max_open_conns: int = 5,
    max_idle_conns: int = 2,
    echo: bool = False,
) -> AsyncEngine:
    """
    Open the connection pool, verify the database answers and create the tables.

    Raises on any failure so the application refuses to start without a store.
    """
    global engine, AsyncSessionLocal

    if not connection_string:
        raise ValueError("DB_CONN environment variable is not set")

    logger.info("database_connecting")
    url, connect_args = asyncpg_connect_args(async_database_url(connection_string))

    pool_options = {}
    if not url.startswith("sqlite"):
        # pool_size is the idle floor, overflow tops it up to the open limit
        pool_options = {
            "pool_size": max_idle_conns,
            "max_overflow": max(max_open_conns - max_idle_conns, 0),
        }
    new_engine = create_async_engine(url, echo=echo, connect_args=connect_args, **pool_options)

    try:
        async with new_engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        logger.error("database_ping_failed", error=str(e))
        await new_engine.dispose()
        raise

    engine = new_engine
    AsyncSessionLocal = async_sessionmaker(new_engine, expire_on_commit=False)
    logger.info("database_connected", tables=sorted(Base.metadata.tables.keys()))
    return new_engine


async def close_db() -> None:
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("database_closed")
    engine = None
    AsyncSessionLocal = None


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    if AsyncSessionLocal is None:
        raise StoreError("database is not initialised")
    async with AsyncSessionLocal() as session:
        yield session

import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def get_engine_url(url: str, access_key: str | None = None) -> str:
    """Add the async driver to a plain database URL and apply the access key."""
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif url.startswith("sqlite:///"):
        url = url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)

    if access_key:
        url = make_url(url).set(password=access_key).render_as_string(hide_password=False)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    new_engine = create_async_engine(url, echo=echo, future=True, pool_pre_ping=True)
    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False
    )


DATABASE_URL = get_engine_url(settings.DATABASE_URL, settings.DATABASE_ACCESS_KEY)
logger.debug("Async database URL: %s", make_url(DATABASE_URL).render_as_string(hide_password=True))

engine = build_engine(DATABASE_URL, echo=settings.SQL_ECHO)

AsyncSessionLocal = build_session_factory(engine)


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


def get_session_factory() -> async_sessionmaker:
    """Session factory for operations that need more than one session per request."""
    return AsyncSessionLocal

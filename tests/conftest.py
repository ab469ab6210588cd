"""
Test infrastructure for the Content API.

Strategy
--------
- SQLite in-memory via aiosqlite removes the need for a running Postgres
  instance in CI.  SQLite enforces the unique constraint on
  ``categoryKey``, so the database-level uniqueness guard is
  exercised too.  The connect/begin listeners below make SAVEPOINTs
  behave on pysqlite, the same as on PostgreSQL.
- StaticPool forces every session onto the same in-memory connection;
  a second connection would see an empty database.
- The app's get_db dependency is overridden so every request uses the
  test session factory.  ``get_content_service`` depends on get_db and
  therefore picks up the override without being overridden itself.
- All tables are created before each test and dropped after it.
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.middleware import install_query_counter
from app.services.content_service import ContentService

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)


# pysqlite defers BEGIN until the first DML statement, which breaks
# SAVEPOINT handling.  Take over transaction start so begin_nested() works.
@event.listens_for(engine_test.sync_engine, "connect")
def _disable_pysqlite_transactions(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None


@event.listens_for(engine_test.sync_engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")


async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live AsyncSession for tests that talk to the database directly."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def service(db_session: AsyncSession) -> ContentService:
    return ContentService(db_session)


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """An httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

"""
Test infrastructure for the Anonymous Board API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no running Postgres is needed.
- StaticPool keeps every async task on the same in-memory connection;
  SQLite in-memory databases are connection-scoped.
- The app's get_db dependency is overridden so every request uses the test
  session factory.
- Tables are created before each test and dropped after it.
- Password hashing uses a low-round pbkdf2 context to keep the suite fast.
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.dependencies import get_encrypt_service
from app.main import app
from app.middleware import install_query_counter
from app.services.encrypt_service import EncryptService
from app.services.post_service import PostService

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)

test_encrypt_service = EncryptService(
    CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__default_rounds=1000)
)


# ---------------------------------------------------------------------------
# Dependency overrides
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
app.dependency_overrides[get_encrypt_service] = lambda: test_encrypt_service


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
    """Live AsyncSession for tests that call the service layer directly."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def post_service(db_session: AsyncSession) -> PostService:
    return PostService(db_session, test_encrypt_service)


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from main import create_app
from framework.config import RepoBackend, Settings
from framework.repository.unit_of_work import UnitOfWork
from apps.commands.models import Command
from apps.commands.repository import SqlCommanderRepo
from apps.commands.api.router import get_commander_repo


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_settings(backend: RepoBackend) -> Settings:
    return Settings(COMMANDER_REPO=backend, APP_ENV="testing", MIGRATE_ON_STARTUP=False)


@pytest.fixture
async def test_engine():
    """In-memory database engine; one shared connection so data survives across sessions."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def async_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session with the schema in place."""
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


@pytest.fixture
def sql_repo(async_session: AsyncSession) -> SqlCommanderRepo:
    """SQL-backed repository over the test session."""
    return SqlCommanderRepo(UnitOfWork(async_session))


@pytest.fixture
async def sample_commands(async_session: AsyncSession) -> list[Command]:
    """Persist two commands directly through the session."""
    commands = [
        Command(how_to="List files", line="ls -la", platform="Linux"),
        Command(how_to="Show git status", line="git status", platform="Git"),
    ]
    async_session.add_all(commands)
    await async_session.commit()
    return commands


@pytest.fixture
async def client(async_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app on the SQL backend, wired to the test session."""
    app = create_app(make_settings(RepoBackend.SQL))

    async def _get_commander_repo():
        yield UnitOfWork(async_session).get_repository(SqlCommanderRepo)

    app.dependency_overrides[get_commander_repo] = _get_commander_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def mock_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app on the mock backend."""
    app = create_app(make_settings(RepoBackend.MOCK))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def memory_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app on the in-memory backend (fresh store per app)."""
    app = create_app(make_settings(RepoBackend.MEMORY))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

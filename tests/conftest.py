"""Shared fixtures: fake clock, in-memory store/catalog, API client, SQLite session."""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.main import app
from app.routers.api import get_clock, get_progress_store, get_task_catalog
from app.services.locks import UserLockRegistry
from app.services.progress_engine import ProgressService
from app.services.store import InMemoryProgressStore
from app.services.task_catalog import InMemoryTaskCatalog

T0 = 1_700_000_000_000
HOUR_MS = 60 * 60 * 1000


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: int = T0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms

    def set(self, ms: int) -> None:
        self.now = ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryProgressStore:
    return InMemoryProgressStore()


@pytest.fixture
def catalog() -> InMemoryTaskCatalog:
    return InMemoryTaskCatalog()


@pytest.fixture
def service(store, clock) -> ProgressService:
    return ProgressService(store, clock=clock, locks=UserLockRegistry())


@pytest.fixture
def client(store, catalog, clock):
    app.dependency_overrides[get_progress_store] = lambda: store
    app.dependency_overrides[get_task_catalog] = lambda: catalog
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as db:
        yield db
    await engine.dispose()

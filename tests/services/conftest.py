"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db, get_catalog and get_rng overridden on the app
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; JSON column behaves the same
    - Catalog is the bundled dataset, injected rather than loaded by the lifespan
      (httpx ASGITransport does not run lifespan events)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from statefacts.api.dependencies import get_catalog, get_rng
from statefacts.db.base import Base
from statefacts.infrastructure.database import get_db, DatabaseSessionManager
from statefacts.models.state_funfacts import StateFunfacts
from statefacts.services.overlay_store import SqlOverlayStore
from statefacts.services.states_service import StatesService
import statefacts.infrastructure.database as db_module
from statefacts.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return SqlOverlayStore(test_db)


@pytest.fixture
def service(catalog, store, fixed_rng):
    return StatesService(catalog, store, fixed_rng)


@pytest.fixture
async def seed_overlay(test_db):
    """Insert an overlay row directly: seed_overlay("KS", ["A", "B"])."""
    async def _seed(code: str, funfacts: list[str]) -> StateFunfacts:
        row = StateFunfacts(state_code=code, funfacts=funfacts)
        test_db.add(row)
        await test_db.commit()
        return row
    return _seed


@pytest.fixture
async def client(test_engine, test_session_factory, catalog, fixed_rng):
    """FastAPI test client with DB, catalog and random source overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_rng] = lambda: fixed_rng
    app.state.catalog = catalog

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager

"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Seed invoices mirror the two fixtures the actions care about: one with
      labels, one with a supplier logo
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.invoice_repository import SqlInvoiceRepository
from app.models.invoice import Invoice
from app.schemas.invoice import CallerContext
from app.services.invoice_actions import InvoiceActions
import app.infrastructure.database as db_module
from app.main import app


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
def fake_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine (skips __init__)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def actions(test_db):
    return InvoiceActions(SqlInvoiceRepository(test_db))


@pytest.fixture
def owner():
    return CallerContext.for_user("u1")


@pytest.fixture
def stranger():
    return CallerContext.for_user("u2")


@pytest.fixture
async def seed_invoices(test_db):
    """inv1 has labels, inv2 has a supplier logo; both owned by u1."""
    inv1 = Invoice(
        id="inv1", user_id="u1", number="2026-001",
        customer="ACME Corp", labels='["vip"]',
    )
    inv2 = Invoice(
        id="inv2", user_id="u1", number="2026-002",
        supplier_logo="http://x/logo.png",
    )
    test_db.add_all([inv1, inv2])
    await test_db.commit()
    return {"inv1": inv1, "inv2": inv2}


@pytest.fixture
def load_invoice(test_db):
    """Re-read a row from the database, bypassing the identity map."""
    async def _load(invoice_id: str) -> Invoice | None:
        result = await test_db.execute(
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()
    return _load

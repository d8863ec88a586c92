"""Service test fixtures — async DB, handlers, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for the readiness check, which bypasses get_db
    - Handler clock pinned to FIXED_NOW so "current month" is October 2026

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for handler
      and route tests (PostgreSQL-specific features not exercised here)
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from fina.core.domain_types import TransactionType
from fina.db.base import Base
from fina.infrastructure.database import get_db, DatabaseSessionManager
from fina.infrastructure.repositories import (
    SqlAlchemyCategoryRepository, SqlAlchemyTransactionRepository,
)
from fina.models.category import Category
from fina.models.transaction import Transaction
from fina.services.category_handler import CategoryHandler
from fina.services.transaction_handler import TransactionHandler
import fina.infrastructure.database as db_module
from fina.main import app
from tests.services.seed_data import ALICE, FIXED_NOW


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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


@pytest.fixture
def transaction_handler(test_db):
    return TransactionHandler(
        SqlAlchemyTransactionRepository(test_db), clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def category_handler(test_db):
    return CategoryHandler(SqlAlchemyCategoryRepository(test_db))


@pytest.fixture
async def seed_category(test_db):
    """A category owned by ALICE."""
    category = Category(user_id=ALICE, title="Groceries")
    test_db.add(category)
    await test_db.commit()
    await test_db.refresh(category)
    return category


@pytest.fixture
def add_transaction(test_db, seed_category):
    """Factory: insert a transaction directly, bypassing the handler."""
    async def _add(
        paid_on: date,
        user_id: str = ALICE,
        amount: Decimal = Decimal("-10.00"),
        title: str = "Seeded",
        kind: TransactionType = TransactionType.WITHDRAW,
    ) -> Transaction:
        transaction = Transaction(
            user_id=user_id,
            category_id=seed_category.id,
            title=title,
            type=kind.value,
            amount=amount,
            paid_or_received_at=paid_on,
            created_at=FIXED_NOW,
        )
        test_db.add(transaction)
        await test_db.commit()
        return transaction

    return _add

"""SQLAlchemy Repositories — persistence gateway over the async ORM session.

Invariants:
    - Every write commits as a single unit of work (add/update/remove)
    - find_owned filters by id AND user_id in the SQL predicate; never a
      post-fetch ownership check
    - Period queries are inclusive on both bounds, ordered by
      paid_or_received_at ascending (id breaks ties so pages are stable)

Design Decisions:
    - One generic base parameterized by model: both entities share the
      owned-record CRUD shape
    - detached=True expunges the result: read-only lookups leave nothing
      tracked in the session
"""

from datetime import date
from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fina.core.domain_types import UserId
from fina.models.category import Category
from fina.models.transaction import Transaction

ModelT = TypeVar("ModelT", Transaction, Category)


class SqlAlchemyOwnedRepository(Generic[ModelT]):
    """CRUD for records scoped by user_id."""

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self._db = db

    async def add(self, entity: ModelT) -> ModelT:
        self._db.add(entity)
        await self._db.commit()
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        self._db.add(entity)
        await self._db.commit()
        return entity

    async def remove(self, entity: ModelT) -> ModelT:
        await self._db.delete(entity)
        await self._db.commit()
        return entity

    async def find_owned(
        self, entity_id: int, user_id: UserId, detached: bool = False,
    ) -> ModelT | None:
        result = await self._db.execute(
            select(self.model).where(
                self.model.id == entity_id,
                self.model.user_id == user_id,
            ),
        )
        entity = result.scalar_one_or_none()
        if entity is not None and detached:
            self._db.expunge(entity)
        return entity

    async def rollback(self) -> None:
        await self._db.rollback()


class SqlAlchemyTransactionRepository(SqlAlchemyOwnedRepository[Transaction]):
    model = Transaction

    def _period_filter(self, user_id: UserId, start: date, end: date):
        return (
            Transaction.user_id == user_id,
            Transaction.paid_or_received_at >= start,
            Transaction.paid_or_received_at <= end,
        )

    async def find_in_period(
        self, user_id: UserId, start: date, end: date, offset: int, limit: int,
    ) -> list[Transaction]:
        result = await self._db.execute(
            select(Transaction)
            .where(*self._period_filter(user_id, start, end))
            .order_by(Transaction.paid_or_received_at.asc(), Transaction.id.asc())
            .offset(offset)
            .limit(limit),
        )
        return list(result.scalars().all())

    async def count_in_period(
        self, user_id: UserId, start: date, end: date,
    ) -> int:
        result = await self._db.execute(
            select(func.count(Transaction.id))
            .where(*self._period_filter(user_id, start, end)),
        )
        return result.scalar_one()


class SqlAlchemyCategoryRepository(SqlAlchemyOwnedRepository[Category]):
    model = Category

    async def find_by_user(
        self, user_id: UserId, offset: int, limit: int,
    ) -> list[Category]:
        result = await self._db.execute(
            select(Category)
            .where(Category.user_id == user_id)
            .order_by(Category.title.asc(), Category.id.asc())
            .offset(offset)
            .limit(limit),
        )
        return list(result.scalars().all())

    async def count_by_user(self, user_id: UserId) -> int:
        result = await self._db.execute(
            select(func.count(Category.id)).where(Category.user_id == user_id),
        )
        return result.scalar_one()

"""Transaction ORM — a single deposit or withdrawal.

Invariants:
    - id is database-assigned (autoincrement)
    - amount is signed; withdrawals are stored non-positive (enforced by handler)
    - type stores TransactionType.value ("deposit" | "withdraw")
    - created_at is set once on creation and never modified
    - category_id is not ownership-checked here (FK only)

Design Decisions:
    - paid_or_received_at as Date: period queries compare whole days, so the
      last day of a month is included regardless of time of day
    - Numeric(18, 2) for money: Decimal in, Decimal out
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from fina.db.base import Base
from fina.models.category import IdType


class Transaction(Base):
    """Transaction entity — owned by a single user."""
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_user_paid", "user_id", "paid_or_received_at"),
    )

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(160), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("categories.id"), nullable=False,
    )
    title: Mapped[str] = mapped_column(String(80), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    paid_or_received_at: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

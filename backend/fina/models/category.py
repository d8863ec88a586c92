"""Category ORM — user-defined grouping for transactions.

Invariants:
    - id is database-assigned (autoincrement)
    - title is non-nullable, at most 80 chars
    - user_id scopes every read and write

Design Decisions:
    - BigInteger ids with an Integer variant on SQLite: SQLite only
      autoincrements an INTEGER PRIMARY KEY
"""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fina.db.base import Base

IdType = BigInteger().with_variant(Integer, "sqlite")


class Category(Base):
    """Category entity — owned by a single user."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(160), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(80), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every record carries user_id; ownership is checked on every lookup

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from fina.models.category import Category  # noqa: F401
from fina.models.transaction import Transaction  # noqa: F401

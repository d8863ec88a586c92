"""Boundary Protocols — contracts between core and shell for persistence.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Owned lookups ALWAYS take both the record id and the user id; there is
      no single-key lookup, so one user cannot read another user's records
    - Any method may raise; callers map failures to a 500 envelope

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from datetime import date
from typing import Protocol, TypeVar

from fina.core.domain_types import UserId

EntityT = TypeVar("EntityT")


class OwnedRepository(Protocol[EntityT]):
    """CRUD over records owned by a user."""
    async def add(self, entity: EntityT) -> EntityT: ...
    async def update(self, entity: EntityT) -> EntityT: ...
    async def remove(self, entity: EntityT) -> EntityT: ...
    async def find_owned(
        self, entity_id: int, user_id: UserId, detached: bool = False,
    ) -> EntityT | None: ...
    async def rollback(self) -> None: ...


class TransactionRepository(OwnedRepository[EntityT], Protocol[EntityT]):
    """Contract for transaction persistence — implemented by shell."""
    async def find_in_period(
        self, user_id: UserId, start: date, end: date, offset: int, limit: int,
    ) -> list[EntityT]: ...
    async def count_in_period(
        self, user_id: UserId, start: date, end: date,
    ) -> int: ...


class CategoryRepository(OwnedRepository[EntityT], Protocol[EntityT]):
    """Contract for category persistence — implemented by shell."""
    async def find_by_user(
        self, user_id: UserId, offset: int, limit: int,
    ) -> list[EntityT]: ...
    async def count_by_user(self, user_id: UserId) -> int: ...

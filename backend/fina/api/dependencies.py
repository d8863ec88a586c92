"""Route Dependencies — caller identity, handler wiring, envelope serialization.

Invariants:
    - user_id comes from the X-User-Id header, else settings.default_user_id
    - Handlers get a fresh repository bound to the request's DB session
    - HTTP status always equals envelope.code
"""

from typing import Annotated

from fastapi import Depends, Header
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from fina.config import get_settings
from fina.infrastructure.database import get_db
from fina.infrastructure.repositories import (
    SqlAlchemyCategoryRepository, SqlAlchemyTransactionRepository,
)
from fina.schemas.envelope import Response
from fina.services.category_handler import CategoryHandler
from fina.services.transaction_handler import TransactionHandler


def get_user_id(
    x_user_id: Annotated[str | None, Header(max_length=160)] = None,
) -> str:
    """Identity of the caller. Authentication is handled upstream."""
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return get_settings().default_user_id


def get_transaction_handler(
    db: AsyncSession = Depends(get_db),
) -> TransactionHandler:
    return TransactionHandler(SqlAlchemyTransactionRepository(db))


def get_category_handler(
    db: AsyncSession = Depends(get_db),
) -> CategoryHandler:
    return CategoryHandler(SqlAlchemyCategoryRepository(db))


def envelope_response(result: Response) -> JSONResponse:
    return JSONResponse(
        status_code=result.code, content=result.model_dump(mode="json"),
    )


UserIdDep = Annotated[str, Depends(get_user_id)]
TransactionHandlerDep = Annotated[TransactionHandler, Depends(get_transaction_handler)]
CategoryHandlerDep = Annotated[CategoryHandler, Depends(get_category_handler)]

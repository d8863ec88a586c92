"""Transaction Routes — HTTP surface for TransactionHandler.

Invariants:
    - Body never carries id or user_id; both come from path and header
    - Status code mirrors the handler envelope (201/200/404/500)
"""

from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from fina.api.dependencies import (
    TransactionHandlerDep, UserIdDep, envelope_response,
)
from fina.schemas.envelope import PagedResponse, Response
from fina.schemas.transaction import (
    CreateTransactionRequest,
    DeleteTransactionRequest,
    GetTransactionByIdRequest,
    GetTransactionsByPeriodRequest,
    PeriodFilter,
    TransactionPayload,
    TransactionRead,
    UpdateTransactionRequest,
)

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


@router.post(
    "", response_model=Response[TransactionRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    body: TransactionPayload, user_id: UserIdDep, handler: TransactionHandlerDep,
):
    """Create a transaction for the caller."""
    request = CreateTransactionRequest(user_id=user_id, **body.model_dump())
    return envelope_response(await handler.create(request))


@router.get("", response_model=PagedResponse[list[TransactionRead]])
async def list_transactions(
    filters: Annotated[PeriodFilter, Query()],
    user_id: UserIdDep,
    handler: TransactionHandlerDep,
):
    """List the caller's transactions in a period (defaults to current month)."""
    request = GetTransactionsByPeriodRequest(user_id=user_id, **filters.model_dump())
    return envelope_response(await handler.get_by_period(request))


@router.get("/{transaction_id}", response_model=Response[TransactionRead])
async def get_transaction(
    transaction_id: Annotated[int, Path(ge=1)],
    user_id: UserIdDep,
    handler: TransactionHandlerDep,
):
    request = GetTransactionByIdRequest(id=transaction_id, user_id=user_id)
    return envelope_response(await handler.get_by_id(request))


@router.put("/{transaction_id}", response_model=Response[TransactionRead])
async def update_transaction(
    transaction_id: Annotated[int, Path(ge=1)],
    body: TransactionPayload,
    user_id: UserIdDep,
    handler: TransactionHandlerDep,
):
    request = UpdateTransactionRequest(
        id=transaction_id, user_id=user_id, **body.model_dump(),
    )
    return envelope_response(await handler.update(request))


@router.delete("/{transaction_id}", response_model=Response[TransactionRead])
async def delete_transaction(
    transaction_id: Annotated[int, Path(ge=1)],
    user_id: UserIdDep,
    handler: TransactionHandlerDep,
):
    request = DeleteTransactionRequest(id=transaction_id, user_id=user_id)
    return envelope_response(await handler.delete(request))

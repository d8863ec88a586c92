"""Transaction Handler — CRUD and period listing for a user's transactions.

Invariants:
    - Withdrawals with a non-negative amount are negated before persistence
      (create and update); deposits keep their sign
    - Amounts are quantized to cents before persistence, so writes and reads
      return the same value
    - Every lookup is scoped by (id, user_id); another user's id is a 404
    - created_at is set from the handler clock on create and never touched again
    - Any persistence failure yields {data: None, code: 500} with a fixed message
    - Period defaults (current month) are resolved before any query runs

Design Decisions:
    - Clock injected (defaults to UTC now): deterministic month boundaries in tests
    - Handler works against the repository Protocol, not the ORM session
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from fina.core.domain_types import UserId
from fina.core.pagination import page_offset
from fina.core.periods import resolve_period
from fina.core.repository_protocols import TransactionRepository
from fina.core.transaction_rules import normalize_amount
from fina.models.transaction import Transaction
from fina.schemas.envelope import PagedResponse, Response
from fina.schemas.transaction import (
    CreateTransactionRequest,
    DeleteTransactionRequest,
    GetTransactionByIdRequest,
    GetTransactionsByPeriodRequest,
    TransactionRead,
    UpdateTransactionRequest,
)
from fina.services.handler_support import recover_from_failure

logger = logging.getLogger(__name__)

MSG_CREATED = "Transaction created successfully."
MSG_UPDATED = "Transaction updated successfully."
MSG_DELETED = "Transaction deleted successfully."
MSG_NOT_FOUND = "Transaction not found."
MSG_CREATE_FAILED = "Unable to create the transaction."
MSG_UPDATE_FAILED = "Unable to update the transaction."
MSG_DELETE_FAILED = "Unable to delete the transaction."
MSG_GET_FAILED = "Unable to retrieve the transaction."
MSG_PERIOD_FAILED = "Unable to determine the start or end date."
MSG_LIST_FAILED = "Unable to retrieve the transactions."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionHandler:
    """Maps transaction requests to repository calls and envelopes."""

    def __init__(
        self,
        repository: TransactionRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._clock = clock

    async def create(
        self, request: CreateTransactionRequest,
    ) -> Response[TransactionRead]:
        amount = normalize_amount(request.type, request.amount)
        try:
            transaction = Transaction(
                user_id=request.user_id,
                category_id=request.category_id,
                created_at=self._clock(),
                amount=amount,
                paid_or_received_at=request.paid_or_received_at,
                title=request.title,
                type=request.type.value,
            )
            await self._repository.add(transaction)
            logger.info(
                "Transaction created",
                extra={"user_id": request.user_id, "transaction_id": transaction.id},
            )
            return Response[TransactionRead](
                data=TransactionRead.model_validate(transaction),
                code=201, message=MSG_CREATED,
            )
        except Exception:
            await recover_from_failure(
                self._repository, "create_transaction", request.user_id,
            )
            return Response[TransactionRead](code=500, message=MSG_CREATE_FAILED)

    async def update(
        self, request: UpdateTransactionRequest,
    ) -> Response[TransactionRead]:
        amount = normalize_amount(request.type, request.amount)
        try:
            transaction = await self._repository.find_owned(
                request.id, UserId(request.user_id),
            )
            if transaction is None:
                return Response[TransactionRead](code=404, message=MSG_NOT_FOUND)

            transaction.category_id = request.category_id
            transaction.amount = amount
            transaction.title = request.title
            transaction.type = request.type.value
            transaction.paid_or_received_at = request.paid_or_received_at

            await self._repository.update(transaction)
            return Response[TransactionRead](
                data=TransactionRead.model_validate(transaction),
                message=MSG_UPDATED,
            )
        except Exception:
            await recover_from_failure(
                self._repository, "update_transaction", request.user_id,
                transaction_id=request.id,
            )
            return Response[TransactionRead](code=500, message=MSG_UPDATE_FAILED)

    async def delete(
        self, request: DeleteTransactionRequest,
    ) -> Response[TransactionRead]:
        try:
            transaction = await self._repository.find_owned(
                request.id, UserId(request.user_id),
            )
            if transaction is None:
                return Response[TransactionRead](code=404, message=MSG_NOT_FOUND)

            snapshot = TransactionRead.model_validate(transaction)
            await self._repository.remove(transaction)
            logger.info(
                "Transaction deleted",
                extra={"user_id": request.user_id, "transaction_id": request.id},
            )
            return Response[TransactionRead](data=snapshot, message=MSG_DELETED)
        except Exception:
            await recover_from_failure(
                self._repository, "delete_transaction", request.user_id,
                transaction_id=request.id,
            )
            return Response[TransactionRead](code=500, message=MSG_DELETE_FAILED)

    async def get_by_id(
        self, request: GetTransactionByIdRequest,
    ) -> Response[TransactionRead]:
        try:
            transaction = await self._repository.find_owned(
                request.id, UserId(request.user_id), detached=True,
            )
            if transaction is None:
                return Response[TransactionRead](code=404, message=MSG_NOT_FOUND)
            return Response[TransactionRead](
                data=TransactionRead.model_validate(transaction),
            )
        except Exception:
            await recover_from_failure(
                self._repository, "get_transaction", request.user_id,
                transaction_id=request.id,
            )
            return Response[TransactionRead](code=500, message=MSG_GET_FAILED)

    async def get_by_period(
        self, request: GetTransactionsByPeriodRequest,
    ) -> PagedResponse[list[TransactionRead]]:
        start, end = request.start_date, request.end_date
        try:
            if start is None or end is None:
                start, end = resolve_period(start, end, self._clock().date())
        except Exception:
            logger.error(
                "Could not resolve transaction period",
                exc_info=True,
                extra={"user_id": request.user_id, "operation": "resolve_period"},
            )
            return PagedResponse[list[TransactionRead]](
                code=500, message=MSG_PERIOD_FAILED,
                page_number=request.page_number, page_size=request.page_size,
            )

        user_id = UserId(request.user_id)
        try:
            transactions = await self._repository.find_in_period(
                user_id, start, end,
                offset=page_offset(request.page_number, request.page_size),
                limit=request.page_size,
            )
            count = await self._repository.count_in_period(user_id, start, end)
            return PagedResponse[list[TransactionRead]](
                data=[TransactionRead.model_validate(t) for t in transactions],
                total_count=count,
                page_number=request.page_number,
                page_size=request.page_size,
            )
        except Exception:
            await recover_from_failure(
                self._repository, "list_transactions", request.user_id,
            )
            return PagedResponse[list[TransactionRead]](
                code=500, message=MSG_LIST_FAILED,
                page_number=request.page_number, page_size=request.page_size,
            )

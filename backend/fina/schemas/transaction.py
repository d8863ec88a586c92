"""Transaction Schemas — request models per operation, HTTP payloads, read model.

Invariants:
    - title: 1-80 chars, stripped, non-empty
    - amount: Decimal, at most 2 decimal places (sign normalized by handler)
    - type defaults to withdraw
    - Period bounds are optional; handler fills missing ones

Design Decisions:
    - TransactionPayload is the HTTP body; Create/Update requests add user_id (and id)
      so a client can never choose which user a record belongs to
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fina.core.domain_types import TransactionType
from fina.schemas.requests import PageFilter, Request


class TransactionPayload(BaseModel):
    """Writable transaction fields — the HTTP body for create and update."""
    title: str = Field(min_length=1, max_length=80)
    type: TransactionType = TransactionType.WITHDRAW
    amount: Decimal = Field(max_digits=18, decimal_places=2)
    category_id: int = Field(ge=1)
    paid_or_received_at: date

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class CreateTransactionRequest(Request, TransactionPayload):
    pass


class UpdateTransactionRequest(Request, TransactionPayload):
    id: int = Field(ge=1)


class DeleteTransactionRequest(Request):
    id: int = Field(ge=1)


class GetTransactionByIdRequest(Request):
    id: int = Field(ge=1)


class PeriodFilter(PageFilter):
    """Query-string model for period listing."""
    start_date: date | None = None
    end_date: date | None = None


class GetTransactionsByPeriodRequest(Request, PeriodFilter):
    pass


class TransactionRead(BaseModel):
    """Transaction as returned to callers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    category_id: int
    title: str
    type: TransactionType
    amount: Decimal
    paid_or_received_at: date
    created_at: datetime

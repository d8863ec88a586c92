"""Request Models — field-level validation at the boundary.

Tests cover:
    - Titles are stripped; blank and over-long titles rejected
    - Transaction type defaults to withdraw
    - Amount limited to 2 decimal places
    - Paging bounds and defaults; page_number capped so OFFSET fits 64 bits
    - user_id must be non-empty
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from fina.core.domain_types import TransactionType
from fina.schemas.category import CreateCategoryRequest, GetAllCategoriesRequest
from fina.schemas.requests import DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER, MAX_PAGE_SIZE
from fina.schemas.transaction import (
    CreateTransactionRequest,
    GetTransactionsByPeriodRequest,
    TransactionPayload,
)


def _transaction(**overrides) -> dict:
    fields = {
        "user_id": "alice@fina.io",
        "title": "Market",
        "amount": Decimal("12.30"),
        "category_id": 1,
        "paid_or_received_at": date(2026, 10, 1),
    }
    fields.update(overrides)
    return fields


def test_transaction_type_defaults_to_withdraw():
    assert CreateTransactionRequest(**_transaction()).type == TransactionType.WITHDRAW


def test_title_is_stripped():
    assert CreateTransactionRequest(**_transaction(title="  Market  ")).title == "Market"


@pytest.mark.parametrize("title", ["", "   ", "x" * 81])
def test_invalid_titles_rejected(title):
    with pytest.raises(ValidationError):
        CreateTransactionRequest(**_transaction(title=title))


def test_amount_precision_limited():
    with pytest.raises(ValidationError):
        CreateTransactionRequest(**_transaction(amount=Decimal("1.234")))


def test_paid_or_received_at_required():
    fields = _transaction()
    del fields["paid_or_received_at"]
    with pytest.raises(ValidationError):
        CreateTransactionRequest(**fields)


def test_empty_user_id_rejected():
    with pytest.raises(ValidationError):
        CreateTransactionRequest(**_transaction(user_id=""))


def test_payload_has_no_identity_fields():
    assert "user_id" not in TransactionPayload.model_fields
    assert "id" not in TransactionPayload.model_fields


def test_period_request_defaults():
    request = GetTransactionsByPeriodRequest(user_id="alice@fina.io")
    assert request.start_date is None
    assert request.end_date is None
    assert request.page_number == 1
    assert request.page_size == DEFAULT_PAGE_SIZE


@pytest.mark.parametrize("paging", [
    {"page_number": 0},
    {"page_number": MAX_PAGE_NUMBER + 1},
    {"page_number": 10**19},
    {"page_size": 0},
    {"page_size": MAX_PAGE_SIZE + 1},
])
def test_paging_bounds(paging):
    with pytest.raises(ValidationError):
        GetAllCategoriesRequest(user_id="alice@fina.io", **paging)


def test_category_description_optional():
    request = CreateCategoryRequest(user_id="alice@fina.io", title="Pets")
    assert request.description is None


def test_largest_page_number_is_accepted():
    request = GetAllCategoriesRequest(
        user_id="alice@fina.io", page_number=MAX_PAGE_NUMBER, page_size=MAX_PAGE_SIZE,
    )
    assert (request.page_number - 1) * request.page_size < 2**63

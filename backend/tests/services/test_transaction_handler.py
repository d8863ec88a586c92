"""Transaction Handler — create/update/delete/get against a real (SQLite) session.

Tests cover:
    - Withdraw amounts >= 0 are negated on create and update; negatives kept
    - Deposit amounts are stored as supplied, even negative ones
    - Create returns 201 with created_at from the handler clock
    - Update overwrites mutable fields and keeps id/user_id/created_at
    - Delete returns last-known values and removes the row
    - Absent and foreign (other user's) ids return 404 with no data
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select

from fina.core.domain_types import TransactionType
from fina.models.transaction import Transaction
from fina.schemas.transaction import (
    CreateTransactionRequest,
    DeleteTransactionRequest,
    GetTransactionByIdRequest,
    UpdateTransactionRequest,
)
from tests.services.seed_data import ALICE, BOB, FIXED_NOW


def _create_request(category_id: int, **overrides) -> CreateTransactionRequest:
    fields = {
        "user_id": ALICE,
        "category_id": category_id,
        "title": "Supermarket",
        "type": TransactionType.WITHDRAW,
        "amount": Decimal("150.00"),
        "paid_or_received_at": date(2026, 10, 5),
    }
    fields.update(overrides)
    return CreateTransactionRequest(**fields)


async def _stored_amount(test_db, transaction_id: int) -> Decimal:
    result = await test_db.execute(
        select(Transaction.amount).where(Transaction.id == transaction_id),
    )
    return result.scalar_one()


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_201_with_record(transaction_handler, seed_category):
    result = await transaction_handler.create(_create_request(seed_category.id))

    assert result.code == 201
    assert result.is_success
    assert result.data is not None
    assert result.data.id is not None
    assert result.data.user_id == ALICE
    assert result.data.category_id == seed_category.id
    assert result.data.title == "Supermarket"
    assert result.data.created_at == FIXED_NOW


@pytest.mark.parametrize("amount, expected", [
    (Decimal("150.00"), Decimal("-150.00")),
    (Decimal("0"), Decimal("0")),
    (Decimal("-42.50"), Decimal("-42.50")),
])
async def test_create_withdraw_is_stored_non_positive(
    transaction_handler, seed_category, test_db, amount, expected,
):
    result = await transaction_handler.create(
        _create_request(seed_category.id, amount=amount),
    )

    assert result.data.amount == expected
    assert await _stored_amount(test_db, result.data.id) == expected


@pytest.mark.parametrize("amount", [Decimal("99.90"), Decimal("-5.00")])
async def test_create_deposit_is_stored_unchanged(
    transaction_handler, seed_category, test_db, amount,
):
    result = await transaction_handler.create(
        _create_request(
            seed_category.id, type=TransactionType.DEPOSIT, amount=amount,
        ),
    )

    assert result.data.type == TransactionType.DEPOSIT
    assert result.data.amount == amount
    assert await _stored_amount(test_db, result.data.id) == amount


async def test_create_does_not_mutate_request(transaction_handler, seed_category):
    request = _create_request(seed_category.id, amount=Decimal("20.00"))
    await transaction_handler.create(request)
    assert request.amount == Decimal("20.00")


async def test_create_does_not_check_category_ownership(
    transaction_handler, seed_category,
):
    """Category belongs to ALICE; BOB may still reference it at this layer."""
    result = await transaction_handler.create(
        _create_request(seed_category.id, user_id=BOB),
    )
    assert result.code == 201
    assert result.data.user_id == BOB


# ─── update ──────────────────────────────────────────────────────

async def test_update_overwrites_fields_and_keeps_identity(
    transaction_handler, add_transaction, seed_category,
):
    existing = await add_transaction(date(2026, 10, 1), amount=Decimal("-10.00"))

    result = await transaction_handler.update(UpdateTransactionRequest(
        id=existing.id,
        user_id=ALICE,
        category_id=seed_category.id,
        title="Salary",
        type=TransactionType.DEPOSIT,
        amount=Decimal("3000.00"),
        paid_or_received_at=date(2026, 10, 10),
    ))

    assert result.code == 200
    assert result.data.id == existing.id
    assert result.data.user_id == ALICE
    assert result.data.title == "Salary"
    assert result.data.type == TransactionType.DEPOSIT
    assert result.data.amount == Decimal("3000.00")
    assert result.data.paid_or_received_at == date(2026, 10, 10)
    assert result.data.created_at == FIXED_NOW


async def test_update_negates_withdraw_amount(
    transaction_handler, add_transaction, seed_category, test_db,
):
    existing = await add_transaction(date(2026, 10, 1))

    result = await transaction_handler.update(UpdateTransactionRequest(
        id=existing.id,
        user_id=ALICE,
        category_id=seed_category.id,
        title="Rent",
        type=TransactionType.WITHDRAW,
        amount=Decimal("1200.00"),
        paid_or_received_at=date(2026, 10, 2),
    ))

    assert result.data.amount == Decimal("-1200.00")
    assert await _stored_amount(test_db, existing.id) == Decimal("-1200.00")


async def test_update_missing_returns_404(transaction_handler, seed_category):
    result = await transaction_handler.update(UpdateTransactionRequest(
        id=9999,
        user_id=ALICE,
        category_id=seed_category.id,
        title="Ghost",
        amount=Decimal("1.00"),
        paid_or_received_at=date(2026, 10, 2),
    ))
    assert result.code == 404
    assert result.data is None


async def test_update_other_users_transaction_returns_404(
    transaction_handler, add_transaction, seed_category, test_db,
):
    existing = await add_transaction(date(2026, 10, 1), amount=Decimal("-10.00"))

    result = await transaction_handler.update(UpdateTransactionRequest(
        id=existing.id,
        user_id=BOB,
        category_id=seed_category.id,
        title="Hijack",
        amount=Decimal("1.00"),
        paid_or_received_at=date(2026, 10, 2),
    ))

    assert result.code == 404
    assert result.data is None
    assert await _stored_amount(test_db, existing.id) == Decimal("-10.00")


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_returns_last_known_values(
    transaction_handler, add_transaction, test_db,
):
    existing = await add_transaction(date(2026, 10, 3), title="Coffee")

    result = await transaction_handler.delete(
        DeleteTransactionRequest(id=existing.id, user_id=ALICE),
    )

    assert result.code == 200
    assert result.data.id == existing.id
    assert result.data.title == "Coffee"
    remaining = await test_db.execute(
        select(Transaction).where(Transaction.id == existing.id),
    )
    assert remaining.scalar_one_or_none() is None


async def test_delete_other_users_transaction_returns_404(
    transaction_handler, add_transaction, test_db,
):
    existing = await add_transaction(date(2026, 10, 3))

    result = await transaction_handler.delete(
        DeleteTransactionRequest(id=existing.id, user_id=BOB),
    )

    assert result.code == 404
    assert result.data is None
    still_there = await test_db.execute(
        select(Transaction).where(Transaction.id == existing.id),
    )
    assert still_there.scalar_one_or_none() is not None


# ─── get_by_id ───────────────────────────────────────────────────

async def test_get_by_id_returns_record(transaction_handler, add_transaction):
    existing = await add_transaction(date(2026, 10, 4), title="Books")

    result = await transaction_handler.get_by_id(
        GetTransactionByIdRequest(id=existing.id, user_id=ALICE),
    )

    assert result.code == 200
    assert result.message is None
    assert result.data.title == "Books"


async def test_get_by_id_missing_returns_404(transaction_handler):
    result = await transaction_handler.get_by_id(
        GetTransactionByIdRequest(id=12345, user_id=ALICE),
    )
    assert result.code == 404
    assert result.data is None


async def test_get_by_id_other_user_returns_404(transaction_handler, add_transaction):
    existing = await add_transaction(date(2026, 10, 4))

    result = await transaction_handler.get_by_id(
        GetTransactionByIdRequest(id=existing.id, user_id=BOB),
    )

    assert result.code == 404
    assert result.data is None

"""Transaction Rules — sign normalization for withdrawal amounts.

Invariants:
    - A withdrawal is never stored with a positive amount
    - Deposits keep their value and sign (no positive forcing)
    - Amounts are quantized to cents, the scale of the amount column
    - Pure: returns a new Decimal, never mutates the request
"""

from decimal import Decimal

from fina.core.domain_types import TransactionType

CENTS = Decimal("0.01")


def normalize_amount(transaction_type: TransactionType, amount: Decimal) -> Decimal:
    """Quantize to cents, then negate a non-negative withdrawal amount."""
    amount = amount.quantize(CENTS)
    if transaction_type == TransactionType.WITHDRAW and amount >= 0:
        return -amount
    return amount

"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps str — every lookup is scoped by it
    - Transaction kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and stores in a String column without converters
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class TransactionType(str, Enum):
    """Direction of money movement. Withdrawals are stored non-positive."""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"

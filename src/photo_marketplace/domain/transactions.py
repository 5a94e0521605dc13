"""Domain models for bookkeeping transactions."""

from dataclasses import dataclass
from datetime import datetime

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = frozenset({INCOME, EXPENSE})

TRANSACTION_CATEGORIES = (
    "session",
    "equipment",
    "subscription",
    "rent",
    "utilities",
    "transport",
    "marketing",
    "education",
    "other",
)


@dataclass(frozen=True)
class TransactionRecord:
    """Income or expense event. `amount` is an unsigned amount in cents."""

    id: int
    user_id: int
    amount: int
    description: str
    category: str
    date: datetime
    type: str
    session_id: int | None = None

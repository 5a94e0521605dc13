"""Bookkeeping transactions owned by photographers."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

from photo_marketplace.adapters.field_mapping import TRANSACTIONS
from photo_marketplace.domain.models import UserRecord
from photo_marketplace.domain.sessions import SessionRecord
from photo_marketplace.domain.transactions import (
    EXPENSE,
    INCOME,
    TransactionRecord,
)
from photo_marketplace.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from photo_marketplace.services.money import normalize_minor_units
from photo_marketplace.services.validation import validate_payload

logger = logging.getLogger(__name__)

TransactionType = Literal["income", "expense"]
TransactionCategory = Literal[
    "session",
    "equipment",
    "subscription",
    "rent",
    "utilities",
    "transport",
    "marketing",
    "education",
    "other",
]


class TransactionRepository(Protocol):
    """Persistence interface for transactions."""

    def list_transactions(self, user_id: int) -> list[TransactionRecord]:
        """Return every transaction of a photographer."""

    def get_transaction(self, transaction_id: int) -> TransactionRecord | None:
        """Return a transaction by id, if present."""

    def create_transaction(self, payload: dict[str, object]) -> TransactionRecord:
        """Insert a transaction row and return it."""

    def update_transaction(
        self, transaction_id: int, payload: dict[str, object]
    ) -> TransactionRecord | None:
        """Apply a column patch and return the updated row."""

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction row."""


class SessionReader(Protocol):
    """Read access to sessions for linking transactions."""

    def get_session(self, session_id: int) -> SessionRecord | None:
        """Return a session by id, if present."""


class TransactionCreate(BaseModel):
    """Validated column payload for a new transaction."""

    model_config = ConfigDict(extra="ignore")

    amount: float
    description: str = Field(min_length=3)
    category: TransactionCategory
    date: datetime
    type: TransactionType
    session_id: int | None = None


class TransactionPatch(BaseModel):
    """Validated partial column payload for a transaction update."""

    model_config = ConfigDict(extra="ignore")

    amount: float | None = None
    description: str | None = Field(default=None, min_length=3)
    category: TransactionCategory | None = None
    date: datetime | None = None
    type: TransactionType | None = None
    session_id: int | None = None


def signed_amount(transaction: TransactionRecord) -> int:
    """Return the amount with the sign implied by its type."""
    magnitude = abs(transaction.amount)
    return -magnitude if transaction.type == EXPENSE else magnitude


def _unsigned_amount(amount: int, transaction_type: str) -> int:
    if amount >= 0:
        return amount
    if transaction_type == INCOME:
        raise ValidationError("Validation error: amount: income must not be negative")
    return abs(amount)


@dataclass
class TransactionService:
    """Application service for a photographer's bookkeeping."""

    repository: TransactionRepository
    sessions: SessionReader

    def list_transactions(self, requester: UserRecord) -> list[TransactionRecord]:
        """Return the requester's transactions, newest first."""
        self._require_photographer(requester)
        transactions = self.repository.list_transactions(requester.id)
        return sorted(transactions, key=lambda item: item.date, reverse=True)

    def create_transaction(
        self,
        requester: UserRecord,
        payload: dict[str, object],
        money_unit: str | None = None,
    ) -> TransactionRecord:
        """Record income or an expense for the requester."""
        self._require_photographer(requester)
        validated = validate_payload(TransactionCreate, payload, TRANSACTIONS)
        if validated.session_id is not None:
            self._check_session(requester, validated.session_id)

        columns = validated.model_dump()
        amount = normalize_minor_units(validated.amount, money_unit)
        columns["amount"] = _unsigned_amount(amount or 0, validated.type)
        columns["user_id"] = requester.id
        return self.repository.create_transaction(columns)

    def update_transaction(
        self,
        requester: UserRecord,
        transaction_id: int,
        patch: dict[str, object],
        money_unit: str | None = None,
    ) -> TransactionRecord:
        """Update a transaction the requester owns."""
        existing = self._get_owned(requester, transaction_id)
        validated = validate_payload(TransactionPatch, patch, TRANSACTIONS)
        changes = {
            key: value
            for key, value in validated.model_dump(exclude_unset=True).items()
            if value is not None or key == "session_id"
        }
        if not changes:
            return existing
        if changes.get("session_id") is not None:
            self._check_session(requester, int(changes["session_id"]))
        if "amount" in changes:
            amount = normalize_minor_units(changes["amount"], money_unit)
            changes["amount"] = _unsigned_amount(
                amount or 0, str(changes.get("type", existing.type))
            )
        updated = self.repository.update_transaction(transaction_id, changes)
        if updated is None:
            raise NotFoundError("Transaction not found")
        return updated

    def delete_transaction(self, requester: UserRecord, transaction_id: int) -> None:
        """Delete a transaction the requester owns."""
        self._get_owned(requester, transaction_id)
        self.repository.delete_transaction(transaction_id)

    def _get_owned(
        self, requester: UserRecord, transaction_id: int
    ) -> TransactionRecord:
        self._require_photographer(requester)
        transaction = self.repository.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction not found")
        if transaction.user_id != requester.id:
            logger.warning(
                "Transaction access denied",
                extra={"user_id": requester.id, "transaction_id": transaction_id},
            )
            raise PermissionDeniedError(
                "You don't have permission to modify this transaction"
            )
        return transaction

    def _check_session(self, requester: UserRecord, session_id: int) -> None:
        session = self.sessions.get_session(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        if session.photographer_id != requester.id:
            raise PermissionDeniedError("Session belongs to another photographer")

    @staticmethod
    def _require_photographer(requester: UserRecord) -> None:
        if not requester.is_photographer:
            raise PermissionDeniedError("Only photographers can manage transactions")

"""Supabase repository for bookkeeping transactions."""

from dataclasses import dataclass

from supabase import Client

from photo_marketplace.adapters.supabase_rows import (
    first_row,
    serialize,
    to_datetime,
    to_int,
)
from photo_marketplace.domain.transactions import TransactionRecord
from photo_marketplace.services.transactions import TransactionRepository


@dataclass
class SupabaseTransactionRepository(TransactionRepository):
    """Supabase implementation for transactions."""

    client: Client

    def list_transactions(self, user_id: int) -> list[TransactionRecord]:
        """Return a photographer's transactions, newest first."""
        response = (
            self.client.table("transactions")
            .select("*")
            .eq("user_id", user_id)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_transaction(row) for row in response.data or []]

    def get_transaction(self, transaction_id: int) -> TransactionRecord | None:
        response = (
            self.client.table("transactions")
            .select("*")
            .eq("id", transaction_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_transaction(response.data[0])

    def create_transaction(self, payload: dict[str, object]) -> TransactionRecord:
        response = (
            self.client.table("transactions").insert(serialize(payload)).execute()
        )
        return _parse_transaction(first_row(response.data, "create transaction"))

    def update_transaction(
        self, transaction_id: int, payload: dict[str, object]
    ) -> TransactionRecord | None:
        response = (
            self.client.table("transactions")
            .update(serialize(payload))
            .eq("id", transaction_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_transaction(response.data[0])

    def delete_transaction(self, transaction_id: int) -> None:
        self.client.table("transactions").delete().eq("id", transaction_id).execute()


def _parse_transaction(row: dict[str, object]) -> TransactionRecord:
    return TransactionRecord(
        id=to_int(row["id"]),
        user_id=to_int(row["user_id"]),
        amount=to_int(row.get("amount")) or 0,
        description=str(row.get("description") or ""),
        category=str(row.get("category") or "other"),
        date=to_datetime(row.get("date")),
        type=str(row.get("type")),
        session_id=to_int(row.get("session_id")),
    )
